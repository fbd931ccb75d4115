"""State machine of one flash session: trigger codes and stimulus stepping."""

from __future__ import annotations

import enum
import logging
import random
from typing import Protocol

from oddflash.sequence import Stimulus, make_sequence

log = logging.getLogger(__name__)

DEFAULT_FLASH_INTERVAL = 500
DEFAULT_FLASH_DURATION = 300
DEFAULT_MAX_FLASHES = 10


class Signal(enum.IntEnum):
    """Trigger codes sent to the recording host."""

    START = 0x00
    END = 0xFF
    GRAY = 0x01
    COLOR = 0x02


_STIMULUS_SIGNAL = {
    Stimulus.STANDARD: Signal.GRAY,
    Stimulus.DEVIANT: Signal.COLOR,
}


class TriggerSender(Protocol):
    """Anything that can report availability and send a trigger code."""

    def is_available(self) -> bool: ...

    def send(self, port: int, data: int) -> bool: ...


class FlashSession:
    """Steps through a stimulus sequence, sending a trigger for each flash.

    A session is started with ``start``; each call to ``step`` shows the next
    stimulus. The step after the last flash sends the end code, resets the
    session and returns ``None``.
    """

    def __init__(
        self,
        sender: TriggerSender,
        port_address: int = 8888,
        rng: random.Random | None = None,
    ) -> None:
        self._sender = sender
        self._rng = rng
        self.port_address = port_address
        self.flash_interval = DEFAULT_FLASH_INTERVAL
        self.flash_duration = DEFAULT_FLASH_DURATION
        self.max_flashes = DEFAULT_MAX_FLASHES
        self.current_flashes = 0
        self.sequence: list[Stimulus] = []
        self._running = False
        self._finished = False

    def start(
        self,
        flash_interval: int,
        flash_duration: int,
        max_flashes: int,
        port_address: int,
    ) -> list[Stimulus]:
        """Begin a session and return the stimulus sequence it will show."""
        self.port_address = port_address
        if self._sender.is_available():
            self._sender.send(self.port_address, Signal.START)
        self.flash_interval = flash_interval
        self.flash_duration = flash_duration
        self.max_flashes = max_flashes
        self.current_flashes = 0
        self.sequence = make_sequence(max_flashes, self._rng)
        self._running = True
        self._finished = False
        return list(self.sequence)

    def step(self) -> Stimulus | None:
        """Show the next stimulus, or end the session when all were shown."""
        if not self._running:
            raise RuntimeError("flash session is not running")
        if self.current_flashes >= self.max_flashes:
            if self._sender.is_available():
                self._sender.send(self.port_address, Signal.END)
            self.reset()
            return None
        stimulus = self.sequence[self.current_flashes]
        self._sender.send(self.port_address, _STIMULUS_SIGNAL[stimulus])
        self.current_flashes += 1
        return stimulus

    def reset(self) -> None:
        """Stop the session and clear its progress."""
        self.current_flashes = 0
        self.sequence = []
        if self._running:
            self._finished = True
        self._running = False

    def period(self) -> int:
        """Milliseconds between the starts of two flashes."""
        return self.flash_interval + self.flash_duration

    def finished(self) -> bool:
        """Whether a started session has ended."""
        return self._finished