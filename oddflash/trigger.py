"""TCP trigger client that marks stimulus events for a recording host."""

from __future__ import annotations

import logging
import socket
import struct
from types import TracebackType

log = logging.getLogger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8888
DEFAULT_TIMEOUT = 3.0


def encode_short(data: int) -> bytes:
    """Encode a trigger value as a big-endian signed 16-bit integer."""
    try:
        return struct.pack(">h", data)
    except struct.error as exc:
        raise ValueError(f"{data!r} does not fit in a signed 16-bit value") from exc


class TriggerClient:
    """Sends trigger codes over TCP, reconnecting when the target port changes.

    The connection is attempted when the client is created. If it fails, the
    client stays unavailable and every later ``send`` is dropped.
    """

    def __init__(
        self,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.host = host
        self.timeout = timeout
        self._sock: socket.socket | None = None
        self._peer_port: int | None = None
        self._available = self._connect(port)
        if self._available:
            log.info("Connected to server: %s:%s", host, port)

    def _connect(self, port: int) -> bool:
        try:
            sock = socket.create_connection((self.host, port), timeout=self.timeout)
        except (OSError, OverflowError) as exc:
            log.warning("Failed to connect to %s:%s: %s", self.host, port, exc)
            return False
        self._sock = sock
        self._peer_port = port
        return True

    def _disconnect(self) -> None:
        if self._sock is not None:
            try:
                self._sock.close()
            finally:
                self._sock = None
                self._peer_port = None
                log.info("Disconnected from server.")

    def is_available(self) -> bool:
        """Whether the client currently holds a usable connection."""
        return self._available

    def send(self, port: int, data: int) -> bool:
        """Send ``data`` to ``port`` on the host; return whether it was written."""
        payload = encode_short(data)
        log.debug("Sending data: %s to port: %s", data, port)
        if not self._available:
            log.warning("Cannot send data: TCP connection not available.")
            return False
        if self._peer_port != port:
            self._disconnect()
            if not self._connect(port):
                self._available = False
                return False
        assert self._sock is not None
        try:
            self._sock.sendall(payload)
        except OSError as exc:
            log.warning("Failed to send data: %s", exc)
            self._available = False
            return False
        log.debug("Sent %d bytes.", len(payload))
        return True

    def close(self) -> None:
        """Drop the connection; the client is unavailable afterwards."""
        self._disconnect()
        self._available = False

    def __enter__(self) -> TriggerClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()