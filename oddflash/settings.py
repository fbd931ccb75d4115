"""Validation and parsing of the flash-session settings form."""

from __future__ import annotations

import re
from dataclasses import dataclass

MIN_VALUE = 1
MAX_VALUE = 10000

DEFAULT_PORT_TEXT = "8888"
DEFAULT_INTERVAL_TEXT = "500"
DEFAULT_DURATION_TEXT = "500"
DEFAULT_MAX_FLASHES_TEXT = "120"

_HEX_PORT = re.compile(r"^0x[0-9A-Fa-f]{1,4}$")
_DECIMAL = re.compile(r"^[+-]?\d+$")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class SettingsError(ValueError):
    """A settings field holds text that is not acceptable."""


def _to_short(value: int) -> int:
    return ((value + 0x8000) & 0xFFFF) - 0x8000


def parse_port_address(text: str) -> int:
    """Parse a hexadecimal port address of the form ``0x`` plus 1 to 4 digits."""
    text = text.strip()
    if not _HEX_PORT.match(text):
        raise SettingsError(f"port address must look like 0x378, got {text!r}")
    return int(text, 16)


def parse_confirmed_port(text: str) -> int:
    """Read the port the way the confirm action does.

    The text is read as a decimal number and narrowed to a signed 16-bit
    value; text that is not a decimal integer gives 0.
    """
    text = text.strip()
    if not _DECIMAL.match(text):
        return 0
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        return 0
    return _to_short(value)


def parse_bounded_int(text: str, name: str) -> int:
    """Parse a decimal integer between 1 and 10000 inclusive."""
    stripped = text.strip()
    if not _DECIMAL.match(stripped):
        raise SettingsError(f"{name} must be an integer, got {text!r}")
    value = int(stripped)
    if not MIN_VALUE <= value <= MAX_VALUE:
        raise SettingsError(
            f"{name} must be between {MIN_VALUE} and {MAX_VALUE}, got {value}"
        )
    return value


@dataclass(frozen=True)
class Settings:
    """Parameters of one flash session."""

    port_address: int = 8888
    flash_interval: int = 500
    flash_duration: int = 500
    max_flashes: int = 120

    @classmethod
    def from_text(
        cls,
        port_address: str = DEFAULT_PORT_TEXT,
        flash_interval: str = DEFAULT_INTERVAL_TEXT,
        flash_duration: str = DEFAULT_DURATION_TEXT,
        max_flashes: str = DEFAULT_MAX_FLASHES_TEXT,
    ) -> Settings:
        """Build settings from the raw text of the form fields."""
        return cls(
            port_address=parse_confirmed_port(port_address),
            flash_interval=parse_bounded_int(flash_interval, "flash interval"),
            flash_duration=parse_bounded_int(flash_duration, "flash duration"),
            max_flashes=parse_bounded_int(max_flashes, "max flashes"),
        )