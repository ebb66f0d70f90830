"""Calendar dates as stored in the workshop's record files."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Callable, ClassVar

_LAYOUT = struct.Struct("<iii")


def _ask_int(ask: Callable[[str], str], prompt: str) -> int:
    answer = ask(prompt).split()
    if not answer:
        raise ValueError(f"expected a whole number for {prompt.strip()!r}")
    try:
        return int(answer[0])
    except ValueError:
        raise ValueError(
            f"expected a whole number for {prompt.strip()!r}, got {answer[0]!r}"
        ) from None


@dataclass(frozen=True)
class Date:
    """A day, month and year, with no validation of the calendar."""

    day: int = 1
    month: int = 1
    year: int = 2024

    RECORD_SIZE: ClassVar[int] = _LAYOUT.size

    def _key(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def is_after(self, other: Date) -> bool:
        """Return True if this date falls strictly after ``other``."""
        return self._key() > other._key()

    def is_same(self, other: Date) -> bool:
        """Return True if both dates have the same day, month and year."""
        return self._key() == other._key()

    def format(self) -> str:
        """Render the date as ``day/month/year`` without zero padding."""
        return f"{self.day}/{self.month}/{self.year}"

    def to_bytes(self) -> bytes:
        """Encode the date as three little-endian 32-bit integers."""
        try:
            return _LAYOUT.pack(self.day, self.month, self.year)
        except struct.error as exc:
            raise ValueError(f"date field out of range: {exc}") from None

    @classmethod
    def from_bytes(cls, data: bytes) -> Date:
        """Decode a date written by :meth:`to_bytes`."""
        if len(data) != _LAYOUT.size:
            raise ValueError(
                f"a date record is {_LAYOUT.size} bytes, got {len(data)}"
            )
        return cls(*_LAYOUT.unpack(data))


def prompt_date(ask: Callable[[str], str]) -> Date:
    """Ask for day, month and year in turn and build a date from the answers."""
    day = _ask_int(ask, "INGRESAR DIA: ")
    month = _ask_int(ask, "INGRESAR MES: ")
    year = _ask_int(ask, "INGRESAR ANIO: ")
    return Date(day, month, year)