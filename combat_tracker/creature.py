"""Creatures on the combat tracker and pending health adjustments."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_i32(text: str) -> int:
    """Parse a signed 32-bit integer, raising ValueError on bad input or overflow."""
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    value = int(text)
    if not _I32_MIN <= value <= _I32_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


@dataclass(frozen=True)
class HealthShift:
    """A pending change to a creature's health, shown as ``+N`` or ``-N``."""

    magnitude: int
    increase: bool

    def apply(self, health: int) -> int:
        """Return ``health`` with this shift applied."""
        if self.increase:
            return health + self.magnitude
        return health - self.magnitude

    def __str__(self) -> str:
        sign = "+" if self.increase else "-"
        return f"{sign}{self.magnitude}"


def parse_health_shift(text: str) -> HealthShift:
    """Parse a signed number; positive values increase health, others decrease it."""
    value = _parse_i32(text)
    if value > 0:
        return HealthShift(value, increase=True)
    return HealthShift(-value, increase=False)


@dataclass
class Creature:
    """One participant in a combat."""

    name: str = ""
    health: int = 0
    health_shift: HealthShift | None = None
    initiative: int = 0
    notes: str = ""
    notes_cursor: tuple[int, int] = (0, 0)

    def health_label(self) -> str:
        """Health as shown in the table, with any pending shift after it."""
        if self.health_shift is None:
            return str(self.health)
        return f"{self.health} {self.health_shift}"

    def name_label(self) -> str:
        """Name as shown in the table; an empty name is shown as ``<empty>``."""
        return self.name or "<empty>"

    def columns(self) -> tuple[str, str, str]:
        """The initiative, name and health cells of this creature's table row."""
        return str(self.initiative), self.name_label(), self.health_label()

    def commit_shift(self) -> None:
        """Apply the pending health shift and clear it."""
        if self.health_shift is None:
            raise ValueError("creature has no pending health shift")
        self.health = self.health_shift.apply(self.health)
        self.health_shift = None

    def duplicate(self) -> Creature:
        """Return an independent copy of this creature."""
        return replace(self)