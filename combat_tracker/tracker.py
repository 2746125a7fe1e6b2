"""The combat tracker's state and its modal keyboard handling."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum

from .creature import Creature, _parse_i32
from .notes import NotesEditor

logger = logging.getLogger(__name__)


class ModeKind(Enum):
    HELP = "help"
    NORMAL = "normal"
    RENAME = "rename"
    SET_HEALTH = "set_health"
    SET_INITIATIVE = "set_initiative"
    HEALTH_SHIFT = "health_shift"
    EDIT_NOTES = "edit_notes"
    SORT = "sort"


@dataclass(frozen=True)
class Mode:
    """The current mode, with the value to restore if an edit is cancelled."""

    kind: ModeKind
    previous: str | int | None = None


_CONFIRM_CANCEL = [(" Confirm: ", False), ("Enter", True), (", Cancel: ", False), ("Esc ", True)]


def instructions(mode: Mode) -> list[tuple[str, bool]]:
    """The help banner for a mode as ``(text, highlighted)`` segments."""
    kind = mode.kind
    if kind is ModeKind.HELP:
        raise ValueError("help mode has no instructions banner")
    if kind is ModeKind.NORMAL:
        return [(" Exit: ", False), ("Esc", True), (" Help: ", False), ("? ", True)]
    if kind is ModeKind.SORT:
        return [
            (" Press letter to determine order, shift reverses: (", False),
            ("I", True),
            (")nitiative, (", False),
            ("H", True),
            (")ealth, (", False),
            ("N", True),
            (")ame or ", False),
            ("Esc", True),
            ("to cancel", False),
        ]
    if kind is ModeKind.EDIT_NOTES:
        return [
            (" Confirm: ", False),
            ("Enter", True),
            (" (use alt to break lines), Cancel: ", False),
            ("Esc ", True),
        ]
    return list(_CONFIRM_CANCEL)


def default_creatures() -> list[Creature]:
    """The creatures a new tracker starts with."""
    return [
        Creature(name="Goblin", health=5, notes="Very gobliny"),
        Creature(name="Chodlin", health=4, notes="Cousin of Boblin"),
        Creature(name="Boblin", health=4, notes="The goblin"),
    ]


def _edited_number(value: int, key: str) -> int | None:
    """The number after a digit or backspace key; 0 where it no longer parses."""
    if key == "Backspace":
        text = str(value)[:-1]
    elif len(key) == 1 and key in "0123456789":
        text = str(value) + key
    else:
        return None
    try:
        return _parse_i32(text)
    except ValueError:
        return 0


_SORT_KEYS = {
    "initiative": lambda creature: creature.initiative,
    "health": lambda creature: creature.health,
    "name": lambda creature: creature.name,
}

_SORT_LETTERS = {"i": "initiative", "h": "health", "n": "name"}


class Tracker:
    """Creatures in a fight, the hovered row, and the current mode."""

    def __init__(self, creatures: list[Creature] | None = None) -> None:
        self.creatures = default_creatures() if creatures is None else list(creatures)
        self.running = True
        self.mode = Mode(ModeKind.NORMAL)
        self.selected: int | None = None
        self.notes = NotesEditor()

    def hovered(self) -> Creature | None:
        """The creature on the selected row, if any."""
        if self.selected is None or not 0 <= self.selected < len(self.creatures):
            return None
        return self.creatures[self.selected]

    def _require_hovered(self) -> Creature:
        creature = self.hovered()
        if creature is None:
            raise RuntimeError("no creature is selected")
        return creature

    def select(self, index: int) -> None:
        """Select a row and load its creature's notes into the editor."""
        self.selected = index
        creature = self._require_hovered()
        self.notes = NotesEditor(creature.notes)
        self.notes.jump(*creature.notes_cursor)

    def sort_by(self, field: str, reverse: bool) -> None:
        """Stably sort creatures by initiative, health or name."""
        try:
            key = _SORT_KEYS[field]
        except KeyError:
            raise ValueError(f"cannot sort by {field!r}") from None
        self.creatures.sort(key=key, reverse=reverse)

    def handle_key(self, key: str) -> None:
        """Apply one key press in the current mode."""
        logger.info("Key press - %r", key)
        handlers = {
            ModeKind.NORMAL: self._normal_key,
            ModeKind.RENAME: self._rename_key,
            ModeKind.EDIT_NOTES: self._notes_key,
            ModeKind.SET_HEALTH: self._health_key,
            ModeKind.SET_INITIATIVE: self._initiative_key,
            ModeKind.HEALTH_SHIFT: self._shift_key,
            ModeKind.HELP: self._help_key,
            ModeKind.SORT: self._sort_key,
        }
        handlers[self.mode.kind](key)

    def _normal_key(self, key: str) -> None:
        count = len(self.creatures)
        creature = self.hovered()
        if key == "Esc":
            self.running = False
        elif key == "?":
            self.mode = Mode(ModeKind.HELP)
        elif key == "s":
            self.mode = Mode(ModeKind.SORT)
        elif key in ("K", "k", "j", "J"):
            if count:
                self.select(self._navigation_target(key, count))
        elif key == "a":
            self.creatures.append(Creature())
            self.selected = len(self.creatures) - 1
            self.mode = Mode(ModeKind.RENAME, "")
        elif creature is None:
            return
        elif key == "r":
            self.mode = Mode(ModeKind.RENAME, creature.name)
        elif key == "n":
            self.mode = Mode(ModeKind.EDIT_NOTES)
        elif key == "c":
            self.creatures.insert(self.selected + 1, creature.duplicate())
        elif key == "d":
            self._delete_hovered()
        elif key == "h":
            self.mode = Mode(ModeKind.SET_HEALTH, creature.health)
        elif key == "i":
            self.mode = Mode(ModeKind.SET_INITIATIVE, creature.initiative)
        elif key in ("-", "+"):
            creature.health_shift = _zero_shift(increase=key == "+")
            self.mode = Mode(ModeKind.HEALTH_SHIFT)

    def _navigation_target(self, key: str, count: int) -> int:
        if key == "K":
            return 0
        if key == "J":
            return count - 1
        if key == "k":
            current = self.selected or 0
            return count - 1 if current == 0 else current - 1
        return (0 if self.selected is None else self.selected + 1) % count

    def _delete_hovered(self) -> None:
        index = self.selected
        del self.creatures[index]
        if not self.creatures:
            self.selected = None
        elif len(self.creatures) == index:
            self.selected = len(self.creatures) - 1

    def _rename_key(self, key: str) -> None:
        creature = self._require_hovered()
        if key == "Enter":
            self.mode = Mode(ModeKind.NORMAL)
        elif key == "Esc":
            creature.name = str(self.mode.previous)
            self.mode = Mode(ModeKind.NORMAL)
        elif key == "Backspace":
            creature.name = creature.name[:-1]
        elif len(key) == 1:
            creature.name += key

    def _notes_key(self, key: str) -> None:
        if key == "Esc":
            creature = self._require_hovered()
            creature.notes = self.notes.text()
            creature.notes_cursor = self.notes.cursor
            self.mode = Mode(ModeKind.NORMAL)
        else:
            self.notes.handle_key(key)

    def _field_key(self, key: str, attribute: str) -> None:
        creature = self._require_hovered()
        if key == "Enter":
            self.mode = Mode(ModeKind.NORMAL)
        elif key == "Esc":
            setattr(creature, attribute, self.mode.previous)
            self.mode = Mode(ModeKind.NORMAL)
        else:
            value = _edited_number(getattr(creature, attribute), key)
            if value is not None:
                setattr(creature, attribute, value)

    def _health_key(self, key: str) -> None:
        self._field_key(key, "health")

    def _initiative_key(self, key: str) -> None:
        self._field_key(key, "initiative")

    def _shift_key(self, key: str) -> None:
        creature = self._require_hovered()
        shift = creature.health_shift
        if shift is None:
            raise RuntimeError("no health shift in progress")
        if key == "Enter":
            creature.commit_shift()
            self.mode = Mode(ModeKind.NORMAL)
        elif key == "Esc":
            creature.health_shift = None
            self.mode = Mode(ModeKind.NORMAL)
        else:
            value = _edited_number(shift.magnitude, key)
            if value is not None:
                creature.health_shift = replace(shift, magnitude=value)

    def _help_key(self, key: str) -> None:
        if key == "Esc":
            self.mode = Mode(ModeKind.NORMAL)

    def _sort_key(self, key: str) -> None:
        if key == "Esc":
            self.mode = Mode(ModeKind.NORMAL)
            return
        field = _SORT_LETTERS.get(key.lower()) if len(key) == 1 else None
        if field is None:
            return
        self.sort_by(field, reverse=key.isupper())
        self.mode = Mode(ModeKind.NORMAL)


def _zero_shift(increase: bool):
    from .creature import HealthShift

    return HealthShift(0, increase=increase)