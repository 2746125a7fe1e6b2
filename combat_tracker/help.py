"""The help screen: an introduction and the list of hotkeys."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Style(Enum):
    """How a piece of help text is drawn."""

    PLAIN = "plain"
    HEADING = "heading"
    KEY = "key"


Segment = tuple[str, Style]


@dataclass(frozen=True)
class Divider:
    """A bold heading, optionally preceded by a blank line."""

    text: str
    newline: bool


@dataclass(frozen=True)
class Embed:
    """A description with its hotkey embedded, as in ``(A)dd``."""

    pre: str
    color: str
    post: str


@dataclass(frozen=True)
class Label:
    """A description followed by the keys that trigger it."""

    label: str
    keys: str


HotKey = Union[Divider, Embed, Label]

HELP_BLURB = """\
Howdy partner, this is a combat tracker I use for my Pathfinder 2e games.
It's designed for me and since I'm a bit of a power user, so it's a modal
system that's exclusively keyboard operated.

Normal mode is the most complex. Besides that most modes have like three shoftcuts.
Most modes have a banner at the bottom with some help.

Best of luck
"""

HOTKEYS: tuple[HotKey, ...] = (
    Divider("In normal mode", newline=False),
    Label("Open this help message", "?"),
    Label("Quit", "Esc"),
    Label("Move", "JjkK"),
    Embed("", "A", "dd a creature"),
    Embed("", "R", "ename a creature"),
    Embed("", "C", "opy (duplicate) a creature"),
    Embed("", "D", "elete a creature"),
    Embed("Set ", "i", "nitiative of a creature"),
    Embed("Set ", "H", "health a creature"),
    Label("Subtract health", "-"),
    Label("Add health", "+"),
    Embed("", "S", "ort creatures"),
    Divider("In most editing modes", newline=True),
    Label("Confirm", "Enter"),
    Label("Cancel", "Esc"),
    Divider("In sort mode (shift inverts direction)", newline=True),
    Embed("Sort by ", "I", "nitiative"),
    Embed("Sort by ", "H", "ealth"),
    Embed("Sort by ", "N", "ame"),
    Label("Cancel", "Esc"),
    Divider("In help mode", newline=True),
    Label("Return to normal mode", "Esc"),
)


def _hotkey_lines(hotkey: HotKey) -> list[list[Segment]]:
    match hotkey:
        case Divider(text=text, newline=newline):
            heading = [(text, Style.HEADING)]
            return [[], heading] if newline else [heading]
        case Embed(pre=pre, color=color, post=post):
            return [[(f"{pre}(", Style.PLAIN), (color, Style.KEY), (f"){post}", Style.PLAIN)]]
        case Label(label=label, keys=keys):
            return [[(f"{label}: ", Style.PLAIN), (keys, Style.KEY)]]
    raise TypeError(f"not a hotkey entry: {hotkey!r}")


def help_lines() -> list[list[Segment]]:
    """The hotkey list as lines of styled segments; a blank line is an empty list."""
    return [line for hotkey in HOTKEYS for line in _hotkey_lines(hotkey)]