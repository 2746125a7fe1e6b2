# combat-tracker

A small, keyboard-only combat tracker for tabletop role-playing sessions,
running in the terminal. It keeps a list of creatures with their initiative,
health and free-form notes, and is operated entirely through modal hotkeys.

It draws with the standard library's `curses` module, so it needs a terminal
where `curses` is available (Linux, macOS and other POSIX systems). It has no
third-party dependencies.

## Installation

```
pip install .
```

## Usage

Start the tracker:

```
combat-tracker
```

Key presses are logged to `info.log` in the current directory; the file is
overwritten on each start. Use `--log-file PATH` to write the log elsewhere:

```
combat-tracker --log-file /tmp/tracker.log
```

The tracker starts with three sample creatures. The screen shows a table of
creatures (initiative, name, health, with any pending health change after the
health) and a notes panel for the selected creature. A banner at the bottom of
the notes panel lists the keys for the current mode. Press `?` in normal mode
for the full hotkey list.

### Normal mode

| Key      | Action                               |
|----------|--------------------------------------|
| `?`      | Open the help screen                 |
| `Esc`    | Quit                                 |
| `j` `k`  | Move down / up (wrapping)            |
| `J` `K`  | Jump to the last / first creature    |
| `a`      | Add a creature and start naming it   |
| `r`      | Rename the selected creature         |
| `c`      | Duplicate the selected creature      |
| `d`      | Delete the selected creature         |
| `i`      | Set initiative                       |
| `h`      | Set health                           |
| `-` `+`  | Subtract from / add to health        |
| `n`      | Edit notes                           |
| `s`      | Sort creatures                       |

Moving the selection loads that creature's notes into the notes panel.

### Editing modes

When renaming, typed characters are appended to the name and `Backspace`
removes the last one. When setting initiative or health, or entering a health
change after `-` or `+`, only digits and `Backspace` change the number; a
number that no longer fits becomes 0. `Enter` confirms (a health change is
then applied to the creature's health) and `Esc` cancels, restoring the
previous value or dropping the pending change.

### Notes editor

Type to edit the notes. `Enter` breaks the line, `Tab` inserts spaces up to
the next multiple of four, `Backspace` and `Delete` erase, and the arrow keys,
`Home` and `End` move the cursor. `Esc` stores the notes and the cursor
position on the creature and returns to normal mode.

### Sort mode

`i`, `h` or `n` sort by initiative, health or name in ascending order; the
shifted letter (`I`, `H`, `N`) sorts in descending order. Sorting is stable.
`Esc` cancels.

### Help screen

Shows a short introduction and the hotkey list. `Esc` returns to normal mode.

## Using it as a library

The pieces behind the interface can be used on their own. Keys are passed as
names such as `"Enter"`, `"Esc"`, `"Backspace"` or a single character.

```python
from combat_tracker.creature import Creature, parse_health_shift
from combat_tracker.tracker import Tracker, default_creatures

tracker = Tracker()
tracker.select(0)
tracker.handle_key("-")
tracker.handle_key("3")
tracker.handle_key("Enter")
print(tracker.hovered().health_label())  # 2

tracker.sort_by("name", reverse=False)

shift = parse_health_shift("-4")
print(shift, shift.apply(10))  # -4 6
```

- `combat_tracker.creature`: `Creature` and `HealthShift`, plus
  `parse_health_shift`.
- `combat_tracker.notes`: `NotesEditor`, the multi-line editor behind the
  notes panel.
- `combat_tracker.tracker`: `Tracker` with its modes (`Mode`, `ModeKind`),
  `instructions` for the bottom banner and `default_creatures`.
- `combat_tracker.help`: the hotkey entries and `help_lines`.
- `combat_tracker.ui`: the curses front end (`render`, `run`, `main`).

## What it does not do

The tracker keeps everything in memory only: creatures and notes are not
saved when it quits, and there is no way to load an encounter from a file.

## Running the tests

```
pip install ".[test]"
pytest
```