import curses
from unittest import mock

from combat_tracker.creature import Creature
from combat_tracker.help import HELP_BLURB, help_lines
from combat_tracker.tracker import Mode, ModeKind, Tracker, instructions
from combat_tracker.ui import key_from_curses, main, render, run, table_rows


class FakeScreen:
    def __init__(self, height=30, width=120, keys=()):
        self.height = height
        self.width = width
        self.keys = list(keys)
        self.refreshes = 0
        self.erase()

    def erase(self):
        self.cells = [[" "] * self.width for _ in range(self.height)]
        self.attrs = [[0] * self.width for _ in range(self.height)]

    def getmaxyx(self):
        return self.height, self.width

    def addstr(self, y, x, text, attr=0):
        for offset, ch in enumerate(text):
            if not (0 <= y < self.height and 0 <= x + offset < self.width):
                raise curses.error("out of bounds")
            self.cells[y][x + offset] = ch
            self.attrs[y][x + offset] = attr

    def refresh(self):
        self.refreshes += 1

    def nodelay(self, flag):
        pass

    def get_wch(self):
        if not self.keys:
            raise curses.error("no input")
        key = self.keys.pop(0)
        if key is None:
            raise curses.error("no input")
        return key

    def row(self, y):
        return "".join(self.cells[y])


def test_table_rows_follow_creatures_and_selection():
    tracker = Tracker()
    tracker.select(1)
    rows = table_rows(tracker)
    assert [cells for cells, _ in rows] == [c.columns() for c in tracker.creatures]
    assert [selected for _, selected in rows] == [False, True, False]


def test_table_rows_without_selection():
    tracker = Tracker([Creature(name="Orc")])
    assert table_rows(tracker) == [(tracker.creatures[0].columns(), False)]


def test_printable_characters_keep_their_name():
    assert key_from_curses("x") == "x"
    assert key_from_curses(ord("j")) == "j"


def test_alt_does_not_change_the_name():
    assert key_from_curses("j", True) == key_from_curses("j", False)


def test_backspace_variants_agree():
    names = {key_from_curses(code) for code in ("\x7f", "\x08", 127, curses.KEY_BACKSPACE)}
    assert len(names) == 1


def test_enter_variants_agree():
    names = {key_from_curses(code) for code in ("\n", "\r", 10, curses.KEY_ENTER)}
    assert len(names) == 1


def test_resize_and_control_codes_are_ignored():
    assert key_from_curses(curses.KEY_RESIZE) is None
    assert key_from_curses("\x01") is None


def test_backspace_key_edits_name():
    tracker = Tracker()
    tracker.select(0)
    tracker.handle_key("r")
    tracker.handle_key(key_from_curses(curses.KEY_BACKSPACE))
    assert tracker.creatures[0].name == "Goblin"[:-1]


def test_escape_key_quits():
    tracker = Tracker()
    tracker.handle_key(key_from_curses("\x1b"))
    assert tracker.running is False


def test_arrow_key_moves_notes_cursor():
    tracker = Tracker()
    tracker.select(0)
    tracker.handle_key("n")
    tracker.handle_key(key_from_curses(curses.KEY_END))
    assert tracker.notes.cursor == (0, len("Very gobliny"))


def test_render_normal_shows_creatures():
    tracker = Tracker()
    screen = FakeScreen()
    render(screen, tracker)
    assert "Creatures" in screen.row(0)
    for row, creature in enumerate(tracker.creatures, start=1):
        assert creature.name in screen.row(row)
    assert screen.refreshes == 1


def test_render_reverses_selected_row():
    tracker = Tracker()
    tracker.select(1)
    screen = FakeScreen()
    render(screen, tracker)
    assert tracker.creatures[1].name in screen.row(2)
    assert (screen.attrs[2][1] & curses.A_REVERSE) == curses.A_REVERSE
    assert (screen.attrs[1][1] & curses.A_REVERSE) == 0


def test_render_banner_matches_mode():
    tracker = Tracker()
    tracker.mode = Mode(ModeKind.SORT)
    screen = FakeScreen()
    render(screen, tracker)
    banner = "".join(text for text, _ in instructions(tracker.mode)).strip()
    assert banner in screen.row(screen.height - 1)


def test_render_help_screen():
    tracker = Tracker()
    tracker.mode = Mode(ModeKind.HELP)
    screen = FakeScreen(height=40)
    render(screen, tracker)
    assert screen.row(0).startswith(HELP_BLURB.splitlines()[0])
    assert "Hotkeys" in screen.row(9)
    assert screen.row(10).startswith(help_lines()[0][0][0])


def test_render_on_tiny_screen_clips():
    tracker = Tracker()
    screen = FakeScreen(height=4, width=12)
    render(screen, tracker)
    assert all(len(screen.row(y)) == 12 for y in range(4))
    assert screen.refreshes == 1


def test_run_moves_then_quits():
    screen = FakeScreen(keys=["j", "\x1b", None])
    tracker = run(screen, Tracker())
    assert tracker.selected == 0
    assert tracker.running is False
    assert screen.refreshes == 2


def test_run_help_and_back():
    screen = FakeScreen(keys=["?", "\x1b", None, "\x1b", None])
    tracker = run(screen, Tracker())
    assert tracker.mode.kind is ModeKind.NORMAL
    assert tracker.running is False


def test_run_alt_prefixed_key_is_plain_key():
    screen = FakeScreen(keys=["\x1b", "j", "\x1b", None])
    tracker = run(screen, Tracker())
    assert tracker.selected == 0
    assert tracker.running is False


def test_main_starts_tracker_and_creates_log(tmp_path):
    log_file = tmp_path / "tracker.log"
    with mock.patch("combat_tracker.ui.curses.wrapper") as wrapper:
        result = main(["--log-file", str(log_file)])
    assert result == 0
    assert log_file.exists()
    func, tracker = wrapper.call_args.args
    assert func is run
    assert [c.name for c in tracker.creatures] == ["Goblin", "Chodlin", "Boblin"]