from combat_tracker.help import (
    HELP_BLURB,
    HOTKEYS,
    Divider,
    Embed,
    Label,
    Style,
    help_lines,
)


def _text(line):
    return "".join(text for text, _ in line)


def test_first_line_is_normal_mode_heading():
    assert help_lines()[0] == [("In normal mode", Style.HEADING)]


def test_line_count_adds_blank_line_per_spaced_divider():
    spaced = sum(1 for hk in HOTKEYS if isinstance(hk, Divider) and hk.newline)
    assert len(help_lines()) == len(HOTKEYS) + spaced


def test_spaced_dividers_follow_blank_line():
    lines = help_lines()
    for hotkey in HOTKEYS:
        if isinstance(hotkey, Divider) and hotkey.newline:
            index = lines.index([(hotkey.text, Style.HEADING)])
            assert lines[index - 1] == []


def test_label_line_highlights_keys():
    lines = help_lines()
    assert [("Add health: ", Style.PLAIN), ("+", Style.KEY)] in lines


def test_embed_line_reads_as_sentence():
    texts = [_text(line) for line in help_lines()]
    assert "Sort by (N)ame" in texts


def test_key_segments_come_from_hotkeys():
    keys = {hk.keys for hk in HOTKEYS if isinstance(hk, Label)}
    keys |= {hk.color for hk in HOTKEYS if isinstance(hk, Embed)}
    highlighted = {text for line in help_lines() for text, style in line if style is Style.KEY}
    assert highlighted == keys


def test_last_line_returns_to_normal_mode():
    assert _text(help_lines()[-1]) == "Return to normal mode: Esc"


def test_blurb_fits_reserved_area():
    assert HELP_BLURB.startswith("Howdy partner")
    assert len(HELP_BLURB.splitlines()) <= 8