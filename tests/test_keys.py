import curses

from speedtyper.cursor import EventKind, InputEvent
from speedtyper.keys import decode_key


def test_printable_characters_become_character_events() -> None:
    assert decode_key("a") == InputEvent.character("a")
    assert decode_key("Z") == InputEvent.character("Z")
    assert decode_key("é") == InputEvent.character("é")
    assert decode_key(";") == InputEvent.character(";")


def test_space_backspace_and_escape() -> None:
    assert decode_key(" ") == InputEvent.space()
    assert decode_key("\x7f") == InputEvent.backspace()
    assert decode_key("\b") == InputEvent.backspace()
    assert decode_key(curses.KEY_BACKSPACE) == InputEvent.backspace()
    assert decode_key(curses.KEY_DC) == InputEvent.backspace()
    decoded = decode_key("\x1b")
    assert decoded is not None and decoded.kind is EventKind.QUIT


def test_other_keys_are_ignored() -> None:
    for key in ("\n", "\t", "\x01", curses.KEY_LEFT, curses.KEY_RESIZE, curses.KEY_ENTER):
        assert decode_key(key) is None
