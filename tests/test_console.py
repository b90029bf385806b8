import io

import pytest

from rockmarket.console import Console


def make_console(text, **kwargs):
    out = io.StringIO()
    return Console(stdin=io.StringIO(text), stdout=out, **kwargs), out


def test_read_token_spans_lines():
    console, _ = make_console("one two\n\n  three\n")
    assert [console.read_token() for _ in range(3)] == ["one", "two", "three"]


def test_read_token_raises_at_end():
    console, _ = make_console("only\n")
    assert console.read_token() == "only"
    with pytest.raises(EOFError):
        console.read_token()


def test_read_int_and_float():
    console, _ = make_console("42 3.5\n")
    assert console.read_int() == 42
    assert console.read_float() == 3.5


def test_read_int_rejects_words():
    console, _ = make_console("abc\n")
    with pytest.raises(ValueError):
        console.read_int()


def test_write_is_verbatim():
    console, out = make_console("")
    console.write("Day: ")
    console.write("Rock Market\n")
    assert out.getvalue() == "Day: Rock Market\n"


def test_pause_uses_sleeper():
    calls = []
    console, _ = make_console("", sleep=calls.append)
    console.pause(4)
    assert calls == [4]


def test_wait_enter_discards_rest_of_line_and_one_more():
    console, _ = make_console("1 leftover words\n\nnext\n")
    assert console.read_token() == "1"
    console.wait_enter()
    assert console.read_token() == "next"


def test_clear_off_for_plain_stream():
    console, out = make_console("")
    console.clear()
    assert out.getvalue() == ""


def test_clear_forced_writes_escape():
    console, out = make_console("", clear_screen=True)
    console.clear()
    assert out.getvalue().startswith("\033[")