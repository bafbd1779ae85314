import pytest

from helpdesk.scanner import Scanner


def test_read_char_skips_whitespace():
    scanner = Scanner("  \n\tA U")
    assert scanner.read_char() == "A"
    assert scanner.read_char() == "U"


def test_read_char_at_end_raises():
    scanner = Scanner("   \n")
    with pytest.raises(EOFError):
        scanner.read_char()


def test_read_line_skips_leading_blank_lines():
    scanner = Scanner("\n\n  RANKING TECNICOS\nnext")
    assert scanner.read_line() == "RANKING TECNICOS"
    assert scanner.read_line() == "next"


def test_read_line_at_end_raises():
    with pytest.raises(EOFError):
        Scanner("\n \n").read_line()


def test_read_rest_of_line_empty_when_on_newline():
    scanner = Scanner("SOFTWARE\nname here")
    assert scanner.read_line() == "SOFTWARE"
    assert scanner.read_rest_of_line() == ""
    scanner.skip_whitespace()
    assert scanner.read_rest_of_line() == "name here"


def test_read_rest_of_line_keeps_leading_spaces():
    scanner = Scanner("  spaced\n")
    assert scanner.read_rest_of_line() == "  spaced"


def test_read_int_and_float():
    scanner = Scanner(" 42\n-7 \n 1500.50\n3")
    assert scanner.read_int() == 42
    assert scanner.read_int() == -7
    assert scanner.read_float() == pytest.approx(1500.5)
    assert scanner.read_float() == pytest.approx(3.0)


def test_read_int_rejects_text():
    with pytest.raises(ValueError):
        Scanner("abc").read_int()


def test_read_int_at_end_raises_eof():
    with pytest.raises(EOFError):
        Scanner("  ").read_int()


def test_at_end_ignores_trailing_whitespace():
    scanner = Scanner("F\n\n  ")
    assert not scanner.at_end()
    assert scanner.read_char() == "F"
    assert scanner.at_end()