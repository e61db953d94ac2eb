import pytest

from printfmt.convert import ConversionError
from printfmt.printf import printf, sprintf


def test_plain_text_is_unchanged():
    assert sprintf("hello world") == "hello world"


def test_empty_template():
    assert sprintf("") == ""


def test_decimal_conversion():
    assert sprintf("n=%d;", 42) == "n=42;"


def test_string_conversion():
    assert sprintf("[%s]", "abc") == "[abc]"


def test_percent_literal_takes_no_argument():
    assert sprintf("100%% %d", 7) == "100% 7"


def test_several_conversions_in_order():
    assert sprintf("%s-%d-%c", "x", 5, "y") == "x-5-y"


def test_width_applies_to_string():
    result = sprintf("%5s|", "ab")
    assert result == "   ab|"
    assert len(result) == 6


def test_left_justified_width():
    assert sprintf("%-4d|", 3) == "3   |"


def test_nul_character_is_written():
    assert sprintf("%c", 0) == "\0"


def test_padded_nul_character_right_aligned():
    assert sprintf("%3c", 0) == "  \0"


def test_padded_nul_character_left_aligned():
    assert sprintf("%-3c", 0) == "\0  "


def test_unsupported_conversion_raises():
    with pytest.raises(ConversionError):
        sprintf("%y", 1)


def test_error_raised_before_any_output(capsys):
    with pytest.raises(ConversionError):
        printf("start %d %y", 1, 2)
    assert capsys.readouterr().out == ""


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_extra_arguments_are_ignored():
    assert sprintf("%d", 1, 2, 3) == "1"


def test_printf_writes_and_counts(capsys):
    count = printf("%s=%d\n", "value", 10)
    out = capsys.readouterr().out
    assert out == "value=10\n"
    assert count == len(out)


def test_printf_counts_nul(capsys):
    count = printf("a%cb", 0)
    assert count == 3
    assert capsys.readouterr().out == "a\0b"