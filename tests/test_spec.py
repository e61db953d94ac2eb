import pytest

from printfmt.spec import Flags, Length, Spec, parse_spec, parse_template


def test_plain_conversion_has_defaults():
    spec = parse_spec("d")
    assert spec.conversion == "d"
    assert spec.width == -1
    assert spec.precision == -1
    assert spec.has_width is False
    assert spec.has_precision is False
    assert spec.length == Length.NONE
    assert spec.flags == Flags()


def test_all_flags():
    spec = parse_spec("-+ #0d")
    assert spec.flags == Flags(minus=True, plus=True, space=True, zero=True, pound=True)
    assert spec.conversion == "d"


def test_width_and_precision():
    spec = parse_spec("10.4f")
    assert spec.has_width is True
    assert spec.width == 10
    assert spec.has_precision is True
    assert spec.precision == 4
    assert spec.conversion == "f"


def test_dot_without_digits_means_zero_precision():
    spec = parse_spec("5.s")
    assert spec.has_precision is True
    assert spec.precision == 0
    assert spec.width == 5


def test_leading_zero_is_a_flag_not_width():
    spec = parse_spec("05d")
    assert spec.flags.zero is True
    assert spec.width == 5


@pytest.mark.parametrize(
    "text, length, conversion",
    [
        ("hhd", Length.HH, "d"),
        ("hd", Length.H, "d"),
        ("ld", Length.L, "d"),
        ("lld", Length.LL, "d"),
        ("Lf", Length.LONG_DOUBLE, "f"),
        ("x", Length.NONE, "x"),
    ],
)
def test_length_modifiers(text, length, conversion):
    spec = parse_spec(text)
    assert spec.length == length
    assert spec.conversion == conversion


def test_text_is_kept():
    spec = parse_spec("-8.3lx")
    assert spec.text == "-8.3lx"
    assert spec.flags.minus is True
    assert spec.width == 8
    assert spec.precision == 3


def test_empty_text_has_no_conversion():
    spec = parse_spec("")
    assert spec.conversion == ""
    assert spec.has_width is False


def test_template_specs_in_order():
    specs = parse_template("a %d b %5.2f %%")
    assert [s.text for s in specs] == ["d", "5.2f", "%"]
    assert [s.conversion for s in specs] == ["d", "f", "%"]


def test_template_without_specs():
    assert parse_template("plain text") == []


def test_unterminated_spec_takes_rest():
    specs = parse_template("x %5")
    assert len(specs) == 1
    assert specs[0].text == "5"
    assert specs[0].conversion == ""


def test_each_spec_text_follows_a_percent():
    template = "%-4c|%+.3i|%#o|%hhu|%lX|%p"
    specs = parse_template(template)
    assert len(specs) == template.count("%")
    for spec in specs:
        assert "%" + spec.text in template
        assert isinstance(spec, Spec)
        assert spec.text.endswith(spec.conversion)