import pytest

from pfmt.convert import (
    add_blank,
    add_hashtag,
    add_hex_prefix,
    add_minus_sign,
    add_plus,
    apply_flag_options,
    convert_argument,
    render_directive,
)
from pfmt.spec import Directive, parse_directive


def spec_of(fmt):
    spec = parse_directive(fmt, 0)
    assert spec is not None
    return spec


def test_negative_int_drops_sign_and_records_it():
    spec = spec_of("%d")
    assert convert_argument(spec, -7) == str(7)
    assert spec.is_positive is False
    assert spec.zero_value is False


def test_zero_int_sets_zero_value():
    spec = spec_of("%i")
    assert convert_argument(spec, 0) == str(0)
    assert spec.zero_value is True


def test_int_wraps_to_32_bits():
    spec = spec_of("%d")
    assert convert_argument(spec, 2**31) == str(2**31)
    assert spec.is_positive is False


def test_hex_lower_and_upper():
    assert convert_argument(spec_of("%x"), 255) == format(255, "x")
    assert convert_argument(spec_of("%X"), 255) == format(255, "X")


def test_octal_and_unsigned():
    assert convert_argument(spec_of("%o"), 8) == format(8, "o")
    assert convert_argument(spec_of("%u"), -1) == str(2**32 - 1)


def test_pointer_null_and_value():
    spec = spec_of("%p")
    assert convert_argument(spec, 0) == "(nil)"
    assert spec.zero_value is True
    assert convert_argument(spec_of("%p"), 4096) == format(4096, "x")


def test_string_none_and_value():
    assert convert_argument(spec_of("%s"), None) == "(null)"
    assert convert_argument(spec_of("%s"), "hello") == "hello"


def test_char_zero_is_empty_and_flagged():
    spec = spec_of("%c")
    assert convert_argument(spec, 0) == ""
    assert spec.zero_value is True


def test_char_from_int_and_str():
    assert convert_argument(spec_of("%c"), ord("a")) == "a"
    assert convert_argument(spec_of("%c"), "z") == "z"


def test_percent_ignores_argument():
    assert convert_argument(spec_of("%%"), None) == "%"


def test_string_requires_str():
    with pytest.raises(TypeError):
        convert_argument(spec_of("%s"), 12)


def test_int_requires_integer():
    with pytest.raises(TypeError):
        convert_argument(spec_of("%d"), "12")


def test_hex_prefix_only_for_pointers():
    assert add_hex_prefix(Directive("p", 2), "ff") == "0x" + "ff"
    assert add_hex_prefix(Directive("p", 2), "(nil)") == "(nil)"
    assert add_hex_prefix(Directive("x", 2), "ff") == "ff"


def test_minus_sign_restored_for_negative():
    assert add_minus_sign(Directive("d", 2, is_positive=False), "5") == "-" + "5"
    assert add_minus_sign(Directive("d", 2), "5") == "5"


def test_plus_flag():
    assert add_plus(Directive("d", 3, plus=True), "5") == "+" + "5"
    assert add_plus(Directive("p", 3, plus=True), "0xff") == "+" + "0xff"
    assert add_plus(Directive("u", 3, plus=True), "5") == "5"
    assert add_plus(Directive("d", 3, plus=True, zero_value=True), "") == ""


def test_hashtag_flag():
    assert add_hashtag(Directive("x", 3, hashtag=True), "ff") == "0x" + "ff"
    assert add_hashtag(Directive("X", 3, hashtag=True), "FF") == "0X" + "FF"
    assert add_hashtag(Directive("o", 3, hashtag=True), "7") == "0" + "7"
    assert add_hashtag(Directive("x", 3, hashtag=True, zero_value=True), "0") == "0"


def test_blank_flag():
    assert add_blank(Directive("d", 3, blank=True), "5") == " " + "5"
    assert add_blank(Directive("d", 3, blank=True, plus=True), "+5") == "+5"
    assert add_blank(Directive("d", 3, blank=True, is_positive=False), "-5") == "-5"
    assert add_blank(Directive("s", 3, blank=True), "ab") == "ab"


def test_flag_options_order_plus_then_blank():
    spec = Directive("d", 4, plus=True, blank=True)
    assert apply_flag_options(spec, "5") == add_plus(spec, "5")


@pytest.mark.parametrize(
    "fmt, arg",
    [
        ("%d", -42),
        ("%5d", 42),
        ("%-5d", -42),
        ("%05d", -42),
        ("%+05d", 42),
        ("% 05d", 42),
        ("%.5d", -42),
        ("%#x", 255),
        ("%#X", 255),
        ("%#010x", 255),
        ("%#010X", 255),
        ("%o", 8),
        ("%-8.3s", "abcdef"),
        ("%10s", "hi"),
        ("%5c", "a"),
    ],
)
def test_render_matches_percent_operator(fmt, arg):
    assert render_directive(spec_of(fmt), arg) == fmt % arg


def test_render_zero_with_zero_precision_vanishes():
    text = render_directive(spec_of("%5.0d"), 0)
    assert len(text) == 5
    assert text.strip() == ""


def test_render_hash_zero_has_no_prefix():
    assert render_directive(spec_of("%#x"), 0) == render_directive(spec_of("%x"), 0)


def test_render_null_pointer_with_width():
    text = render_directive(spec_of("%8p"), 0)
    assert text.endswith("(nil)")
    assert len(text) == 8


def test_render_out_of_range_width_raises():
    with pytest.raises(ValueError):
        render_directive(spec_of("%3000000000d"), 1)