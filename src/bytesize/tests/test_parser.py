"""
解析器测试
包含属性测试（Property: 规范后缀 Round-Trip）
"""

import pytest
from hypothesis import given, strategies as st, settings

from bytesize import (
    DEFAULT_OPTIONS,
    ByteSizeError,
    MalformedInput,
    ParseOptions,
    Unit,
    UnknownUnit,
    parse,
)
from bytesize.quantity import INT64_MAX


DECIMAL = ParseOptions(prefer_binary_ambiguous=False)
CASE_SENSITIVE = ParseOptions(case_sensitive=True)


# ==================== 属性测试 ====================

@st.composite
def unit_and_amount(draw):
    unit = draw(st.sampled_from(list(Unit)))
    amount = draw(st.integers(min_value=0, max_value=INT64_MAX // unit.multiplier))
    return unit, amount


@settings(max_examples=200, deadline=None)
@given(unit_and_amount())
def test_canonical_suffix_roundtrip(case):
    """
    *For any* unit and amount that fits, "<amount><canonical suffix>" parses
    back to exactly that amount of the unit, even with case-sensitive parsing.
    """
    unit, amount = case
    options = ParseOptions(case_sensitive=True, prefer_binary_ambiguous=False)
    quantity = parse(f"{amount}{unit.suffix}", options)
    assert quantity.bytes == amount * unit.multiplier
    assert quantity.in_unit(unit) == amount


# ==================== 单元测试 ====================

class TestParsing:
    """基本解析"""

    def test_bare_number_is_bytes(self):
        assert parse("1234").in_unit(Unit.one) == 1234

    def test_ambiguous_suffix_defaults_to_binary(self):
        assert parse("1234kB").in_unit(Unit.one) == 1234 * 1024

    def test_ambiguous_mega_in_kibi(self):
        assert parse("1234mb").in_unit(Unit.kibi) == 1234 * 1024

    def test_ambiguous_suffix_as_decimal(self):
        assert parse("1234mb", DECIMAL).in_unit(Unit.one) == 1234 * 1000 * 1000

    def test_binary_suffix(self):
        assert parse("1234GiB").in_unit(Unit.one) == 1234 * 1024 ** 3

    def test_binary_suffix_ignores_decimal_preference(self):
        assert parse("3MiB", DECIMAL).bytes == 3 * 1024 ** 2

    @pytest.mark.parametrize("text", ["1234B", "1234b"])
    def test_plain_byte_suffix(self, text):
        assert parse(text).bytes == 1234

    def test_zero(self):
        assert parse("0").bytes == 0
        assert parse("0PiB").bytes == 0

    def test_leading_zeros(self):
        assert parse("007k").bytes == 7 * 1024

    @pytest.mark.parametrize(
        ("text", "binary", "decimal"),
        [
            ("3k", 3 * 1024, 3 * 1000),
            ("3m", 3 * 1024 ** 2, 3 * 1000 ** 2),
            ("3G", 3 * 1024 ** 3, 3 * 1000 ** 3),
            ("3tb", 3 * 1024 ** 4, 3 * 1000 ** 4),
            ("3PB", 3 * 1024 ** 5, 3 * 1000 ** 5),
        ],
    )
    def test_every_rank(self, text, binary, decimal):
        assert parse(text).bytes == binary
        assert parse(text, DECIMAL).bytes == decimal

    @pytest.mark.parametrize("text", ["5kib", "5KIB", "5Ki", "5ki", "5KiB"])
    def test_binary_marker_case_insensitive_by_default(self, text):
        assert parse(text).bytes == 5 * 1024

    def test_default_options(self):
        assert DEFAULT_OPTIONS == ParseOptions()
        assert DEFAULT_OPTIONS.case_sensitive is False
        assert DEFAULT_OPTIONS.prefer_binary_ambiguous is True


class TestCaseSensitive:
    """大小写敏感模式"""

    def test_wrong_case_is_malformed(self):
        with pytest.raises(MalformedInput):
            parse("1234mb", CASE_SENSITIVE)

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("1234kB", 1234 * 1024),
            ("1234k", 1234 * 1024),
            ("5MB", 5 * 1024 ** 2),
            ("5Mb", 5 * 1024 ** 2),
            ("1KiB", 1024),
            ("2GiB", 2 * 1024 ** 3),
            ("9B", 9),
        ],
    )
    def test_canonical_case_accepted(self, text, expected):
        assert parse(text, CASE_SENSITIVE).bytes == expected

    @pytest.mark.parametrize("text", ["1Kb", "1kiB", "1KIB", "1gb", "1pB"])
    def test_non_canonical_case_rejected(self, text):
        with pytest.raises(MalformedInput):
            parse(text, CASE_SENSITIVE)

    def test_ignore_case_accepts_same_inputs(self):
        for text in ["1Kb", "1kiB", "1KIB", "1gb", "1pB"]:
            assert parse(text).bytes > 0


class TestErrors:
    """错误处理"""

    def test_unknown_unit(self):
        with pytest.raises(UnknownUnit) as excinfo:
            parse("1234u")
        assert excinfo.value.suffix == "u"
        assert excinfo.value.text == "1234u"
        assert "KiB" in str(excinfo.value)

    def test_not_a_number(self):
        with pytest.raises(MalformedInput):
            parse("wat?1234")

    @pytest.mark.parametrize("text", ["12xb", "8EiB", "1ZB", "1iB", "1u"])
    def test_other_letters_are_unknown_units(self, text):
        with pytest.raises(UnknownUnit):
            parse(text)

    @pytest.mark.parametrize(
        "text",
        ["", "kB", "-1", "+1", "1.5G", "1e3", "1,000", "12kBx", "12kbb", "12bk", "1bytes", "1 kB", " 12", "12 ", "12kB\n", "١٢"],
    )
    def test_malformed(self, text):
        with pytest.raises(MalformedInput):
            parse(text)

    def test_errors_are_value_errors(self):
        assert issubclass(MalformedInput, ByteSizeError)
        assert issubclass(UnknownUnit, ByteSizeError)
        assert issubclass(ByteSizeError, ValueError)

    def test_non_string_input(self):
        with pytest.raises(TypeError):
            parse(1234)


class TestOverflow:
    """64 位溢出"""

    def test_max_value(self):
        assert parse(str(INT64_MAX)).bytes == INT64_MAX

    @pytest.mark.parametrize(
        "text",
        ["9223372036854775808", "18446744073709551616", "8388608TiB", "8192PiB", "99999999999999999999999k"],
    )
    def test_overflow_is_malformed(self, text):
        with pytest.raises(MalformedInput, match="out of range"):
            parse(text)

    def test_largest_units_below_limit(self):
        assert parse("8388607TiB").bytes == 8388607 * 1024 ** 4
        assert parse("8191PiB").bytes == 8191 * 1024 ** 5
        assert parse("9223PB", DECIMAL).bytes == 9223 * 1000 ** 5

    def test_decimal_overflow(self):
        with pytest.raises(MalformedInput):
            parse("9224PB", DECIMAL)
