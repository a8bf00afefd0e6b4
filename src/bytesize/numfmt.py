"""Decimal number patterns such as ``#``, ``#.######`` or ``#,##0.00``.

Only the digit part of the usual decimal-format pattern language is
supported: ``0`` (required digit), ``#`` (optional digit), ``.`` (fraction
separator) and ``,`` (grouping separator, integer part only). Values are
rounded half-up.
"""

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Union

Number = Union[int, float, Decimal]

# Minimum working precision; widened per value so quantize never runs out of digits
_PRECISION = 80


class NumericFormatSpec:
    """A compiled decimal pattern."""

    __slots__ = (
        "pattern",
        "min_integer_digits",
        "min_fraction_digits",
        "max_fraction_digits",
        "grouping_size",
    )

    def __init__(self, pattern: str):
        if not isinstance(pattern, str) or not pattern:
            raise ValueError("Format pattern must be a non-empty string")
        bad = set(pattern) - set("#0,.")
        if bad:
            raise ValueError(f"Unsupported characters {''.join(sorted(bad))!r} in pattern {pattern!r}")
        if pattern.count(".") > 1:
            raise ValueError(f"Multiple decimal separators in pattern {pattern!r}")

        integer, _, fraction = pattern.partition(".")
        if "," in fraction:
            raise ValueError(f"Grouping separator after decimal separator in pattern {pattern!r}")

        grouping_size = 0
        if "," in integer:
            grouping_size = len(integer.rsplit(",", 1)[1])
            if grouping_size == 0:
                raise ValueError(f"Empty grouping in pattern {pattern!r}")
        integer_digits = integer.replace(",", "")
        if "0#" in integer_digits:
            raise ValueError(f"'#' after '0' in integer part of pattern {pattern!r}")
        if "#0" in fraction:
            raise ValueError(f"'0' after '#' in fraction part of pattern {pattern!r}")

        self.pattern = pattern
        self.min_integer_digits = integer_digits.count("0")
        self.min_fraction_digits = fraction.count("0")
        self.max_fraction_digits = len(fraction)
        self.grouping_size = grouping_size

    @classmethod
    def integer(cls) -> "NumericFormatSpec":
        """Integer-only pattern: no fraction digits, no grouping."""
        return cls("#")

    def format(self, value: Number) -> str:
        """Render ``value`` following the pattern."""
        number = value if isinstance(value, Decimal) else Decimal(repr(value) if isinstance(value, float) else value)
        with localcontext() as ctx:
            ctx.prec = max(_PRECISION, max(number.adjusted(), 0) + self.max_fraction_digits + 2)
            quantum = Decimal(1).scaleb(-self.max_fraction_digits)
            rounded = number.quantize(quantum, rounding=ROUND_HALF_UP)

        negative = rounded < 0
        integer, _, fraction = format(rounded.copy_abs(), "f").partition(".")

        fraction = fraction.rstrip("0")
        if len(fraction) < self.min_fraction_digits:
            fraction = fraction.ljust(self.min_fraction_digits, "0")

        integer = integer.lstrip("0")
        if len(integer) < self.min_integer_digits:
            integer = integer.rjust(self.min_integer_digits, "0")
        if not integer and not fraction:
            integer = "0"
        if self.grouping_size and integer:
            integer = _group(integer, self.grouping_size)

        text = f"{integer}.{fraction}" if fraction else integer
        return f"-{text}" if negative else text

    def __eq__(self, other):
        if not isinstance(other, NumericFormatSpec):
            return NotImplemented
        return self.pattern == other.pattern

    def __hash__(self):
        return hash(self.pattern)

    def __repr__(self):
        return f"NumericFormatSpec({self.pattern!r})"


def _group(digits: str, size: int) -> str:
    head = len(digits) % size or size
    parts = [digits[:head]]
    parts.extend(digits[i:i + size] for i in range(head, len(digits), size))
    return ",".join(parts)


def as_format_spec(pattern: Union[str, NumericFormatSpec, None]) -> NumericFormatSpec:
    """Accept a pattern string, a compiled spec, or ``None`` for the integer pattern."""
    if pattern is None:
        return NumericFormatSpec.integer()
    if isinstance(pattern, NumericFormatSpec):
        return pattern
    return NumericFormatSpec(pattern)
