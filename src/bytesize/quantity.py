"""ByteQuantity value object."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, localcontext
from typing import Union

from .numfmt import NumericFormatSpec, as_format_spec
from .units import Unit

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

PatternLike = Union[str, NumericFormatSpec, None]


@dataclass(frozen=True, order=True)
class ByteQuantity:
    """An exact number of bytes.

    The count is always stored in raw bytes; the unit a quantity was parsed
    from is not kept. Negative counts are allowed, counts outside the signed
    64-bit range are not.
    """

    bytes: int

    def __post_init__(self):
        if isinstance(self.bytes, bool) or not isinstance(self.bytes, int):
            raise TypeError(f"Byte count must be an int, got {type(self.bytes).__name__}")
        if not INT64_MIN <= self.bytes <= INT64_MAX:
            raise ValueError(f"Byte count {self.bytes} does not fit in a signed 64-bit integer")

    @classmethod
    def of(cls, amount: int, unit: Unit = Unit.one) -> ByteQuantity:
        """Build a quantity of ``amount`` ``unit``s."""
        return cls(amount * unit.multiplier)

    def in_unit(self, unit: Unit) -> int:
        """Whole number of ``unit``s in this quantity, truncated toward zero."""
        count, multiplier = self.bytes, unit.multiplier
        if count < 0:
            return -(-count // multiplier)
        return count // multiplier

    def quotient(self, unit: Unit) -> Decimal:
        """Exact (untruncated) value of this quantity expressed in ``unit``."""
        with localcontext() as ctx:
            ctx.prec = 80
            return Decimal(self.bytes) / Decimal(unit.multiplier)

    def format(self, pattern: PatternLike = None, unit: Unit = Unit.one, append_suffix: bool = True) -> str:
        """Render the quantity in ``unit`` using a decimal ``pattern``.

        Args:
            pattern: A :class:`NumericFormatSpec` or pattern string such as
                ``"#.######"``; ``None`` uses the integer-only pattern
            unit: Unit to express the quantity in
            append_suffix: Whether to append the unit suffix (``kB``, ``MiB``...)

        Returns:
            The formatted text, e.g. ``"1.234568GB"``
        """
        spec = as_format_spec(pattern)
        text = spec.format(self.quotient(unit))
        return text + unit.suffix if append_suffix else text

    def format_default(self, unit: Unit = Unit.one) -> str:
        """Integer-only rendering with the unit suffix, e.g. ``"1234568kB"``."""
        return self.format(None, unit, True)

    def __int__(self):
        return self.bytes

    def __str__(self):
        return f"{self.bytes}{Unit.one.suffix}"

    def __repr__(self):
        return f"ByteQuantity({self.bytes})"
