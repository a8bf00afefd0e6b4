"""Byte size parser using pyparsing.

Accepted input is ``digits [unit]`` with no whitespace anywhere, e.g.
``1234``, ``1234kB``, ``1234mb`` or ``1234GiB``. Units without the ``i``
marker are ambiguous and resolved by :class:`ParseOptions`.
"""

import re
from dataclasses import dataclass

from loguru import logger
from pyparsing import (
    Optional as Opt,
    ParseException,
    Regex,
    StringEnd,
    Word,
    alphas,
    nums,
)

from .errors import MalformedInput, UnknownUnit
from .quantity import INT64_MAX, ByteQuantity
from .units import RANK_LETTERS, Unit, accepted_suffixes, unit_for_rank


@dataclass(frozen=True)
class ParseOptions:
    """How unit suffixes are interpreted.

    Attributes:
        case_sensitive: Require the canonical case of the rank letter
            (``k``, ``M``, ``G``, ``T``, ``P``; ``K`` for ``KiB``)
        prefer_binary_ambiguous: Read ``kB``/``MB``/... as 1024-based
            (the everyday meaning) instead of 1000-based
    """

    case_sensitive: bool = False
    prefer_binary_ambiguous: bool = True


DEFAULT_OPTIONS = ParseOptions()


def create_parser():
    """Create the ``digits [letters]`` grammar."""
    amount = Word(nums)("amount")
    suffix = Opt(Word(alphas), default="")("suffix")
    return (amount + suffix + StringEnd()).leave_whitespace()


def create_unit_parser(case_sensitive: bool):
    """Create the unit-token grammar: rank letter, optional ``i``, optional ``b``.

    A lone ``B`` (or ``b``) stands for plain bytes. The trailing ``b`` is
    decorative and always matched in either case.
    """
    plain = Regex(r"[bB]")
    if case_sensitive:
        ambiguous = Regex(r"(?P<rank>[kMGTP])[bB]?")
        binary = Regex(r"(?P<rank>[KMGTP])(?P<binary>i)[bB]?")
    else:
        ambiguous = Regex(r"(?P<rank>[kmgtp])[bB]?", flags=re.IGNORECASE)
        binary = Regex(r"(?P<rank>[kmgtp])(?P<binary>i)[bB]?", flags=re.IGNORECASE)
    return ((binary | ambiguous | plain) + StringEnd()).leave_whitespace()


_parser = create_parser()
_unit_parsers = {
    False: create_unit_parser(case_sensitive=False),
    True: create_unit_parser(case_sensitive=True),
}


def parse(text: str, options: ParseOptions = DEFAULT_OPTIONS) -> ByteQuantity:
    """Parse a human-readable byte size.

    Args:
        text: Size such as ``"1234"``, ``"512MB"`` or ``"2GiB"``
        options: Suffix interpretation, see :class:`ParseOptions`

    Returns:
        The quantity, normalized to bytes

    Raises:
        MalformedInput: If the text is not ``digits [unit]`` or the result
            does not fit in a signed 64-bit integer
        UnknownUnit: If the unit suffix names no known unit
    """
    if not isinstance(text, str):
        raise TypeError(f"Text to parse must be a str, got {type(text).__name__}")
    try:
        result = _parser.parse_string(text)
    except ParseException:
        raise MalformedInput(text, "not a number") from None

    amount = int(result["amount"])
    unit = _resolve_unit(text, result.get("suffix", ""), options)

    total = amount * unit.multiplier
    if total > INT64_MAX:
        raise MalformedInput(text, "value out of range")

    logger.debug("Parsed {!r} as {} x {} = {} bytes", text, amount, unit.name, total)
    return ByteQuantity(total)


def _resolve_unit(text: str, suffix: str, options: ParseOptions) -> Unit:
    if not suffix:
        return Unit.one
    try:
        token = _unit_parsers[options.case_sensitive].parse_string(suffix)
    except ParseException:
        head = suffix[0].lower()
        if head in RANK_LETTERS or head == "b":
            raise MalformedInput(text, f"invalid unit {suffix!r}") from None
        raise UnknownUnit(text, suffix, accepted_suffixes()) from None

    rank_letter = token.get("rank")
    if not rank_letter:
        return Unit.one
    rank = RANK_LETTERS.index(rank_letter.lower()) + 1
    if token.get("binary"):
        return unit_for_rank(rank, binary=True)
    return unit_for_rank(rank, binary=options.prefer_binary_ambiguous)
