"""Memory limit settings expressed in mebibytes.

Deployment settings such as ``memory = 1024`` or ``memory = 2g`` use a bare
number for mebibytes and accept only ``m``/``M`` and ``g``/``G`` as units.
"""

from pyparsing import ParseException

from .errors import MalformedInput, UnknownUnit
from .parser import create_parser
from .quantity import ByteQuantity
from .units import Unit

_parser = create_parser()

MEMORY_UNITS = {
    "": Unit.mebi,
    "m": Unit.mebi,
    "M": Unit.mebi,
    "g": Unit.gibi,
    "G": Unit.gibi,
}


def parse_to_mebibytes(text: str) -> int:
    """Parse a memory setting and return it in mebibytes.

    >>> parse_to_mebibytes("1000g")
    1024000

    Raises:
        MalformedInput: If the text is not ``digits [unit]`` or overflows
        UnknownUnit: If the unit is anything but m, M, g or G
    """
    try:
        result = _parser.parse_string(text)
    except ParseException:
        raise MalformedInput(text, "not a number") from None

    suffix = result.get("suffix", "")
    unit = MEMORY_UNITS.get(suffix)
    if unit is None:
        raise UnknownUnit(text, suffix, tuple(k for k in MEMORY_UNITS if k))
    try:
        quantity = ByteQuantity.of(int(result["amount"]), unit)
    except ValueError:
        raise MalformedInput(text, "value out of range") from None
    return quantity.in_unit(Unit.mebi)
