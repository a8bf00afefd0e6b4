"""bytesize - parse and format human-readable byte sizes.

Turns strings such as ``1234kB``, ``512mb`` or ``2GiB`` into exact byte
counts, and renders byte counts back at a chosen unit and precision.
"""

__version__ = "0.1.0"
__author__ = "bytesize contributors"

from loguru import logger

from .errors import ByteSizeError, MalformedInput, UnknownUnit
from .memory import parse_to_mebibytes
from .numfmt import NumericFormatSpec
from .parser import DEFAULT_OPTIONS, ParseOptions, parse
from .quantity import ByteQuantity
from .units import Unit

__all__ = [
    "ByteQuantity",
    "ByteSizeError",
    "DEFAULT_OPTIONS",
    "MalformedInput",
    "NumericFormatSpec",
    "ParseOptions",
    "Unit",
    "UnknownUnit",
    "parse",
    "parse_to_mebibytes",
]

# Library records stay silent until an application enables them
logger.disable("bytesize")
