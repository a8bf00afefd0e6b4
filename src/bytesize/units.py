"""Byte units: the fixed binary (1024) and decimal (1000) tables."""

from enum import Enum
from typing import Dict, Tuple


BINARY_BASE = 1024
DECIMAL_BASE = 1000

# Rank letters in rank order (rank 1..5); rank 0 is the plain byte.
RANK_LETTERS = "kmgtp"


class Unit(Enum):
    """A byte scale factor.

    Each member's value is ``(rank, base)``. ``one`` has rank 0 and belongs to
    both families.
    """

    one = (0, 1)
    kilo = (1, DECIMAL_BASE)
    mega = (2, DECIMAL_BASE)
    giga = (3, DECIMAL_BASE)
    tera = (4, DECIMAL_BASE)
    peta = (5, DECIMAL_BASE)
    kibi = (1, BINARY_BASE)
    mebi = (2, BINARY_BASE)
    gibi = (3, BINARY_BASE)
    tebi = (4, BINARY_BASE)
    pebi = (5, BINARY_BASE)

    @property
    def rank(self) -> int:
        return self.value[0]

    @property
    def base(self) -> int:
        return self.value[1]

    @property
    def multiplier(self) -> int:
        return self.base ** self.rank

    @property
    def is_binary(self) -> bool:
        return self.rank > 0 and self.base == BINARY_BASE

    @property
    def is_decimal(self) -> bool:
        return self.rank > 0 and self.base == DECIMAL_BASE

    @property
    def suffix(self) -> str:
        """Canonical suffix: ``B``, ``kB``/``MB``/..., or ``KiB``/``MiB``/..."""
        return _SUFFIXES[self]

    @classmethod
    def from_name(cls, name: str) -> "Unit":
        """Look a unit up by member name (``kibi``) or canonical suffix (``KiB``).

        Member names are matched case-insensitively, suffixes exactly.

        Raises:
            ValueError: If nothing matches
        """
        key = name.strip()
        for unit in cls:
            if unit.suffix == key:
                return unit
        try:
            return cls[key.lower()]
        except KeyError:
            accepted = ", ".join(u.name for u in cls)
            raise ValueError(f"Unknown unit {name!r}, expected one of: {accepted}") from None


def _suffix_for(unit: Unit) -> str:
    if unit.rank == 0:
        return "B"
    letter = RANK_LETTERS[unit.rank - 1]
    if unit.is_binary:
        return f"{letter.upper()}iB"
    # kilo keeps the SI lowercase k
    return f"{letter if unit.rank == 1 else letter.upper()}B"


_SUFFIXES: Dict[Unit, str] = {unit: _suffix_for(unit) for unit in Unit}

# rank -> unit, per family
BINARY_UNITS: Tuple[Unit, ...] = (Unit.one, Unit.kibi, Unit.mebi, Unit.gibi, Unit.tebi, Unit.pebi)
DECIMAL_UNITS: Tuple[Unit, ...] = (Unit.one, Unit.kilo, Unit.mega, Unit.giga, Unit.tera, Unit.peta)


def unit_for_rank(rank: int, binary: bool) -> Unit:
    """Return the unit of ``rank`` (0..5) in the binary or decimal family."""
    table = BINARY_UNITS if binary else DECIMAL_UNITS
    return table[rank]


def accepted_suffixes() -> Tuple[str, ...]:
    """All canonical suffixes, in table order."""
    return tuple(unit.suffix for unit in Unit)
