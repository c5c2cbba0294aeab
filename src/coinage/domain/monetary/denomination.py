from __future__ import annotations

from enum import Enum

from bidict import bidict

# Fixed exchange rates between the denominations
DENIERS_PER_SOLIDUS = 12
SOLIDUSES_PER_LIVRE = 20
DENIERS_PER_LIVRE = SOLIDUSES_PER_LIVRE * DENIERS_PER_SOLIDUS


class Denomination(Enum):
    """Represents one of the three coin denominations.

    Members are declared from the most to the least valuable coin, which is
    also the order of counters inside a `Moneybag`.

    Members:
        LIVRE: Worth 20 soliduses, i.e. 240 deniers.
        SOLIDUS: Worth 12 deniers.
        DENIER: The smallest coin.
    """

    LIVRE = "LIVRE"
    SOLIDUS = "SOLIDUS"
    DENIER = "DENIER"

    @property
    def deniers(self) -> int:
        """Worth of a single coin of this denomination, in deniers."""
        return _DENIERS_PER_COIN[self]

    @property
    def singular(self) -> str:
        return _SINGULAR_NAMES[self]

    @property
    def plural(self) -> str:
        return _PLURAL_NAMES[self]

    def name_for(self, count: int) -> str:
        """Return the unit name that agrees with $count (singular only for exactly 1)."""
        return self.singular if count == 1 else self.plural

    @classmethod
    def from_name(cls, name: str) -> tuple[Denomination, bool]:
        """Look up a denomination by its singular or plural unit name.

        Args:
            name: Unit name such as "livre" or "soliduses". Case-insensitive.

        Returns:
            tuple[Denomination, bool]: The denomination and whether $name was the plural form.

        Raises:
            ValueError: If $name is not a known unit name.
        """
        key = name.strip().lower()
        if key in _SINGULAR_NAMES.inverse:
            return _SINGULAR_NAMES.inverse[key], False
        if key in _PLURAL_NAMES.inverse:
            return _PLURAL_NAMES.inverse[key], True

        raise ValueError(f"Unknown coin name $name = '{name}'. Known names: {list(_SINGULAR_NAMES.values()) + list(_PLURAL_NAMES.values())}")


_DENIERS_PER_COIN = {
    Denomination.LIVRE: DENIERS_PER_LIVRE,
    Denomination.SOLIDUS: DENIERS_PER_SOLIDUS,
    Denomination.DENIER: 1,
}

_SINGULAR_NAMES: bidict[Denomination, str] = bidict(
    {
        Denomination.LIVRE: "livre",
        Denomination.SOLIDUS: "solidus",
        Denomination.DENIER: "denier",
    }
)

_PLURAL_NAMES: bidict[Denomination, str] = bidict(
    {
        Denomination.LIVRE: "livres",
        Denomination.SOLIDUS: "soliduses",
        Denomination.DENIER: "deniers",
    }
)
