__version__ = "0.0.1"

from coinage.domain.monetary.coin_registry import Denier, Livre, Solidus
from coinage.domain.monetary.denomination import Denomination
from coinage.domain.monetary.errors import ArithmeticOperation, OutOfRangeError
from coinage.domain.monetary.moneybag import Moneybag
from coinage.domain.monetary.ordering import PartialOrdering, WeakOrdering
from coinage.domain.monetary.value import Value
from coinage.utils.numeric_tools import COIN_NUMBER_MAX

__all__ = [
    "Moneybag",
    "Value",
    "Livre",
    "Solidus",
    "Denier",
    "Denomination",
    "PartialOrdering",
    "WeakOrdering",
    "OutOfRangeError",
    "ArithmeticOperation",
    "COIN_NUMBER_MAX",
]
