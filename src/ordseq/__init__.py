from .api import new, new_with
from .ordering import (
    Comparator,
    MissingNaturalOrderError,
    chained,
    comparing,
    natural_order,
    reverse_order,
)
from .sequence import NullArgumentError, OrderedSequence

__all__ = [
    "new",
    "new_with",
    "OrderedSequence",
    "Comparator",
    "natural_order",
    "reverse_order",
    "comparing",
    "chained",
    "NullArgumentError",
    "MissingNaturalOrderError",
]
