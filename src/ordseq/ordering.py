from __future__ import annotations

from typing import Any, Callable, TypeVar

T = TypeVar("T")

Comparator = Callable[[T, T], int]


class MissingNaturalOrderError(TypeError):
    """Raised when natural order is used with elements that cannot be ordered."""


def natural_order(one: Any, other: Any) -> int:
    try:
        if one < other:
            return -1
        if one > other:
            return 1
    except TypeError as exc:
        raise MissingNaturalOrderError(
            f"no natural order between {type(one).__name__} and {type(other).__name__}"
        ) from exc
    return 0


def reverse_order(cmp: Comparator = natural_order) -> Comparator:
    def _reversed(one, other) -> int:
        return cmp(other, one)

    return _reversed


def comparing(key: Callable[[Any], Any], cmp: Comparator = natural_order) -> Comparator:
    """Order elements by ``key(element)``, comparing keys with ``cmp``.

    >>> by_length = comparing(len)
    >>> by_length("cat", "elephant")
    -1
    """

    def _by_key(one, other) -> int:
        return cmp(key(one), key(other))

    return _by_key


def chained(*cmps: Comparator) -> Comparator:
    # tie-break cascade: first comparator decides, later ones break ties
    if not cmps:
        raise ValueError("chained() needs at least one comparator")

    def _cascade(one, other) -> int:
        for cmp in cmps:
            res = cmp(one, other)
            if res != 0:
                return res
        return 0

    return _cascade
