from __future__ import annotations

from bisect import bisect_left
from functools import cmp_to_key
from typing import Callable, Generic, Optional, TypeVar

from .ordering import natural_order

T = TypeVar("T")


class NullArgumentError(ValueError):
    """Raised when ``None`` is given where an element is expected."""


def _require_element(item: object) -> None:
    if item is None:
        raise NullArgumentError("null argument: None is not a valid element")


class OrderedSequence(Generic[T]):
    """Sequence kept in non-decreasing order under ``cmp``; duplicates are allowed.

    Membership (``contains``/``remove``) uses ``==`` on the elements, not
    the comparator: two elements the comparator ranks equal are still
    distinct values.

    Peek and poll operations return ``None`` when the sequence is empty;
    ``None`` itself is never stored.

    Storage is a plain list: peeks and ``poll_last_opt`` are O(1), while
    ``add``, ``remove`` and ``poll_first_opt`` shift elements and are O(n).
    Draining from the front is therefore quadratic; reverse the comparator
    and poll from the back when that matters.
    """

    def __init__(self, cmp: Callable[[T, T], int] = natural_order):
        if not callable(cmp):
            raise TypeError(f"comparator must be callable, got {type(cmp).__name__}")
        self._cmp = cmp
        self._key = cmp_to_key(cmp)
        self._items: list[T] = []
        self._keys: list[object] = []

    @property
    def cmp(self) -> Callable[[T, T], int]:
        return self._cmp

    def add(self, item: T) -> bool:
        """Insert ``item`` before the first element that is not strictly less than it."""
        _require_element(item)
        key_item = self._key(item)
        # all cmp calls happen here, before any mutation
        index = bisect_left(self._keys, key_item)
        self._items.insert(index, item)
        self._keys.insert(index, key_item)
        return True

    def remove(self, item: T) -> bool:
        _require_element(item)
        # same match as ``in``: identity first, then ==
        try:
            idx = self._items.index(item)
        except ValueError:
            return False
        del self._items[idx]
        del self._keys[idx]
        return True

    def discard(self, item: T) -> None:
        self.remove(item)

    def contains(self, item: T) -> bool:
        _require_element(item)
        return item in self._items

    def size(self) -> int:
        return len(self._items)

    def first_opt(self) -> Optional[T]:
        return self._items[0] if self._items else None

    def last_opt(self) -> Optional[T]:
        return self._items[-1] if self._items else None

    def poll_first_opt(self) -> Optional[T]:
        if not self._items:
            return None
        del self._keys[0]
        return self._items.pop(0)

    def poll_last_opt(self) -> Optional[T]:
        if not self._items:
            return None
        self._keys.pop()
        return self._items.pop()

    def __contains__(self, item: object) -> bool:
        return self.contains(item)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"OrderedSequence({self._items!r})"
