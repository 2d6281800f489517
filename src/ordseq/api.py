from __future__ import annotations

import logging
from typing import TypeVar

from .ordering import Comparator, natural_order
from .sequence import OrderedSequence

logger = logging.getLogger(__name__)

T = TypeVar("T")


def new_with(cmp: Comparator) -> OrderedSequence[T]:
    seq: OrderedSequence[T] = OrderedSequence(cmp=cmp)
    logger.debug("new ordered sequence using %s", getattr(cmp, "__qualname__", repr(cmp)))
    return seq


def new() -> OrderedSequence[T]:
    # natural order is just another comparator, no special casing downstream
    return new_with(natural_order)
