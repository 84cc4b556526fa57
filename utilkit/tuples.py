from __future__ import annotations
from functools import reduce
from typing import Any, Callable, Tuple, TypeVar

A = TypeVar("A")


def foldl_unrolled(f: Callable[[A, Any], A], x: Tuple[Any, ...], *, init: A) -> A:
    # note the (acc, element) order, the reverse of foldl_long_tuple
    return reduce(f, x, init)
