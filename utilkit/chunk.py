from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, List, Tuple, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Chunk(Generic[T]):
    """One fixed-length group of a LongTuple. Positions may hold unrelated types."""
    _items: Tuple[T, ...]

    @staticmethod
    def of(*items: T) -> "Chunk[T]":
        return Chunk(tuple(items))

    @staticmethod
    def from_iterable(items: Iterable[T]) -> "Chunk[T]":
        return Chunk(tuple(items))

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, k: int) -> T:
        return self._items[k]

    def to_list(self) -> List[T]:
        return list(self._items)

    def to_tuple(self) -> Tuple[T, ...]:
        return self._items

    def map(self, f: Callable[[T], U]) -> "Chunk[U]":
        return Chunk(tuple(f(x) for x in self._items))

    def foreach(self, f: Callable[[T], Any]) -> None:
        for x in self._items:
            f(x)

    def __len__(self) -> int:
        return len(self._items)
