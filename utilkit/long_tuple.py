from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, List, Tuple, TypeVar, Union

from .chunk import Chunk
from .display import render
from .logger import logger

A = TypeVar("A")

DEFAULT_CHUNK_SIZE = 5


class InvalidArgument(ValueError):
    pass


class IndexOutOfBounds(IndexError):
    def __init__(self, index: int, length: int):
        super().__init__(f"Index {index} out of bounds for LongTuple. Total length is {length}.")
        self.index = index
        self.length = length


def _check_chunk_size(n: Any) -> int:
    if isinstance(n, bool) or not isinstance(n, int) or n < 1:
        raise InvalidArgument(f"chunk_size must be a positive integer, got {n!r}")
    return n


@dataclass(frozen=True)
class LongTuple:
    """A long heterogeneous tuple stored as consecutive chunks of ``chunk_size``.

    Logical indices are 1-based: ``get(1)`` is the first element and
    ``get(last_index())`` the last. The sequence protocol (``lt[k]``,
    ``lt[a:b]``) keeps ordinary 0-based Python semantics on top of that.
    """
    chunks: Tuple[Chunk[Any], ...]
    chunk_size: int

    def __post_init__(self) -> None:
        _check_chunk_size(self.chunk_size)

    @staticmethod
    def from_values(values: Iterable[Any], chunk_size: int = DEFAULT_CHUNK_SIZE) -> "LongTuple":
        # chunk_size is clamped to the number of values; the remainder becomes a short last chunk
        _check_chunk_size(chunk_size)
        items = tuple(values)
        total = len(items)
        if total == 0:
            return LongTuple((), chunk_size)
        n = min(chunk_size, total)
        full, rem = divmod(total, n)
        chunks = [Chunk(items[k * n:(k + 1) * n]) for k in range(full)]
        if rem:
            chunks.append(Chunk(items[full * n:]))
        logger.debug("long tuple built", length=total, chunk_size=n, chunks=len(chunks))
        return LongTuple(tuple(chunks), n)

    @staticmethod
    def of(*values: Any, chunk_size: int = DEFAULT_CHUNK_SIZE) -> "LongTuple":
        return LongTuple.from_values(values, chunk_size)

    @staticmethod
    def from_chunks(chunks: Iterable[Iterable[Any]], chunk_size: int) -> "LongTuple":
        """Wrap an already chunked layout without re-partitioning it."""
        wrapped = tuple(c if isinstance(c, Chunk) else Chunk.from_iterable(c) for c in chunks)
        return LongTuple(wrapped, _check_chunk_size(chunk_size))

    # -- length queries

    def first_index(self) -> int:
        return 1

    def last_index(self) -> int:
        return sum(len(c) for c in self.chunks)

    @property
    def chunk_count(self) -> int:
        return len(self.chunks)

    def chunk_lengths(self) -> Tuple[int, ...]:
        return tuple(len(c) for c in self.chunks)

    def __len__(self) -> int:
        return self.last_index()

    # -- access

    def get(self, i: int) -> Any:
        """Element at logical index ``i``, found by scanning the chunk lengths.

        Correct for any chunk layout, including a short or irregular last chunk.
        """
        consumed = 0
        for c in self.chunks:
            n = len(c)
            if consumed < i <= consumed + n:
                return c[i - consumed - 1]
            consumed += n
        raise IndexOutOfBounds(i, consumed)

    def get_range(self, r: range) -> "LongTuple":
        """New LongTuple holding the logical indices in ``r``, re-chunked with ``chunk_size``.

        Positions are resolved as ``divmod(i - 1, chunk_size)``, which assumes every
        chunk holds exactly ``chunk_size`` elements. On a layout from ``from_chunks``
        that breaks this assumption the result can differ from ``get``.
        """
        if r.step != 1:
            raise InvalidArgument(f"expected a contiguous ascending range, got {r!r}")
        last = self.last_index()
        out: List[Any] = []
        for i in r:
            if not 1 <= i <= last:
                raise IndexOutOfBounds(i, last)
            c, k = divmod(i - 1, self.chunk_size)
            try:
                out.append(self.chunks[c][k])
            except IndexError:
                raise IndexOutOfBounds(i, last) from None
        logger.debug("long tuple sliced", start=r.start, stop=r.stop, selected=len(out))
        return LongTuple.from_values(out, self.chunk_size)

    def __getitem__(self, key: Union[int, slice]) -> Any:
        if isinstance(key, slice):
            start, stop, step = key.indices(len(self))
            if step != 1:
                raise InvalidArgument(f"LongTuple slices must have step 1, got {step}")
            return self.get_range(range(start + 1, max(start, stop) + 1))
        if key < 0:
            key += len(self)
        return self.get(key + 1)

    def __iter__(self) -> Iterator[Any]:
        for c in self.chunks:
            yield from c

    # -- traversal

    def foreach(self, f: Callable[[Any], Any]) -> None:
        for c in self.chunks:
            c.foreach(f)

    def map(self, f: Callable[[Any], Any]) -> "LongTuple":
        return LongTuple(tuple(c.map(f) for c in self.chunks), self.chunk_size)

    def fold(self, f: Callable[[Any, A], A], init: A) -> A:
        # f receives (element, accumulator)
        acc = init
        for c in self.chunks:
            for x in c:
                acc = f(x, acc)
        return acc

    def to_tuple(self) -> Tuple[Any, ...]:
        out: List[Any] = []
        self.foreach(out.append)
        return tuple(out)

    def __repr__(self) -> str:
        inner = tuple(c.to_tuple() for c in self.chunks)
        return f"LongTuple(chunk_size={self.chunk_size}, chunks={inner!r})"

    def __str__(self) -> str:
        return render(self).rstrip("\n")


def make_long_tuple(values: Union[Iterable[Any], LongTuple], chunk_size: int = DEFAULT_CHUNK_SIZE) -> LongTuple:
    if isinstance(values, LongTuple):
        return values
    return LongTuple.from_values(values, chunk_size)


def get_tuple_from_long_tuple(lt: LongTuple) -> Tuple[Any, ...]:
    return lt.to_tuple()


def foldl_long_tuple(f: Callable[[Any, A], A], lt: LongTuple, *, init: A) -> A:
    return lt.fold(f, init)


def first_index(lt: LongTuple) -> int:
    return lt.first_index()


def last_index(lt: LongTuple) -> int:
    return lt.last_index()
