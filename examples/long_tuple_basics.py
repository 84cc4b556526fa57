"""
LongTuple basics: chunking, indexing, slicing, map/fold and display.

Run: python examples/long_tuple_basics.py
"""
from dataclasses import dataclass

from utilkit import (
    LongTuple,
    make_long_tuple,
    foldl_long_tuple,
    get_tuple_from_long_tuple,
    IndexOutOfBounds,
    logger,
    show,
)


@dataclass(frozen=True)
class Process:
    name: str
    rate: float


def main():
    # Emit the construction/slicing debug records on stderr
    logger.set_level("DEBUG")

    procs = tuple(Process(f"p{k}", k / 10) for k in range(1, 12))
    lt = make_long_tuple(procs, 4)
    print("chunk lengths =>", lt.chunk_lengths())   # (4, 4, 3)
    print("element 9 =>", lt.get(9).name)            # p9

    # Logical ranges are 1-based and re-chunked with the same chunk size
    sub = lt.get_range(range(3, 8))
    print("slice 3..7 =>", [p.name for p in sub])    # p3 .. p7
    print("slice chunks =>", sub.chunk_lengths())    # (4, 1)

    # map keeps the chunk layout; fold passes (element, accumulator)
    rates = lt.map(lambda p: p.rate)
    total = foldl_long_tuple(lambda r, acc: acc + r, rates, init=0.0)
    print("total rate =>", round(total, 2))          # 6.6
    print("flat =>", get_tuple_from_long_tuple(rates)[:3])

    try:
        lt.get(99)
    except IndexOutOfBounds as ex:
        print("error =>", ex)

    show(LongTuple.of(procs[0], 2.0, "x", chunk_size=2), color=True)


if __name__ == "__main__":
    main()
