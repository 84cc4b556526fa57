from .chunk import Chunk
from .long_tuple import (
    LongTuple,
    InvalidArgument,
    IndexOutOfBounds,
    DEFAULT_CHUNK_SIZE,
    make_long_tuple,
    get_tuple_from_long_tuple,
    foldl_long_tuple,
    first_index,
    last_index,
)
from .tuples import foldl_unrolled
from .display import show, render, show_element, field_count
from .logger import ConsoleLogger, logger
