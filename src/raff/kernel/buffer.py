from dataclasses import dataclass
from typing import Union

import deal

from .errors import CorruptFormat

BufferLike = Union[bytes, bytearray, memoryview]


class NegativeSliceError(ValueError):
    def __init__(self, offset: int, size: int) -> None:
        super().__init__(
            f'Expected non-negative slice values, got offset={offset} size={size}',
        )
        self.size = size
        self.offset = offset


@deal.chain(
    deal.pre(lambda _: _.size >= 0),
    deal.pre(lambda _: _.offset >= 0),
    deal.raises(CorruptFormat),
    deal.reason(CorruptFormat, lambda _: _.offset + _.size > len(_.buffer)),
    deal.has(),
)
def splice(buffer: BufferLike, offset: int, size: int) -> memoryview:
    """Return a view of `size` bytes at `offset`, without copying."""
    if offset + size > len(buffer):
        raise CorruptFormat(
            f'range {offset}+{size} overruns buffer of size {len(buffer)}',
        )
    return memoryview(buffer)[offset : offset + size]


@dataclass(frozen=True)
class Splicer(object):
    offset: int
    size: int

    def __call__(self, buffer: BufferLike) -> memoryview:
        return splice(buffer, self.offset, self.size)

    def __post_init__(self) -> None:
        if self.offset < 0 or self.size < 0:
            raise NegativeSliceError(self.offset, self.size)
