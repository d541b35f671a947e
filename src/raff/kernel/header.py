from struct import Struct
from typing import NamedTuple

import deal

from .buffer import BufferLike
from .ids import ChunkID, pack_id, unpack_id

SIZE_STRUCT = Struct('<I')
HEADER_STRUCT = Struct('<4sI')

MAX_SIZE = (1 << 32) - 1


class ChunkHeader(NamedTuple):
    """Wire header of a chunk: 4CC tag followed by little-endian size."""

    etag: ChunkID
    size: int


@deal.chain(
    deal.pre(lambda _: 0 <= _.size <= MAX_SIZE),
    deal.ensure(lambda _: len(_.result) == SIZE_STRUCT.size),
    deal.pure,
)
def pack_size(size: int) -> bytes:
    return SIZE_STRUCT.pack(size)


@deal.chain(
    deal.pre(lambda _: len(_.data) == SIZE_STRUCT.size),
    deal.pure,
)
def unpack_size(data: BufferLike) -> int:
    (size,) = SIZE_STRUCT.unpack(data)
    return size


@deal.chain(
    deal.pre(lambda _: 0 <= _.header.size <= MAX_SIZE),
    deal.ensure(lambda _: len(_.result) == HEADER_STRUCT.size),
    deal.pure,
)
def pack_header(header: ChunkHeader) -> bytes:
    return HEADER_STRUCT.pack(unpack_id(header.etag), header.size)


@deal.chain(
    deal.pre(lambda _: len(_.data) == HEADER_STRUCT.size),
    deal.pure,
)
def unpack_header(data: BufferLike) -> ChunkHeader:
    etag, size = HEADER_STRUCT.unpack(data)
    return ChunkHeader(pack_id(etag), size)
