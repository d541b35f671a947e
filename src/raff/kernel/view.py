"""Conversions between the chunk, list and data views of a container.

Every conversion is computed once and cached on the source object, in both
directions. Mutating a list drops its cached chunks, so a cached chunk is
never stale relative to the list's children.
"""

from typing import Optional

import deal

from .align import padded_size
from .buffer import Splicer
from .container import Container
from .errors import IsAList, NotAList, reports_errors
from .header import HEADER_STRUCT, ChunkHeader, pack_header
from .ids import ID_SIZE, ChunkID, format_id, unpack_id
from .model import Chunk, ChunkKind, ChunkList, Data
from .parser import parse_list
from .settings import DEFAULT_SETTING, _ParseSetting


def get_id(chunk: Chunk) -> ChunkID:
    return chunk.id


@reports_errors
def chunk_as_list(chunk: Chunk, cfg: _ParseSetting = DEFAULT_SETTING) -> ChunkList:
    """Return the list of children of a LIST/RIFF chunk, parsing it lazily."""
    if not chunk.is_list:
        raise NotAList(f'chunk {format_id(chunk.id)} holds raw data')
    chunk.container.arena.ensure_alive()
    if chunk._as_list is None:
        chunk._as_list = parse_list(cfg, chunk)
    return chunk._as_list


@reports_errors
def chunk_as_data(chunk: Chunk) -> Data:
    """Return the payload view of a leaf chunk."""
    if chunk.is_list:
        raise IsAList(f'chunk {format_id(chunk.id)} is a {chunk.kind.value}')
    arena = chunk.container.arena
    arena.ensure_alive()
    if chunk._as_data is None:
        data = arena.adopt(Data(chunk.container, chunk.id, chunk.buffer, chunk.span))
        data._as_chunk = chunk
        chunk._as_data = data
    return chunk._as_data


def encoded_size(chunk: Chunk) -> int:
    """Bytes taken by a chunk inside its parent: header, payload and pad."""
    size = HEADER_STRUCT.size + padded_size(chunk.size)
    if chunk.is_list:
        size += ID_SIZE
    return size


def encode_header(chunk: Chunk) -> bytes:
    """Wire header of a chunk: marker, size and sub-ID for LIST/RIFF."""
    marker = chunk.kind.marker
    if marker is None:
        return pack_header(ChunkHeader(chunk.id, chunk.size))
    header = pack_header(ChunkHeader(marker, chunk.size + ID_SIZE))
    return header + unpack_id(chunk.id)


@reports_errors
def list_as_chunk(lst: ChunkList, riff: bool = False) -> Chunk:
    """Materialize the list's children into a new LIST or RIFF chunk.

    The payload is copied into a buffer owned by the container's arena.
    """
    arena = lst.container.arena
    arena.ensure_alive()
    cached = lst._as_chunks.get(riff)
    if cached is not None:
        return cached

    buffer = arena.allocate(sum(encoded_size(sub) for sub in lst))
    pos = 0
    for sub in lst:
        header = encode_header(sub)
        buffer[pos : pos + len(header)] = header
        pos += len(header)
        buffer[pos : pos + sub.size] = sub.payload
        # pad bytes are already zero
        pos += padded_size(sub.size)
    assert pos == len(buffer)

    kind = ChunkKind.RIFF if riff else ChunkKind.LIST
    chunk = arena.adopt(Chunk(lst.container, kind, lst.id, buffer, Splicer(0, pos)))
    chunk._as_list = lst
    lst._as_chunks[riff] = chunk
    return chunk


@reports_errors
def data_as_chunk(data: Data) -> Chunk:
    arena = data.container.arena
    arena.ensure_alive()
    if data._as_chunk is None:
        chunk = arena.adopt(
            Chunk(data.container, ChunkKind.OTHER, data.id, data.buffer, data.span)
        )
        chunk._as_data = data
        data._as_chunk = chunk
    return data._as_chunk


def invalidate(lst: ChunkList) -> None:
    """Drop the chunks cached for a list, and their link back to it."""
    for chunk in lst._as_chunks.values():
        if chunk._as_list is lst:
            chunk._as_list = None
    lst._as_chunks.clear()


def _can_adopt(lst: ChunkList, chunk: Chunk) -> bool:
    return chunk.container is lst.container and chunk.owner is None


@deal.pre(_can_adopt, message='chunk must be unowned and from the same container')
def prepend(lst: ChunkList, chunk: Chunk) -> None:
    """Add a chunk at the beginning of a list."""
    lst.container.arena.ensure_alive()
    invalidate(lst)
    chunk.owner = lst
    chunk.next = lst.first
    lst.first = chunk
    if lst.last is None:
        lst.last = chunk
    if lst.cursor is chunk.next:
        lst.cursor = chunk


@deal.pre(_can_adopt, message='chunk must be unowned and from the same container')
def append(lst: ChunkList, chunk: Chunk) -> None:
    """Add a chunk at the end of a list."""
    lst.container.arena.ensure_alive()
    invalidate(lst)
    chunk.owner = lst
    chunk.next = None
    if lst.last is not None:
        lst.last.next = chunk
    else:
        lst.first = chunk
    lst.last = chunk
    if lst.cursor is None:
        lst.cursor = chunk


def start(lst: ChunkList) -> None:
    """Set the list's cursor to its first chunk."""
    lst.cursor = lst.first


def next_chunk(lst: ChunkList) -> Optional[Chunk]:
    """Return the chunk under the cursor and advance it, None at the end."""
    chunk = lst.cursor
    if chunk is not None:
        lst.cursor = chunk.next
    return chunk


def find_id(lst: ChunkList, cid: ChunkID) -> Optional[Chunk]:
    """Return the first chunk of the list with given ID."""
    return next((chunk for chunk in lst if chunk.id == cid), None)


@reports_errors
def copy_chunk(chunk: Chunk) -> Chunk:
    """Copy a chunk within its container so it can join another list.

    The copy shares the original bytes.
    """
    return chunk.container.arena.adopt(
        Chunk(chunk.container, chunk.kind, chunk.id, chunk.buffer, chunk.span)
    )


@reports_errors
def copy_chunk_to(container: Container, chunk: Chunk) -> Chunk:
    """Copy a chunk into another container, duplicating its payload."""
    payload = chunk.payload
    buffer = container.arena.allocate(len(payload))
    buffer[:] = payload
    return container.arena.adopt(
        Chunk(container, chunk.kind, chunk.id, buffer, Splicer(0, len(buffer)))
    )


def data_size(data: Data) -> int:
    return data.size


def data_content(data: Data) -> bytes:
    return data.content
