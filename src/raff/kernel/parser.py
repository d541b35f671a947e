import os
from typing import Tuple, Union

from .align import WORD_ALIGN, assert_zero, calc_align
from .buffer import Splicer
from .container import Container
from .errors import CannotOpenSource, CorruptFormat, NotContainerFormat, reports_errors
from .header import HEADER_STRUCT, unpack_header, unpack_size
from .ids import ID_SIZE, RIFF_ID, ChunkID, format_id, pack_id
from .model import Chunk, ChunkKind, ChunkList
from .settings import _ParseSetting
from .source import ByteSource, ChunkSource, FileSource, read_exact, release_source


def read_body(source: ByteSource) -> Tuple[ChunkID, bytes]:
    """Read the outer RIFF header, return the form ID and the body bytes."""
    try:
        etag = pack_id(read_exact(source, ID_SIZE))
    except CorruptFormat as exc:
        raise NotContainerFormat('input is shorter than a RIFF marker') from exc
    if etag != RIFF_ID:
        raise NotContainerFormat(f'got {format_id(etag)!r} instead of RIFF')

    size = unpack_size(read_exact(source, ID_SIZE))
    form_id = pack_id(read_exact(source, ID_SIZE))
    if size < ID_SIZE:
        raise CorruptFormat(f'RIFF size {size} cannot hold a form ID')

    return form_id, read_exact(source, size - ID_SIZE)


@reports_errors
def open_source(cfg: _ParseSetting, source: ByteSource) -> Container:
    """Read a whole RIFF container from given byte source.

    Only the outer header is decoded here; nested lists are parsed on demand.
    The source is released whether or not the read succeeds.
    """
    try:
        form_id, body = read_body(source)
    finally:
        release_source(source)

    container = Container(body)
    container.set_root(form_id)
    cfg.logger.debug(
        'opened RIFF container %s with %d bytes', format_id(form_id), len(body)
    )
    return container


@reports_errors
def open_path(cfg: _ParseSetting, path: Union[str, 'os.PathLike[str]']) -> Container:
    try:
        stream = open(path, 'rb')
    except OSError as exc:
        raise CannotOpenSource(str(path)) from exc
    source = FileSource(stream, owned=True)
    try:
        return open_source(cfg, source)
    finally:
        source.release()


def parse_next_chunk(cfg: _ParseSetting, source: ChunkSource) -> Chunk:
    """Parse a single chunk at the current position of `source`.

    The chunk's range points into the parent payload, nothing is copied.
    The source is left after the chunk and its alignment padding.
    """
    etag, size = unpack_header(read_exact(source, HEADER_STRUCT.size))
    kind = ChunkKind.from_marker(etag)
    cid = etag
    if kind is not ChunkKind.OTHER:
        cid = pack_id(read_exact(source, ID_SIZE))
        if size < ID_SIZE:
            raise CorruptFormat(f'{kind.value} size {size} cannot hold a sub-ID')
        size -= ID_SIZE

    offset = source.position
    pad = calc_align(size, WORD_ALIGN)
    if offset + size + pad > len(source):
        raise CorruptFormat(
            f'chunk {format_id(cid)} of size {size} at offset {offset}'
            f' overruns parent of size {len(source)}'
        )

    chunk = Chunk(
        source.chunk.container,
        kind,
        cid,
        source.chunk.buffer,
        Splicer(source.chunk.span.offset + offset, size),
    )
    source.skip(size)
    check_padding(cfg, source.read(pad))
    return chunk


def check_padding(cfg: _ParseSetting, pad: bytes) -> None:
    if cfg.strict:
        assert_zero(pad)
    elif pad and set(pad) != {0}:
        cfg.logger.warning('non-zero padding between chunks: %r', pad)


def parse_list(cfg: _ParseSetting, chunk: Chunk) -> ChunkList:
    """Parse all direct children of a LIST/RIFF chunk into a new list."""
    arena = chunk.container.arena
    lst = arena.adopt(ChunkList(chunk.container, chunk.id))
    source = ChunkSource(chunk)
    while source.remaining:
        sub = arena.adopt(parse_next_chunk(cfg, source))
        sub.owner = lst
        if lst.last:
            lst.last.next = sub
        else:
            lst.first = sub
        lst.last = sub
    lst.cursor = lst.first
    lst._as_chunks[chunk.kind is ChunkKind.RIFF] = chunk
    cfg.logger.debug(
        'parsed %s list %s with %d chunks',
        chunk.kind.value,
        format_id(chunk.id),
        len(lst),
    )
    return lst
