import os
from typing import IO, Iterator, Optional, Union

from raff.utils.copyio import buffered

from .errors import CannotOpenSink, reports_errors
from .model import Chunk
from .view import encode_header

Sink = Union[str, 'os.PathLike[str]', IO[bytes]]


class SerializationSource(object):
    """Byte source producing the wire form of a chunk on demand.

    Output is the chunk header followed by its payload. The trailing pad
    byte is not emitted: padding belongs to the enclosing list.
    """

    def __init__(self, chunk: Chunk) -> None:
        self.chunk = chunk
        self._header = encode_header(chunk)
        self._pos = 0

    def __len__(self) -> int:
        return len(self._header) + self.chunk.size

    def _byte_at(self, idx: int) -> int:
        if idx < len(self._header):
            return self._header[idx]
        return self.chunk.payload[idx - len(self._header)]

    def produce_next(self) -> Optional[int]:
        if self._pos >= len(self):
            return None
        byte = self._byte_at(self._pos)
        self._pos += 1
        return byte

    def read(self, size: int = -1) -> bytes:
        end = len(self) if size < 0 else min(len(self), self._pos + size)
        start, self._pos = self._pos, end
        hsize = len(self._header)
        head = self._header[min(start, hsize) : min(end, hsize)]
        body = self.chunk.payload[max(start - hsize, 0) : max(end - hsize, 0)]
        return head + bytes(body)

    def __iter__(self) -> Iterator[bytes]:
        return buffered(self.read)

    def release(self) -> None:
        self._pos = len(self)


def serialize(chunk: Chunk) -> SerializationSource:
    return SerializationSource(chunk)


def serialize_bytes(chunk: Chunk) -> bytes:
    return serialize(chunk).read()


def write_stream(chunk: Chunk, stream: IO[bytes]) -> int:
    written = 0
    for buffer in serialize(chunk):
        written += stream.write(buffer)
    return written


@reports_errors
def serialize_to_sink(chunk: Chunk, sink: Sink) -> int:
    """Write the chunk to a path or binary stream, return bytes written."""
    if not isinstance(sink, (str, bytes, os.PathLike)):
        return write_stream(chunk, sink)
    try:
        stream = open(sink, 'wb')
    except OSError as exc:
        raise CannotOpenSink(str(sink)) from exc
    with stream:
        return write_stream(chunk, stream)
