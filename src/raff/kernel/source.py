"""Pull-based byte providers read by the parser.

A byte source only needs `produce_next`, returning the next byte or `None`
at end of input; `release` is optional. Sources shipped here also offer a
bulk `read` that `read_exact` prefers over byte-by-byte pulls.
"""

import io
from typing import IO, TYPE_CHECKING, Optional, Protocol

from .buffer import BufferLike, splice
from .errors import CorruptFormat

if TYPE_CHECKING:
    from .model import Chunk


class ByteSource(Protocol):
    def produce_next(self) -> Optional[int]:
        ...


class BufferSource(object):
    """Byte source over an in-memory buffer."""

    def __init__(self, buffer: BufferLike) -> None:
        self._buffer = memoryview(buffer)
        self._pos = 0

    def __len__(self) -> int:
        return len(self._buffer)

    @property
    def position(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._buffer) - self._pos

    def produce_next(self) -> Optional[int]:
        if self._pos >= len(self._buffer):
            return None
        byte = self._buffer[self._pos]
        self._pos += 1
        return byte

    def read(self, size: int = -1) -> bytes:
        if size < 0:
            size = self.remaining
        size = min(size, self.remaining)
        res = bytes(splice(self._buffer, self._pos, size))
        self._pos += size
        return res

    def skip(self, size: int) -> int:
        """Advance without reading, clamped to the end of the buffer."""
        self._pos = min(self._pos + size, len(self._buffer))
        return self._pos

    def release(self) -> None:
        self._buffer = memoryview(b'')
        self._pos = 0


class ChunkSource(BufferSource):
    """Sub-source re-reading the payload of an already buffered chunk."""

    def __init__(self, chunk: 'Chunk') -> None:
        super().__init__(chunk.payload)
        self.chunk = chunk

    def release(self) -> None:
        # the payload view is shared with the chunk itself
        pass


class FileSource(object):
    """Byte source over a binary file object.

    When `owned` is set the file is closed on release.
    """

    def __init__(self, stream: IO[bytes], owned: bool = False) -> None:
        self._stream = stream
        self._owned = owned

    def produce_next(self) -> Optional[int]:
        byte = self._stream.read(1)
        return byte[0] if byte else None

    def read(self, size: int = -1) -> bytes:
        return self._stream.read(size) or b''

    def release(self) -> None:
        if self._owned:
            self._stream.close()


def read_exact(source: ByteSource, size: int) -> bytes:
    """Read exactly `size` bytes from source, or fail with CorruptFormat."""
    read = getattr(source, 'read', None)
    if read is not None:
        data = b''
        while len(data) < size:
            # raw streams may return short reads before end of input
            block = read(size - len(data))
            if not block:
                break
            data += block
    else:
        with io.BytesIO() as stream:
            for _ in range(size):
                byte = source.produce_next()
                if byte is None:
                    break
                stream.write(bytes((byte,)))
            data = stream.getvalue()
    if len(data) != size:
        raise CorruptFormat(f'expected {size} bytes but got {len(data)}')
    return data


def release_source(source: ByteSource) -> None:
    release = getattr(source, 'release', None)
    if release is not None:
        release()
