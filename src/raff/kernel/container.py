from types import TracebackType
from typing import Optional, Type

from .arena import Arena
from .buffer import BufferLike, Splicer
from .errors import reports_errors
from .ids import ChunkID
from .model import Chunk, ChunkKind, ChunkList, Data


class Container(object):
    """One open RIFF file: an arena, the raw body buffer and the root chunk.

    The buffer is read once and never mutated. Every chunk, list and data
    derived from the container lives in its arena and becomes unusable once
    the container is closed.

    A container and everything derived from it must be used by a single
    owner at a time; callers sharing one across threads need their own lock.
    """

    def __init__(self, buffer: BufferLike = b'') -> None:
        self.arena = Arena()
        self.buffer = bytes(buffer)
        self.root: Optional[Chunk] = None

    @property
    def closed(self) -> bool:
        return self.arena.released

    def set_root(self, form_id: ChunkID) -> Chunk:
        self.root = self.arena.adopt(
            Chunk(self, ChunkKind.RIFF, form_id, self.buffer, Splicer(0, len(self.buffer)))
        )
        return self.root

    def close(self) -> None:
        self.arena.release_all()
        self.root = None
        self.buffer = b''

    def __enter__(self) -> 'Container':
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        state = 'closed' if self.closed else f'root={self.root!r}'
        return f'Container<{state}>'


def new_container() -> Container:
    """Create an empty container, without a root chunk."""
    return Container()


@reports_errors
def new_data(container: Container, cid: ChunkID, content: BufferLike) -> Data:
    """Create a data view holding a copy of `content`."""
    buffer = container.arena.allocate(len(content))
    buffer[:] = content
    return container.arena.adopt(
        Data(container, cid, buffer, Splicer(0, len(buffer)))
    )


@reports_errors
def new_list(container: Container, cid: ChunkID) -> ChunkList:
    return container.arena.adopt(ChunkList(container, cid))
