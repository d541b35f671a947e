import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterator, Optional

from .buffer import BufferLike, Splicer
from .ids import LIST_ID, RIFF_ID, ChunkID, format_id

if TYPE_CHECKING:
    from .container import Container


class ChunkKind(enum.Enum):
    LIST = 'LIST'
    RIFF = 'RIFF'
    OTHER = 'OTHER'

    @property
    def marker(self) -> Optional[ChunkID]:
        """Structural ID written before the sub-ID, if any."""
        return _MARKERS.get(self)

    @classmethod
    def from_marker(cls, etag: ChunkID) -> 'ChunkKind':
        return _KINDS.get(etag, cls.OTHER)


_MARKERS = {ChunkKind.LIST: LIST_ID, ChunkKind.RIFF: RIFF_ID}
_KINDS = {marker: kind for kind, marker in _MARKERS.items()}


@dataclass(eq=False)
class Chunk(object):
    """Tagged view over a byte range of its container.

    kind: LIST/RIFF chunks hold further chunks, OTHER chunks hold raw payload

    id: visible ID (the sub-ID for LIST/RIFF chunks)

    buffer, span: payload location, excluding sub-ID and pad byte

    owner: list currently holding this chunk
    """

    container: 'Container' = field(repr=False)
    kind: ChunkKind
    id: ChunkID
    buffer: BufferLike = field(repr=False)
    span: Splicer
    owner: Optional['ChunkList'] = field(default=None, repr=False)

    next: Optional['Chunk'] = field(default=None, init=False, repr=False)
    _as_list: Optional['ChunkList'] = field(default=None, init=False, repr=False)
    _as_data: Optional['Data'] = field(default=None, init=False, repr=False)

    @property
    def size(self) -> int:
        return self.span.size

    @property
    def is_list(self) -> bool:
        return self.kind is not ChunkKind.OTHER

    @property
    def payload(self) -> memoryview:
        self.container.arena.ensure_alive()
        return self.span(self.buffer)

    @property
    def content(self) -> bytes:
        return bytes(self.payload)

    def __repr__(self) -> str:
        prefix = '' if self.kind is ChunkKind.OTHER else f'{self.kind.value}:'
        return f'Chunk<{prefix}{format_id(self.id)}>[{self.size}]'


@dataclass(eq=False)
class ChunkList(object):
    """Ordered sequence of sibling chunks sharing a form ID.

    Chunks are linked forward through `Chunk.next`; `first` and `last` allow
    constant time prepend and append, `cursor` drives `view.next_chunk`.
    """

    container: 'Container' = field(repr=False)
    id: ChunkID
    first: Optional[Chunk] = field(default=None, repr=False)
    last: Optional[Chunk] = field(default=None, repr=False)
    cursor: Optional[Chunk] = field(default=None, repr=False)

    # keyed by the root (RIFF) flag of the materialized chunk
    _as_chunks: Dict[bool, Chunk] = field(default_factory=dict, init=False, repr=False)

    def __iter__(self) -> Iterator[Chunk]:
        self.container.arena.ensure_alive()
        chunk = self.first
        while chunk:
            yield chunk
            chunk = chunk.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        children = ','.join(format_id(chunk.id) for chunk in self)
        return f'ChunkList<{format_id(self.id)}>[{children}]'


@dataclass(eq=False)
class Data(object):
    """Directly addressable payload of a leaf chunk."""

    container: 'Container' = field(repr=False)
    id: ChunkID
    buffer: BufferLike = field(repr=False)
    span: Splicer

    _as_chunk: Optional[Chunk] = field(default=None, init=False, repr=False)

    @property
    def size(self) -> int:
        return self.span.size

    @property
    def view(self) -> memoryview:
        self.container.arena.ensure_alive()
        return self.span(self.buffer)

    @property
    def content(self) -> bytes:
        return bytes(self.view)

    def __repr__(self) -> str:
        return f'Data<{format_id(self.id)}>[{self.size}]'
