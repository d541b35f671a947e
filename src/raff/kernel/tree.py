import io
import posixpath
import sys
from typing import IO, Iterator, Optional

from parse import parse

from .ids import format_id
from .model import Chunk, ChunkList
from .settings import DEFAULT_SETTING, _ParseSetting
from .view import chunk_as_list


def findall(tag: str, root: Optional[ChunkList]) -> Iterator[Chunk]:
    """Yield chunks of the list whose ID matches given `parse` pattern."""
    if not root:
        return
    for c in root:
        if parse(tag, format_id(c.id), evaluate_result=False):
            yield c


def find(tag: str, root: Optional[ChunkList]) -> Optional[Chunk]:
    return next(findall(tag, root), None)


def findpath(
    path: str, root: Optional[Chunk], cfg: _ParseSetting = DEFAULT_SETTING
) -> Optional[Chunk]:
    """Resolve a slash separated path of IDs below given chunk."""
    path = posixpath.normpath(path)
    if not path or path == '.':
        return root
    dirname, basename = posixpath.split(path)
    parent = findpath(dirname, root, cfg)
    if not parent or not parent.is_list:
        return None
    return find(basename, chunk_as_list(parent, cfg))


def render(
    chunk: Optional[Chunk],
    level: int = 0,
    stream: Optional[IO[str]] = None,
    cfg: _ParseSetting = DEFAULT_SETTING,
) -> None:
    if not chunk:
        return
    stream = stream or sys.stdout
    indent = '    ' * level
    attribs = f' size="{chunk.size}"'
    if not chunk.is_list:
        print(f'{indent}<{format_id(chunk.id)}{attribs} />', file=stream)
        return
    attribs = f' type="{chunk.kind.value}"' + attribs
    children = list(chunk_as_list(chunk, cfg))
    closing = '' if children else ' /'
    print(f'{indent}<{format_id(chunk.id)}{attribs}{closing}>', file=stream)
    if children:
        for c in children:
            render(c, level=level + 1, stream=stream, cfg=cfg)
        print(f'{indent}</{format_id(chunk.id)}>', file=stream)


def renders(chunk: Optional[Chunk], cfg: _ParseSetting = DEFAULT_SETTING) -> str:
    with io.StringIO() as stream:
        render(chunk, stream=stream, cfg=cfg)
        return stream.getvalue()
