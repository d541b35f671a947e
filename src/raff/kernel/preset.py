from dataclasses import dataclass, replace
from typing import Any, Optional, TypeVar

from . import serializer, settings, tree, view
from .model import Chunk, ChunkList

_SettingT = TypeVar('_SettingT', bound='_DefaultOverride')


@dataclass(frozen=True)
class _DefaultOverride(object):
    def __call__(self: _SettingT, **kwargs: Any) -> _SettingT:
        return replace(self, **kwargs)


@dataclass(frozen=True)
class _RiffPreset(settings._ParseSetting, _DefaultOverride):

    # static pass through
    find = staticmethod(tree.find)
    findall = staticmethod(tree.findall)
    find_id = staticmethod(view.find_id)
    serialize = staticmethod(serializer.serialize)
    serialize_bytes = staticmethod(serializer.serialize_bytes)
    serialize_to_sink = staticmethod(serializer.serialize_to_sink)

    # isort: off
    from .parser import (
        open_source,
        open_path,
    )
    # isort: on

    def chunk_as_list(self, chunk: Chunk) -> ChunkList:
        return view.chunk_as_list(chunk, self)

    def findpath(self, path: str, root: Chunk) -> Optional[Chunk]:
        return tree.findpath(path, root, self)

    def render(self, chunk: Chunk, **kwargs: Any) -> None:
        tree.render(chunk, cfg=self, **kwargs)


riff = _RiffPreset()
