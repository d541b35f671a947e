from typing import Any, List, TypeVar

import deal

from .errors import ContainerClosed

T = TypeVar('T')


class Arena(object):
    """Allocation pool bound to one open container.

    Every derived object (chunk, list, data, serialization buffer) is
    registered here and dropped together by `release_all`. There is no
    individual free, so reference cycles between views never need tracking.
    """

    def __init__(self) -> None:
        self._objects: List[Any] = []
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    def __len__(self) -> int:
        return len(self._objects)

    def ensure_alive(self) -> None:
        if self._released:
            raise ContainerClosed()

    @deal.pre(lambda _: _.size >= 0)
    def allocate(self, size: int) -> bytearray:
        self.ensure_alive()
        return self.adopt(bytearray(size))

    def adopt(self, obj: T) -> T:
        self.ensure_alive()
        self._objects.append(obj)
        return obj

    def release_all(self) -> None:
        self._objects.clear()
        self._released = True
