import functools
import io
from typing import Callable, Iterator


def buffered(
    source: Callable[[int], bytes], buffer_size: int = io.DEFAULT_BUFFER_SIZE
) -> Iterator[bytes]:
    """Pull `buffer_size` blocks from source until it returns empty bytes."""
    return iter(functools.partial(source, buffer_size), b'')
