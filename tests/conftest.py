import io
import struct

import pytest


def pack_chunk(tag: bytes, payload: bytes, pad: bytes = b'\0') -> bytes:
    chunk = tag + struct.pack('<I', len(payload)) + payload
    return chunk + pad if len(payload) % 2 else chunk


def pack_list(marker: bytes, form: bytes, body: bytes) -> bytes:
    return marker + struct.pack('<I', len(body) + 4) + form + body


@pytest.fixture
def wave_bytes() -> bytes:
    """RIFF WAVE with an odd 'fmt ' chunk, a nested INFO list and 'data'."""
    info = pack_list(b'LIST', b'INFO', pack_chunk(b'ISFT', b'raff'))
    body = pack_chunk(b'fmt ', b'abc') + info + pack_chunk(b'data', b'xy')
    return pack_list(b'RIFF', b'WAVE', body)


class Trickle(io.RawIOBase):
    """Raw stream returning at most 3 bytes per read."""

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._pos = 0

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        block = self._data[self._pos : self._pos + min(3, len(buffer))]
        buffer[: len(block)] = block
        self._pos += len(block)
        return len(block)
