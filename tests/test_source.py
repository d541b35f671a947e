import io

import pytest

from conftest import Trickle
from raff.kernel.errors import CorruptFormat
from raff.kernel.source import BufferSource, FileSource, read_exact, release_source


class PullOnly(object):
    """Minimal byte source, without bulk read or release."""

    def __init__(self, data: bytes) -> None:
        self._it = iter(data)

    def produce_next(self):
        return next(self._it, None)


def test_buffer_source_produces_bytes_then_end():
    source = BufferSource(b'ab')
    assert source.produce_next() == ord('a')
    assert source.produce_next() == ord('b')
    assert source.produce_next() is None
    assert source.position == 2


def test_read_exact_falls_back_to_pulling():
    source = PullOnly(b'RIFFxyz')
    assert read_exact(source, 4) == b'RIFF'
    with pytest.raises(CorruptFormat):
        read_exact(source, 4)


def test_read_exact_short_buffer():
    with pytest.raises(CorruptFormat):
        read_exact(BufferSource(b'abc'), 4)


def test_file_source_closes_owned_stream():
    stream = io.BytesIO(b'\x01\x02')
    source = FileSource(stream, owned=True)
    assert source.produce_next() == 1
    assert source.read(4) == b'\x02'
    assert source.produce_next() is None
    release_source(source)
    assert stream.closed


def test_file_source_leaves_borrowed_stream_open():
    stream = io.BytesIO(b'')
    release_source(FileSource(stream))
    assert not stream.closed


def test_release_is_optional():
    release_source(PullOnly(b''))


def test_read_exact_retries_short_reads():
    source = FileSource(Trickle(b'RIFF\x0c\x00\x00\x00'))
    assert read_exact(source, 8) == b'RIFF\x0c\x00\x00\x00'
    with pytest.raises(CorruptFormat):
        read_exact(source, 1)
