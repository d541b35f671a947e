import struct

from raff.kernel.container import new_container, new_data, new_list
from raff.kernel.ids import new_id
from raff.kernel.preset import riff
from raff.kernel.serializer import serialize
from raff.kernel.source import BufferSource
from raff.kernel.view import (
    chunk_as_data,
    chunk_as_list,
    data_as_chunk,
    find_id,
    list_as_chunk,
    prepend,
)
from raff.sample import FMT_STRUCT, SAMPLES, build_sample, pack_fmt, pack_samples


def test_new_container_has_no_root():
    container = new_container()
    assert container.root is None
    assert not container.closed


def test_wave_end_to_end():
    """Build a WAVE file, write it out and read both chunks back."""
    fmt_buf = bytes(range(16))
    data_buf = b'\x01\x02\x03\x04\x05\x06\x07\x08'

    container = new_container()
    data_ck = data_as_chunk(new_data(container, new_id('data'), data_buf))
    fmt_ck = data_as_chunk(new_data(container, new_id('fmt '), fmt_buf))
    wave = new_list(container, new_id('WAVE'))
    prepend(wave, data_ck)
    prepend(wave, fmt_ck)

    encoded = b''.join(serialize(list_as_chunk(wave, riff=True)))
    container.close()
    assert len(encoded) == 12 + (8 + 16) + (8 + 8)

    with riff.open_source(BufferSource(encoded)) as parsed:
        root = parsed.root
        assert root.id == new_id('WAVE')
        lst = chunk_as_list(root)
        assert chunk_as_data(find_id(lst, new_id('fmt '))).content == fmt_buf
        assert chunk_as_data(find_id(lst, new_id('data'))).content == data_buf
    assert parsed.closed


def test_sample_wave(tmp_path):
    container, wave = build_sample()
    path = tmp_path / 'sample.wav'
    with container:
        riff.serialize_to_sink(wave, path)

    with riff.open_path(path) as parsed:
        lst = chunk_as_list(parsed.root)
        fmt = chunk_as_data(find_id(lst, new_id('fmt ')))
        assert fmt.size >= 16
        assert FMT_STRUCT.unpack(fmt.content) == (1, 2, 22050, 22050 * 2 * 2, 4, 16)

        data = chunk_as_data(find_id(lst, new_id('data'))).content
        frames = [struct.unpack_from('<2H', data, offset) for offset in (0, 4)]
        assert frames == list(SAMPLES)


def test_sample_helpers():
    assert pack_fmt() == FMT_STRUCT.pack(1, 2, 22050, 88200, 4, 16)
    assert pack_samples([(1, 2)]) == b'\x01\x00\x02\x00'
