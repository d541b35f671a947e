import struct
from typing import Sequence, Tuple

from raff.kernel.container import Container, new_container, new_data, new_list
from raff.kernel.ids import new_id
from raff.kernel.model import Chunk
from raff.kernel.view import data_as_chunk, list_as_chunk, prepend

FMT_STRUCT = struct.Struct('<HHIIHH')

PCM_FORMAT = 1

SAMPLES = ((65516, 1), (65508, 65533))


def pack_fmt(channels: int = 2, rate: int = 22050, bits: int = 16) -> bytes:
    block_align = channels * bits // 8
    return FMT_STRUCT.pack(
        PCM_FORMAT, channels, rate, rate * block_align, block_align, bits
    )


def pack_samples(samples: Sequence[Tuple[int, ...]]) -> bytes:
    return b''.join(struct.pack(f'<{len(frame)}H', *frame) for frame in samples)


def build_wave(
    container: Container, fmt: bytes, samples: bytes
) -> Chunk:
    """Build a RIFF WAVE chunk holding a 'fmt ' and a 'data' chunk."""
    data_ck = data_as_chunk(new_data(container, new_id('data'), samples))
    fmt_ck = data_as_chunk(new_data(container, new_id('fmt '), fmt))

    wave = new_list(container, new_id('WAVE'))
    prepend(wave, data_ck)
    prepend(wave, fmt_ck)
    return list_as_chunk(wave, riff=True)


def build_sample() -> Tuple[Container, Chunk]:
    container = new_container()
    return container, build_wave(container, pack_fmt(), pack_samples(SAMPLES))
