from typing import Union

import deal

ChunkID = int

ID_SIZE = 4


@deal.chain(
    deal.pre(lambda _: len(_.tag) <= ID_SIZE),
    deal.ensure(lambda _: 0 <= _.result < 1 << 32),
    deal.pure,
)
def pack_id(tag: bytes) -> ChunkID:
    """Pack up to 4 bytes into an ID, right-padding with zero bytes."""
    return int.from_bytes(bytes(tag).ljust(ID_SIZE, b'\0'), 'big')


@deal.chain(
    deal.pre(lambda _: 0 <= _.cid < 1 << 32),
    deal.ensure(lambda _: len(_.result) == ID_SIZE),
    deal.pure,
)
def unpack_id(cid: ChunkID) -> bytes:
    return cid.to_bytes(ID_SIZE, 'big')


def new_id(tag: Union[str, bytes]) -> ChunkID:
    """Create an ID from a string of at most 4 characters.

    >>> hex(new_id('RIFF'))
    '0x52494646'
    >>> new_id('ab') == new_id(b'ab\\0\\0')
    True
    """
    if isinstance(tag, str):
        tag = tag.encode('latin-1')
    return pack_id(tag)


def format_id(cid: ChunkID) -> str:
    return unpack_id(cid).rstrip(b'\0').decode('latin-1')


RIFF_ID = new_id('RIFF')
LIST_ID = new_id('LIST')
