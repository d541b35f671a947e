import deal

from .buffer import BufferLike
from .errors import CorruptFormat

WORD_ALIGN = 2


class NonZeroPaddingError(CorruptFormat):
    def __init__(self, pad: BufferLike) -> None:
        super().__init__(f'non-zero padding between chunks: {bytes(pad)!r}')
        self.pad = bytes(pad)


@deal.chain(
    deal.raises(NonZeroPaddingError),
    deal.reason(NonZeroPaddingError, lambda _: _.pad and set(_.pad) != {0}),
    deal.has(),
)
def assert_zero(pad: BufferLike) -> BufferLike:
    if pad and set(pad) != {0}:
        raise NonZeroPaddingError(pad)
    return pad


@deal.chain(
    deal.pre(lambda _: _.align >= 1),
    deal.pre(lambda _: _.offset >= 0),
    deal.ensure(lambda _: 0 <= _.result < _.align),
    deal.ensure(lambda _: (_.offset + _.result) % _.align == 0),
    deal.pure,
)
def calc_align(offset: int, align: int) -> int:
    """Calculate difference from given offset to next aligned offset."""
    return (align - offset) % align


@deal.chain(
    deal.pre(lambda _: _.align >= 1),
    deal.pre(lambda _: _.size >= 0),
    deal.ensure(lambda _: _.size <= _.result < _.size + _.align),
    deal.ensure(lambda _: _.result % _.align == 0),
    deal.pure,
)
def padded_size(size: int, align: int = WORD_ALIGN) -> int:
    """Size of a payload once the trailing pad bytes are added."""
    return size + calc_align(size, align)
