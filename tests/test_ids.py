import deal
import pytest

from raff.kernel.ids import LIST_ID, RIFF_ID, format_id, new_id, unpack_id


def test_id_is_packed_big_endian():
    assert new_id('RIFF') == RIFF_ID == 0x52494646
    assert new_id(b'LIST') == LIST_ID
    assert unpack_id(new_id('WAVE')) == b'WAVE'


def test_short_id_is_zero_padded():
    assert new_id('ab') == new_id(b'ab\0\0') == 0x61620000
    assert new_id('') == 0
    assert format_id(new_id('ab')) == 'ab'


def test_format_keeps_spaces():
    assert format_id(new_id('fmt ')) == 'fmt '


def test_long_id_is_rejected():
    with pytest.raises(deal.PreContractError):
        new_id('RIFFS')


def test_latin1_id_round_trips():
    cid = new_id(b'\xe9t\xe9 ')
    assert format_id(cid) == '\xe9t\xe9 '
    assert new_id(format_id(cid)) == cid
