import pytest
import rosapi

from rosapi.transport import codec


def test_length_boundaries():

    expected = (
        (0, b'\x00'),
        (0x7F, b'\x7f'),
        (0x80, b'\x80\x80'),
        (0x3FFF, b'\xbf\xff'),
        (0x4000, b'\xc0\x40\x00'),
        (0x1FFFFF, b'\xdf\xff\xff'),
        (0x200000, b'\xe0\x20\x00\x00'),
        (0xFFFFFFF, b'\xef\xff\xff\xff'),
        (0x10000000, b'\xf0\x10\x00\x00\x00'),
    )

    for length, prefix in expected:
        assert codec.encode_length(length) == prefix
        assert codec.decode_length(prefix + b'tail') == (length, len(prefix))


def test_out_of_range():

    with pytest.raises(ValueError):
        codec.encode_length(-1)

    with pytest.raises(ValueError):
        codec.encode_length(0x100000000)


def test_truncated_prefix():

    with pytest.raises(ValueError):
        codec.decode_length(b'\xc0\x40')

    with pytest.raises(ValueError):
        codec.decode_length(b'\xf0\x00')


def test_control_bytes():

    for control in range(0xF8, 0x100):
        with pytest.raises(rosapi.NotSupported) as caught:
            codec.decode_length(bytes((control,)) + b'\x00\x00\x00\x05')

        assert caught.value.code == rosapi.NotSupported.CONTROL_BYTE
        assert caught.value.value == control

    # 0xF0 to 0xF7 still introduce a five byte length.
    assert codec.decode_length(b'\xf7\x00\x00\x00\x05') == (5, 5)


def test_encode_word():

    assert codec.encode_word(b'') == b'\x00'
    assert codec.encode_word(b'/login') == b'\x06/login'


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
