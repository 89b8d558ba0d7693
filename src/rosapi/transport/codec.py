"""Word framing for the RouterOS API.

Every word on the wire is a length prefix followed by that many bytes of
payload. The prefix is one to five bytes long depending on the length;
the empty word (a single zero byte) terminates a sentence.
"""

from __future__ import annotations

import struct
from typing import Tuple

from ..exceptions import NotSupported


MAX_LENGTH = 0xFFFFFFFF


def encode_length(length: int) -> bytes:
    """Return the length prefix for a word of *length* bytes."""

    if length < 0 or length > MAX_LENGTH:
        raise ValueError(f"word length out of range: {length}")

    if length < 0x80:
        return struct.pack("!B", length)
    if length < 0x4000:
        return struct.pack("!H", length | 0x8000)
    if length < 0x200000:
        return struct.pack("!I", length | 0xC00000)[1:]
    if length < 0x10000000:
        return struct.pack("!I", length | 0xE0000000)
    return b"\xF0" + struct.pack("!I", length)


def decode_length(data: bytes, offset: int = 0) -> Tuple[int, int]:
    """Decode the length prefix at *offset*; return (length, new_offset)."""

    first = data[offset]

    if first < 0x80:
        size = 1
        mask = 0x7F
    elif first < 0xC0:
        size = 2
        mask = 0x3FFF
    elif first < 0xE0:
        size = 3
        mask = 0x1FFFFF
    elif first < 0xF0:
        size = 4
        mask = 0x0FFFFFFF
    elif first >= 0xF8:
        # 0xF8 to 0xFF are control bytes, not lengths
        raise NotSupported(f"unsupported control byte: {first:#04x}", NotSupported.CONTROL_BYTE, first)
    else:
        end = offset + 5
        if len(data) < end:
            raise ValueError("truncated length prefix")
        return struct.unpack("!I", data[offset + 1 : end])[0], end

    end = offset + size
    if len(data) < end:
        raise ValueError("truncated length prefix")

    raw = b"\x00" * (4 - size) + bytes(data[offset:end])
    return struct.unpack("!I", raw)[0] & mask, end


def encode_word(payload: bytes) -> bytes:
    """Frame *payload* as a single word."""

    return encode_length(len(payload)) + payload
