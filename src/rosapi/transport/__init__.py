"""Transport-facing pieces: the word sink contract, word framing, and a
concrete sink writing onto a file-like object."""

from .base import (
    DIRECTION_ALL,
    DIRECTION_NONE,
    DIRECTION_RECEIVE,
    DIRECTION_SEND,
    WordSink,
    exclusive,
)
from .codec import decode_length, encode_length, encode_word
from .stream import StreamSink
