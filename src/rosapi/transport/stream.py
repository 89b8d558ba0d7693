"""A word sink writing onto a binary file-like object."""

from __future__ import annotations

import logging
import threading
from typing import BinaryIO, Optional

from .. import config
from ..protocol.message import Stream
from .base import WordSink
from .codec import encode_word


logger = logging.getLogger(__name__)


class StreamSink(WordSink):
    """Frame words and write them onto *fileobj*.

    *fileobj* is anything with a binary ``write()`` method: a socket's
    ``makefile('wb')``, an open file, or :class:`io.BytesIO` in tests. The
    sink does not own *fileobj*; :func:`close` only stops the sink from
    accepting further words.

    Words are encoded with *charset*; if it is not specified the
    configured default is used, as is the default for *persistent*.
    """

    def __init__(self, fileobj: BinaryIO, persistent: Optional[bool] = None, charset: Optional[str] = None):

        defaults = config.load()

        if persistent is None:
            persistent = bool(defaults['persistent'])
        if charset is None:
            charset = defaults['charset']

        WordSink.__init__(self, persistent)

        self.fileobj = fileobj
        self.charset = charset
        self.closed = False
        self._write_lock = threading.Lock()

    def __repr__(self) -> str:
        return f"<StreamSink {self.charset} persistent={self.persistent}>"

    def close(self) -> None:
        self.closed = True

    def is_accepting_data(self) -> bool:
        if self.closed:
            return False
        return not getattr(self.fileobj, "closed", False)

    def send_word(self, word: str) -> int:
        return self._write(word.encode(self.charset))

    def send_word_from_stream(self, prefix: str, stream: Stream) -> int:
        # The length prefix comes first, so the stream has to be read in
        # full before anything can be written.
        payload = prefix.encode(self.charset) + stream.read()
        return self._write(payload)

    def _write(self, payload: bytes) -> int:
        framed = encode_word(payload)

        with self._write_lock:
            self.fileobj.write(framed)
            flush = getattr(self.fileobj, "flush", None)
            if flush is not None:
                flush()

        logger.debug("wrote word of %d bytes", len(payload))
        return len(framed)
