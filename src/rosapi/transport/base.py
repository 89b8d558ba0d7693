"""Word sink interface.

This is the (small) contract that transport implementations follow so that
:mod:`rosapi.protocol` can emit words without knowing anything about
sockets. Transports subclass :class:`WordSink` and implement the abstract
methods; the direction locking is provided here.
"""

from __future__ import annotations

import contextlib
import logging
import threading
from abc import ABC, abstractmethod
from typing import Iterator

from ..protocol.message import Stream


logger = logging.getLogger(__name__)


# Transmission directions, as bit flags.

DIRECTION_NONE = 0
DIRECTION_RECEIVE = 1
DIRECTION_SEND = 2
DIRECTION_ALL = DIRECTION_RECEIVE | DIRECTION_SEND


class WordSink(ABC):
    """Minimal contract for something that accepts protocol words.

    A persistent sink is one that may be shared by several logical senders
    (threads) at once; for those, :func:`exclusive` locks the send direction
    around a full sentence so that words from different senders never
    interleave.
    """

    def __init__(self, persistent: bool = False):
        self.persistent = persistent
        self._locks = {
            DIRECTION_RECEIVE: threading.Lock(),
            DIRECTION_SEND: threading.Lock(),
        }
        self._held = threading.local()

    @abstractmethod
    def is_accepting_data(self) -> bool:
        """Whether words can currently be written."""

    @abstractmethod
    def send_word(self, word: str) -> int:
        """Write one framed word; return the number of bytes written."""

    @abstractmethod
    def send_word_from_stream(self, prefix: str, stream: Stream) -> int:
        """Write one framed word consisting of *prefix* followed by the
        full contents of *stream*; return the number of bytes written."""

    def is_persistent(self) -> bool:
        return self.persistent

    def held(self) -> int:
        """Directions currently locked by the calling thread."""
        return getattr(self._held, "directions", DIRECTION_NONE)

    def lock(self, direction: int = DIRECTION_ALL, replace: bool = False) -> int:
        """Lock *direction* for the calling thread and return the directions
        held before the call.

        Passing the returned value back with ``replace=True`` restores the
        previous state. Directions already held by this thread are not
        locked again, and only directions dropped from the held set are
        released, so nested lock/restore pairs are safe.
        """

        previous = self.held()

        if replace:
            target = direction
        else:
            target = previous | direction

        for flag, lock in self._locks.items():
            if target & flag and not previous & flag:
                lock.acquire()
            elif previous & flag and not target & flag:
                lock.release()

        self._held.directions = target
        return previous


@contextlib.contextmanager
def exclusive(sink: WordSink, direction: int = DIRECTION_SEND) -> Iterator[WordSink]:
    """Hold *direction* of a persistent *sink* for the duration of the
    block. Non-persistent sinks are assumed to have a single writer and are
    not locked."""

    if not sink.is_persistent():
        yield sink
        return

    previous = sink.lock(direction)
    if not previous & direction:
        logger.debug("locked %r for direction %d", sink, direction)

    try:
        yield sink
    finally:
        sink.lock(previous, replace=True)
