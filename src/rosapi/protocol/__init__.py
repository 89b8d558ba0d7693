"""
rosapi Protocol Layer
=====================

This package builds RouterOS API sentences: commands, arguments, tags and
queries, and writes them as words onto a :class:`rosapi.transport.WordSink`.

The protocol layer does not open sockets, read replies, or decide when to
send; it only guarantees that what it writes is well formed.

---------------------------------------------------------------------

Layer Overview
--------------

Request (request.py)
    Command canonicalization, the argument string grammar, and the
    serialization of a full sentence. Optionally tag-rewritten through a
    :class:`rosapi.registry.Registry`.

    │
    ▼
Query (query.py)
    Condition builder compiling to a postfix filter program.

    │
    ▼
Message (message.py)
    Tag and argument storage, sanitization rules, streamed values.

    │
    ▼
Field Vocabulary (fields.py)
    Word prefixes, actions and operators.

---------------------------------------------------------------------
"""

from . import fields
from . import message
from . import query
from . import request

from .message import Message, Stream
from .query import Query
from .request import Request


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
