""" Python implementation of the request side of the RouterOS API. This
    includes building commands with arguments and queries, encoding them
    as words, and sharing a single connection between several logical
    callers without their tags colliding.
"""

# Utility components.

from . import exceptions
from . import json
from . import config

# Submodules used by multiple other components.

from . import protocol
from . import transport
from . import registry

# Primary public-facing interfaces.

from .exceptions import InvalidArgument, NotSupported, RouterOSError, SocketError, UnexpectedValue
from .protocol import Query, Request, Stream
from .registry import Registry, TagSpace
from .transport import StreamSink, WordSink

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
