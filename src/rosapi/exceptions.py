""" Exceptions raised by the request construction layer. Every exception
    carries a numeric *code* identifying the specific rule that was broken,
    so that callers (and tests) can distinguish, for example, a command
    that is not absolute from one that cannot be resolved.
"""


class RouterOSError(Exception):
    """ Base class for all errors raised by :mod:`rosapi`.

        :ivar code: Numeric identifier for the failure, one of the class
                    level constants on the subclass that raised it.
    """

    def __init__(self, message, code=0):
        Exception.__init__(self, message)
        self.code = code



class InvalidArgument(RouterOSError, ValueError):
    """ Malformed input: a bad argument name or value, a command that is not
        absolute, or an argument string that does not follow the grammar.
        Always raised before anything is written to a sink.
    """

    NAME_INVALID = 20100
    VALUE_INVALID = 20101
    TAG_INVALID = 20102

    ABSOLUTE_REQUIRED = 40200
    CMD_UNRESOLVABLE = 40201
    CMD_INVALID = 40202

    NAME_UNPARSABLE = 41000
    VALUE_UNPARSABLE = 41001



class UnexpectedValue(RouterOSError, ValueError):
    """ A value outside of an enumerated set, such as an unknown query
        action. The offending value is retained as *value*.
    """

    ACTION_UNKNOWN = 30100

    def __init__(self, message, code=0, value=None):
        RouterOSError.__init__(self, message, code)
        self.value = value



class NotSupported(RouterOSError):
    """ Something RouterOS (or this package) does not support, such as a
        control byte where a word length was expected. The unsupported
        value is retained as *value*.
    """

    CONTROL_BYTE = 1601

    def __init__(self, message, code=0, value=None):
        RouterOSError.__init__(self, message, code)
        self.value = value



class SocketError(RouterOSError, OSError):
    """ The sink is not currently accepting data; nothing was sent.
    """

    UNACCEPTING_QUERY = 30600
    UNACCEPTING_REQUEST = 40900


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
