""" The :class:`Request` is what gets sent to RouterOS: an absolute command,
    an optional tag, any number of named arguments, and an optional
    :class:`rosapi.protocol.query.Query` to filter the results.

    Commands can be written in the API syntax (``/ip/address/print``) or in
    the CLI syntax (``/ip address print``), and can carry their arguments
    in a shell-like string::

        Request('/ip address add address=192.168.88.1/24 interface=ether1')
        Request('/system identity set name="core router"')
"""

import logging
import re

from ..exceptions import InvalidArgument, SocketError
from ..transport.base import exclusive
from . import fields
from . import message
from .query import Query


logger = logging.getLogger(__name__)


# Argument grammar:
#
#   arguments := (whitespace, argument)*
#   argument  := name, value?
#   name      := [^=\s]+
#   value     := '=', (quoted | unquoted)
#   quoted    := '"', ('\"' | '\\' | [^"])*, '"'
#   unquoted  := \S+

_argument_name = re.compile(r'\s+([^\s=]+)', re.S)
_argument_end = re.compile(r'\s', re.S)
_quoted_value = re.compile(r'="((?:\\"|\\\\|[^"])*)"', re.S)
_unquoted_value = re.compile(r'=(\S+)', re.S)
_escape = re.compile(r'\\(["\\])')

_cli_separators = re.compile(r'[\s/]+', re.S)
_absolute_command = re.compile(r'/\S+', re.S)
_whitespace = re.compile(r'\s')



def canonicalize(command):
    """ Return *command* in the API syntax. A command with a single slash
        is taken to be in the CLI syntax: the path components are separated
        by whitespace, and ``..`` refers to the parent menu. Commands must
        be absolute.
    """

    command = str(command)

    if command.startswith('/'):
        pass
    else:
        raise InvalidArgument('commands must be absolute: ' + repr(command), InvalidArgument.ABSOLUTE_REQUIRED)

    if command.count('/') == 1:
        parts = _cli_separators.split(command)
        resolved = [parts[0]]

        for part in parts[1:]:
            if part == '':
                continue

            if part == '..':
                if len(resolved) < 2:
                    raise InvalidArgument('unable to resolve command: ' + repr(command), InvalidArgument.CMD_UNRESOLVABLE)
                resolved.pop()
            else:
                resolved.append(part)

        command = '/'.join(resolved)

    if _absolute_command.fullmatch(command) is None:
        raise InvalidArgument('invalid command: ' + repr(command), InvalidArgument.CMD_INVALID)

    return command



def parse_arguments(string):
    """ Parse an argument string such as ``' name=value comment="a b"'``
        and return the arguments as a dictionary, in the order they were
        found. Note that each argument, including the first, must be
        preceded by whitespace. A name without a value is an empty argument.
    """

    arguments = dict()
    name = None
    position = 0
    length = len(string)

    while position < length:

        if name is None:
            match = _argument_name.match(string, position)
            if match is None:
                raise InvalidArgument('parsing of argument name failed near ' + repr(string[position:]), InvalidArgument.NAME_UNPARSABLE)

            name = match.group(1)
            position = match.end()
            continue

        if _argument_end.match(string, position):
            arguments[name] = ''
            name = None
            continue

        match = _quoted_value.match(string, position)
        if match is not None:
            arguments[name] = _escape.sub(r'\1', match.group(1))
            name = None
            position = match.end()
            continue

        match = _unquoted_value.match(string, position)
        if match is not None:
            arguments[name] = match.group(1)
            name = None
            position = match.end()
            continue

        raise InvalidArgument('parsing of argument value failed near ' + repr(string[position:]), InvalidArgument.VALUE_UNPARSABLE)

    if name is not None:
        arguments[name] = ''

    return arguments



def split_command(command):
    """ Split a combined command string into the command itself and the
        argument string. The boundary is the last whitespace before the
        first ``=``; if there is no ``=``, or no whitespace before it, the
        argument string is empty.
    """

    command = str(command)
    equals = command.find('=')

    if equals == -1:
        return command, ''

    boundary = None
    for match in _whitespace.finditer(command, 0, equals):
        boundary = match.start()

    if boundary is None:
        return command, ''

    return command[:boundary].rstrip(), command[boundary:]



class Request(message.Message):
    """ A request to send to RouterOS. The *command* may include arguments,
        see :func:`parse_arguments` for the syntax; the *query*, if any, is
        a :class:`rosapi.protocol.query.Query` instance, and the *tag* is an
        optional correlation string echoed back in the replies.

        :ivar command: The command, in the API syntax.
        :ivar query: The associated query, or None.
    """

    def __init__(self, command, query=None, tag=None):

        message.Message.__init__(self)

        command, argument_string = split_command(command)

        if argument_string:
            arguments = parse_arguments(argument_string)
        else:
            arguments = dict()

        self._command = None
        self._query = None

        self.set_command(command)
        self.set_query(query)
        self.set_tag(tag)

        for name, value in arguments.items():
            self.set_argument(name, value)


    def __repr__(self):
        return 'Request(' + repr(tuple(self.words())) + ')'


    def get_command(self):
        return self._command


    def set_command(self, command):
        """ Set the command to send. The command can use the API or the CLI
            syntax, but either way it must be absolute and without arguments.
        """

        self._command = canonicalize(command)
        return self


    command = property(get_command, set_command)


    def get_query(self):
        return self._query


    def set_query(self, query):
        """ Associate a query with this request. Setting None removes the
            currently associated query.
        """

        if query is None or isinstance(query, Query):
            pass
        else:
            raise TypeError('expected a Query instance, got ' + repr(query))

        self._query = query
        return self


    query = property(get_query, set_query)


    def words(self):
        """ Iterate over the words of this request as strings, excluding
            the terminating empty word. Streamed values are not read; only
            the prefix of such a word is included.
        """

        yield self._command

        if self._tag is not None:
            yield fields.TAG + self._tag

        for name, value in self._arguments.items():
            prefix = fields.ARGUMENT + name + '='
            if isinstance(value, message.Stream):
                yield prefix
            else:
                yield prefix + value

        if self._query is not None:
            for predicate, value in self._query.words:
                word = fields.QUERY + predicate
                if value is None:
                    yield word
                elif isinstance(value, message.Stream):
                    yield word + '='
                else:
                    yield word + '=' + value


    def send(self, sink, registry=None):
        """ Send this request over *sink* and return the number of bytes
            written. If a *registry* is given, the tag is prefixed with the
            registry's ownership tag for the duration of the send, unless the
            request is untagged and the registry owns the tagless slot. The
            original tag is always restored afterwards.
        """

        if registry is not None:
            if self._tag or not registry.is_tagless_owner():
                original = self._tag
                self._tag = registry.ownership_tag() + (original or '')
                logger.debug("tag %r rewritten to %r", original, self._tag)

                try:
                    return self.send(sink)
                finally:
                    self._tag = original

        with exclusive(sink):
            return self._send(sink)


    send_to = send


    def _send(self, sink):

        if sink.is_accepting_data():
            pass
        else:
            raise SocketError('sink is not accepting data, request not sent', SocketError.UNACCEPTING_REQUEST)

        bytes = 0
        bytes += sink.send_word(self._command)

        if self._tag is not None:
            bytes += sink.send_word(fields.TAG + self._tag)

        for name, value in self._arguments.items():
            prefix = fields.ARGUMENT + name + '='

            if isinstance(value, message.Stream):
                bytes += sink.send_word_from_stream(prefix, value)
            else:
                bytes += sink.send_word(prefix + value)

        if self._query is not None:
            bytes += self._query.send(sink)

        bytes += sink.send_word(fields.END)

        logger.debug("sent %s (tag %r), %d bytes", self._command, self._tag, bytes)
        return bytes


# end of class Request


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
