""" The :class:`Message` base class holds what every request-like entity
    has in common: an optional correlation tag, and a set of named
    arguments. The sanitization rules for argument names, argument values
    and tags are defined here and shared with :mod:`rosapi.protocol.query`.
"""

import io

from ..exceptions import InvalidArgument


class Stream:
    """ A :class:`Stream` wraps a readable source of bytes for use as an
        argument or query value, when the value is too large (or too slow)
        to hold in memory as a string. The *source* can be bytes, or any
        object with a binary ``read(size)`` method, such as an open file.

        A :class:`Stream` is consumed exactly once; once it has been read
        to exhaustion it yields nothing further.
    """

    chunk_size = 8192

    def __init__(self, source, chunk_size=None):

        if isinstance(source, (bytes, bytearray, memoryview)):
            source = io.BytesIO(bytes(source))
        elif isinstance(source, str):
            raise TypeError('a Stream source must produce bytes, not str')
        else:
            try:
                source.read
            except AttributeError:
                raise TypeError('a Stream source must have a read() method')

        if chunk_size is not None:
            self.chunk_size = int(chunk_size)

        self.source = source
        self.exhausted = False


    def __repr__(self):
        return '<Stream of %s>' % (type(self.source).__name__)


    def __iter__(self):
        return self.chunks()


    def chunks(self):
        """ Iterate over the contents of the stream, one chunk at a time,
            until the source is exhausted.
        """

        if self.exhausted:
            return

        while True:
            chunk = self.source.read(self.chunk_size)
            if not chunk:
                break
            yield bytes(chunk)

        self.exhausted = True


    def read(self):
        """ Read the remainder of the stream and return it as bytes.
        """

        return b''.join(self.chunks())


# end of class Stream



def sanitize_name(name):
    """ Return the argument *name* as a string, raising
        :class:`InvalidArgument` if it is empty or contains whitespace,
        ``=``, ``?`` or NUL.
    """

    name = str(name)

    if name == '':
        raise InvalidArgument('argument names cannot be empty', InvalidArgument.NAME_INVALID)

    for character in name:
        if character in '=?\0' or character.isspace():
            raise InvalidArgument('invalid argument name: ' + repr(name), InvalidArgument.NAME_INVALID)

    return name



def sanitize_value(value):
    """ Return the argument *value* in the form it will be stored. Strings
        are checked for NUL characters; :class:`Stream` instances are passed
        through untouched, their contents are opaque. Booleans are rendered
        the way RouterOS spells them, anything else is converted with
        :func:`str`.
    """

    if isinstance(value, Stream):
        return value

    if value is True:
        value = 'true'
    elif value is False:
        value = 'false'
    else:
        value = str(value)

    if '\0' in value:
        raise InvalidArgument('argument values cannot contain NUL characters', InvalidArgument.VALUE_INVALID)

    return value



def sanitize_tag(tag):

    if tag is None:
        return None

    tag = str(tag)

    if '\0' in tag:
        raise InvalidArgument('tags cannot contain NUL characters', InvalidArgument.TAG_INVALID)

    return tag



class Message:
    """ Base class for :class:`rosapi.protocol.request.Request`, and not
        instantiated directly. Arguments can be manipulated with the
        long-form methods, with the short-form :func:`get`, :func:`get_all`
        and :func:`set`, or with dictionary syntax::

            request.set_argument('interface', 'ether1')
            request['comment'] = 'uplink'
            del request['comment']

        The order in which arguments were first set is preserved, and is
        the order in which they are sent.
    """

    def __init__(self):
        self._tag = None
        self._arguments = dict()


    def __contains__(self, name):
        return name in self._arguments


    def __delitem__(self, name):
        self._arguments.pop(str(name), None)


    def __getitem__(self, name):
        return self._arguments[name]


    def __len__(self):
        return len(self._arguments)


    def __setitem__(self, name, value):
        self.set_argument(name, value)


    def get_tag(self):
        return self._tag


    def set_tag(self, tag):
        """ Set the tag for this message. Setting None erases the current
            tag.
        """

        self._tag = sanitize_tag(tag)
        return self


    tag = property(get_tag, set_tag)


    def get_argument(self, name):
        """ Return the value of the argument *name*, or None if it is not set.
            An argument that is set but empty returns the empty string.
        """

        return self._arguments.get(name)


    def get_all_arguments(self):
        """ Return a snapshot of all arguments as a dictionary.
        """

        return dict(self._arguments)


    def set_argument(self, name, value=''):
        """ Set the argument *name* to *value*. Setting the value to None
            removes the argument.
        """

        name = sanitize_name(name)

        if value is None:
            self._arguments.pop(name, None)
        else:
            self._arguments[name] = sanitize_value(value)

        return self


    def remove_all_arguments(self):
        self._arguments.clear()
        return self


    get = get_argument
    get_all = get_all_arguments
    set = set_argument


# end of class Message


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
