""" The :class:`Query` compiles chained property conditions into the
    postfix program RouterOS uses to filter the results of ``print``
    commands. Each condition pushes a boolean onto the router's evaluation
    stack; the ``#!``, ``#|`` and ``#&`` operators pop and combine them.
"""

import logging

from ..exceptions import SocketError, UnexpectedValue
from ..transport.base import exclusive
from . import fields
from . import message


logger = logging.getLogger(__name__)

ACTION_EXIST = fields.ACTION_EXIST
ACTION_NOT_EXIST = fields.ACTION_NOT_EXIST
ACTION_EQUALS = fields.ACTION_EQUALS
ACTION_LESS_THAN = fields.ACTION_LESS_THAN
ACTION_GREATER_THAN = fields.ACTION_GREATER_THAN



def sanitize_action(action):
    """ Return *action* if it is one of the ACTION_* constants, otherwise
        raise :class:`rosapi.exceptions.UnexpectedValue`.
    """

    action = str(action)

    if action in fields.ACTIONS:
        return action

    raise UnexpectedValue('unknown query action: ' + repr(action), UnexpectedValue.ACTION_UNKNOWN, action)



class Query:
    """ A filter attached to a :class:`rosapi.protocol.request.Request`.
        Queries are not instantiated directly; use :func:`where` to create
        one with its first condition, then chain further conditions::

            query = Query.where('type', 'ether', ACTION_EQUALS)
            query.or_where('type', 'vlan', ACTION_EQUALS).not_()

        The *action* of a condition is one of the ACTION_* constants; the
        default, :data:`ACTION_EXIST`, tests whether the property is present
        and takes no value.
    """

    def __init__(self, _words=None):

        if _words is None:
            raise TypeError('use Query.where() to create a Query')

        self._words = list(_words)


    def __len__(self):
        return len(self._words)


    def __repr__(self):
        return 'Query(' + repr(self._words) + ')'


    @property
    def words(self):
        """ A snapshot of the (predicate, value) pairs in this query. The
            value is None for existence tests and for operators.
        """

        return tuple(self._words)


    @classmethod
    def where(cls, name, value=None, action=ACTION_EXIST):
        """ Create a new :class:`Query` with an initial condition.
        """

        return cls(_words=(_condition(name, value, action),))


    def not_(self):
        """ Negate the most recent result.
        """

        self._words.append((fields.OP_NOT, None))
        return self


    def and_where(self, name, value=None, action=ACTION_EXIST):
        """ Add a condition that must hold in addition to the query so far.
        """

        word = _condition(name, value, action)
        self._words.append(word)
        self._words.append((fields.OP_AND, None))
        return self


    def or_where(self, name, value=None, action=ACTION_EXIST):
        """ Add a condition as an alternative to the query so far.
        """

        word = _condition(name, value, action)
        self._words.append(word)
        self._words.append((fields.OP_OR, None))
        return self


    def send(self, sink):
        """ Write every word of this query onto *sink* and return the number
            of bytes written. On a persistent sink the send direction is
            held for the whole sequence.
        """

        with exclusive(sink):
            return self._send(sink)


    def _send(self, sink):

        if sink.is_accepting_data():
            pass
        else:
            raise SocketError('sink is not accepting data, query not sent', SocketError.UNACCEPTING_QUERY)

        bytes = 0

        for predicate, value in self._words:
            prefix = fields.QUERY + predicate

            if value is None:
                bytes += sink.send_word(prefix)
                continue

            prefix += '='

            if isinstance(value, message.Stream):
                bytes += sink.send_word_from_stream(prefix, value)
            else:
                bytes += sink.send_word(prefix + value)

        logger.debug("sent query of %d words, %d bytes", len(self._words), bytes)
        return bytes


# end of class Query



def _condition(name, value, action):
    """ Build a sanitized (predicate, value) pair. Everything is checked
        before the caller appends anything, a rejected condition leaves
        the query untouched.
    """

    action = sanitize_action(action)
    name = message.sanitize_name(name)

    if value is not None:
        value = message.sanitize_value(value)

    return (action + name, value)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
