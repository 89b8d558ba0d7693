""" Tag ownership for connections shared by several logical callers.

    RouterOS echoes the tag of a request in every reply to it, which is
    what makes it possible to have more than one request in flight on a
    single connection. A :class:`TagSpace` is the shared state for one
    connection; every logical caller using that connection gets its own
    :class:`Registry`, which prefixes outgoing tags with an ownership tag
    unique within the :class:`TagSpace`::

        space = TagSpace()
        background = Registry(space)
        request.send(sink, background)

    At most one :class:`Registry` at a time may own the tagless slot, which
    lets its requests go out without any tag at all; this is typically the
    synchronous caller.
"""

import itertools
import logging
import threading


logger = logging.getLogger(__name__)

separator = '_'


class TagSpace:
    """ Shared arbiter of the tag namespace of one connection. Hands out
        owner identification numbers, and guards the tagless slot.
    """

    def __init__(self):

        self._id_lock = threading.Lock()
        self._id_ticker = itertools.count()

        self._tagless = threading.Lock()
        self._tagless_owner = None


    def _id_next(self):
        """ Return the next owner identification number.
        """

        with self._id_lock:
            return next(self._id_ticker)


    def _acquire_tagless(self, owner, timeout=None):

        if self._tagless_owner is owner:
            return True

        if timeout is None:
            acquired = self._tagless.acquire()
        else:
            acquired = self._tagless.acquire(timeout=timeout)

        if acquired:
            self._tagless_owner = owner
            logger.debug("tagless slot acquired by owner %d", owner.id)

        return acquired


    def _release_tagless(self, owner):

        if self._tagless_owner is owner:
            self._tagless_owner = None
            self._tagless.release()
            logger.debug("tagless slot released by owner %d", owner.id)


    def tagless_owner(self):
        """ Return the :class:`Registry` currently holding the tagless slot,
            or None.
        """

        return self._tagless_owner


    @staticmethod
    def parse_tag(tag):
        """ Split a tag as transmitted into the owner identification number
            and the tag the caller originally set. Either may be None: a
            reply with no tag belongs to the tagless owner, and a request
            that had no tag of its own still carries the ownership prefix.
        """

        if tag is None:
            return (None, None)

        owner, found, original = tag.partition(separator)

        if found == '' or not owner.isdigit():
            return (None, tag)

        if original == '':
            original = None

        return (int(owner), original)


# end of class TagSpace



class Registry:
    """ The view of a :class:`TagSpace` held by one logical caller. This
        is what gets passed to :func:`rosapi.protocol.request.Request.send`.

        :ivar id: The owner identification number, unique within the space.
        :ivar space: The shared :class:`TagSpace`.
    """

    def __init__(self, space):
        self.space = space
        self.id = space._id_next()


    def __enter__(self):
        return self


    def __exit__(self, *exception):
        self.close()


    def __repr__(self):
        return '<Registry %d%s>' % (self.id, ' tagless' if self.is_tagless_owner() else '')


    def ownership_tag(self):
        """ Return the prefix applied to the tags of requests sent through
            this registry.
        """

        return str(self.id) + separator


    def is_tagless_owner(self):
        return self.space.tagless_owner() is self


    def set_tagless_mode(self, tagless, timeout=None):
        """ Acquire (*tagless* is True) or release (*tagless* is False) the
            tagless slot. Acquiring blocks until the current owner, if any,
            releases it, or until *timeout* seconds elapse. Returns True if
            this registry owns the slot when the call completes.
        """

        if tagless:
            return self.space._acquire_tagless(self, timeout)

        self.space._release_tagless(self)
        return False


    def close(self):
        """ Release the tagless slot if this registry holds it.
        """

        self.space._release_tagless(self)


# end of class Registry


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
