""" Client-side defaults for :mod:`rosapi`. The defaults are stored as a
    JSON dictionary in ``client.json`` in the configuration directory; any
    key present in that file overrides the built-in value, any key absent
    falls back to the built-in value.
"""

import os
import threading

from . import json


defaults = dict()
defaults['charset'] = 'utf-8'
defaults['persistent'] = False

filename = 'client.json'

_cache = dict()
_cache_lock = threading.Lock()



def directory(default=None):
    """ Return the directory location where configuration files are loaded
        from. This defaults to ``$HOME/.rosapi``, but can be overridden by
        calling this method with a valid absolute path, or by setting the
        ``ROSAPI_HOME`` environment variable. Changes to the environment
        variable are ignored after the first invocation of this method,
        unless :func:`reset` is called.
    """

    if default is not None:
        default = str(default)
        default = os.path.expandvars(default)

        if os.path.isabs(default):
            pass
        else:
            raise ValueError('the default directory must be an absolute path')

        os.environ['ROSAPI_HOME'] = default
        directory.found = default

    found = directory.found

    if found is not None:
        return found

    try:
        found = os.environ['ROSAPI_HOME']
    except KeyError:
        pass
    else:
        directory.found = found
        return found

    try:
        home = os.environ['HOME']
    except KeyError:
        raise RuntimeError('ROSAPI_HOME and HOME environment variables not set, cannot determine rosapi configuration directory')

    found = os.path.join(home, '.rosapi')

    directory.found = found
    return found

directory.found = None



def load():
    """ Return a dictionary of client defaults. The file is only read once;
        subsequent calls return a copy of the cached result. A missing file
        is not an error, the built-in defaults are used instead.
    """

    with _cache_lock:
        try:
            loaded = _cache['client']
        except KeyError:
            loaded = _load(os.path.join(directory(), filename))
            _cache['client'] = loaded

    return dict(loaded)



def _load(path):

    loaded = dict(defaults)

    try:
        with open(path, 'rb') as contents:
            raw_json = contents.read()
    except FileNotFoundError:
        return loaded

    try:
        overrides = json.loads(raw_json)
    except json.JSONDecodeError as e:
        raise ValueError('cannot parse %s: %s' % (path, e))

    if isinstance(overrides, dict):
        pass
    else:
        raise ValueError('%s must contain a JSON object' % (path))

    loaded.update(overrides)
    return loaded



def get(key):
    """ Return a single configuration value.
    """

    return load()[key]



def reset():
    """ Forget any cached configuration, including the configuration
        directory, so that the next :func:`load` starts from scratch.
    """

    with _cache_lock:
        _cache.clear()

    directory.found = None


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
