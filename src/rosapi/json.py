''' Wrapper module around :mod:`orjson` providing the equivalent of
    :func:`json.loads` and :func:`json.dumps`. Note that :func:`dumps`
    returns bytes, not a string.
'''

import orjson


dumps = orjson.dumps
loads = orjson.loads
JSONDecodeError = orjson.JSONDecodeError


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
