import io
import pytest
import rosapi


def test_arguments():

    request = rosapi.Request('/interface/print')
    assert request.get_all_arguments() == dict()
    assert request.get_argument('detail') is None

    request.set_argument('detail')
    assert request.get_argument('detail') == ''
    assert 'detail' in request

    request.set_argument('interval', 5)
    assert request.get_argument('interval') == '5'

    request.set_argument('disabled', True)
    assert request.get_argument('disabled') == 'true'

    snapshot = request.get_all_arguments()
    snapshot['extra'] = 'ignored'
    assert 'extra' not in request

    request.set_argument('detail', None)
    assert request.get_argument('detail') is None
    assert len(request) == 2

    request.remove_all_arguments()
    assert request.get_all_arguments() == dict()


def test_shorthand():

    request = rosapi.Request('/interface/set')
    request.set('name', 'uplink').set('mtu', '1500')

    assert request.get('name') == 'uplink'
    assert request.get_all() == {'name': 'uplink', 'mtu': '1500'}

    request['comment'] = 'core'
    assert request['comment'] == 'core'

    del request['comment']
    assert request.get('comment') is None

    with pytest.raises(KeyError):
        request['comment']


def test_argument_order():

    request = rosapi.Request('/ip/address/add')
    for name in ('interface', 'address', 'comment'):
        request.set_argument(name, name)

    assert list(request.get_all_arguments()) == ['interface', 'address', 'comment']


def test_invalid_names():

    request = rosapi.Request('/interface/print')

    for name in ('', 'a b', 'a=b', '?name', 'a\0b', '\t'):
        with pytest.raises(rosapi.InvalidArgument) as caught:
            request.set_argument(name, 'value')
        assert caught.value.code == rosapi.InvalidArgument.NAME_INVALID

    assert request.get_all_arguments() == dict()


def test_invalid_values():

    request = rosapi.Request('/interface/print')

    with pytest.raises(rosapi.InvalidArgument) as caught:
        request.set_argument('name', 'a\0b')

    assert caught.value.code == rosapi.InvalidArgument.VALUE_INVALID
    assert request.get_argument('name') is None


def test_tags():

    request = rosapi.Request('/interface/print')
    assert request.get_tag() is None

    request.set_tag('t1')
    assert request.get_tag() == 't1'
    assert request.tag == 't1'

    request.tag = None
    assert request.get_tag() is None

    with pytest.raises(rosapi.InvalidArgument) as caught:
        request.set_tag('a\0')
    assert caught.value.code == rosapi.InvalidArgument.TAG_INVALID


def test_stream_values():

    stream = rosapi.Stream(io.BytesIO(b'x' * 20000), chunk_size=4096)

    request = rosapi.Request('/file/set')
    request.set_argument('contents', stream)
    assert request.get_argument('contents') is stream

    chunks = list(stream)
    assert len(chunks) == 5
    assert b''.join(chunks) == b'x' * 20000

    # Consumed exactly once.
    assert stream.read() == b''


def test_stream_sources():

    assert rosapi.Stream(b'abc').read() == b'abc'
    assert rosapi.Stream(bytearray(b'abc')).read() == b'abc'

    with pytest.raises(TypeError):
        rosapi.Stream('abc')

    with pytest.raises(TypeError):
        rosapi.Stream(42)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
