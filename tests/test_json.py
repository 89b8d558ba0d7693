import json
import rosapi


def test_json_encode_and_decode():
    encode_and_decode(json.dumps, json.loads, dump_is_bytes=False)


def test_rosapi_encode_and_decode():
    encode_and_decode(rosapi.json.dumps, rosapi.json.loads)


def encode_and_decode(dumps, loads, dump_is_bytes=True):

    input_dictionary = dict()
    input_dictionary['charset'] = 'utf-8'
    input_dictionary['persistent'] = True
    input_dictionary['list'] = [1, 2, 'a', None]
    input_dictionary['none'] = None

    encoded = dumps(input_dictionary)

    if dump_is_bytes:
        assert isinstance(encoded, bytes)
    else:
        assert isinstance(encoded, str)

    # Whitespace handling differs between JSON implementations, so compare
    # the decoded result rather than the encoded bytes.

    decoded = loads(encoded)
    assert decoded == input_dictionary


def test_decode_error():

    try:
        rosapi.json.loads(b'{oops')
    except rosapi.json.JSONDecodeError:
        pass
    else:
        raise AssertionError('malformed JSON was accepted')


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
