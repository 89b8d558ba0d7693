import pytest
import rosapi


class RecordingSink(rosapi.WordSink):
    """ Keep every word written, rather than framing it onto a stream.
        Each word counts as one byte per character, plus one for a
        simplified length prefix.
    """

    def __init__(self, persistent=False, accepting=True):
        rosapi.WordSink.__init__(self, persistent)
        self.accepting = accepting
        self.words = list()
        self.held_while_sending = list()

    def is_accepting_data(self):
        return self.accepting

    def send_word(self, word):
        self.words.append(word)
        self.held_while_sending.append(self.held())
        return len(word) + 1

    def send_word_from_stream(self, prefix, stream):
        word = prefix + stream.read().decode()
        return self.send_word(word)


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def persistent_sink():
    return RecordingSink(persistent=True)


@pytest.fixture(autouse=True)
def rosapi_home(tmp_path, monkeypatch):
    """ Point the configuration directory somewhere harmless, and forget
        any configuration cached by a previous test.
    """

    monkeypatch.setenv('ROSAPI_HOME', str(tmp_path))
    rosapi.config.reset()

    yield tmp_path

    rosapi.config.reset()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
