import pytest

from sixth.data import WordToken
from sixth.exceptions import BadWord
from sixth.runtime import Word, lookup


class Recorder:
    "stands in for the interpreter"
    def __init__(self):
        self.executed = []

    def execute_word(self, token):
        self.executed.append(token)


def test_native_word():
    calls = []

    def native(interp):
        calls.append(interp)

    word = Word(native)
    assert not word.immediate

    recorder = Recorder()
    word.run(recorder)
    assert calls == [recorder]
    assert recorder.executed == []
    assert repr(word).startswith('<Word(native) object at ')


def test_compiled_word_renders_each_item():
    word = Word(body=(WordToken('dup'), 8, WordToken('+')))

    recorder = Recorder()
    word.run(recorder)
    assert recorder.executed == ['dup', '12', '+']
    assert repr(word) == ': dup 12 + ;'


def test_empty_compiled_word():
    recorder = Recorder()
    Word().run(recorder)
    assert recorder.executed == []


def test_lookup():
    words = {'dup': Word()}
    assert lookup(words, 'dup') is words['dup']
    with pytest.raises(BadWord) as exc_info:
        lookup(words, 'nope', ('f', 1, 0))
    assert exc_info.value.location == ('f', 1, 0)
    assert str(exc_info.value) == 'f:1:0: bad word: nope'
