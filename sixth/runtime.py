# Some classes needed by both the interpreter and the built-in words

from dataclasses import dataclass
from typing import Any, Callable, Optional

from sixth.data import render
from sixth.exceptions import BadWord


@dataclass(frozen=True)
class Word:
    """
    An entry in the dictionary. Either native, a python function taking
    the interpreter, or compiled, the values collected between : and ;
    """
    native: Optional[Callable[[Any], None]] = None
    body: tuple = ()
    immediate: bool = False

    def run(self, interp):
        if self.native is not None:
            self.native(interp)
            return
        # Each time round, so a body sees the current definitions
        for item in self.body:
            interp.execute_word(render(item))

    def __repr__(self):
        if self.native is not None:
            return f'<Word({self.native.__name__}) object at {hex(id(self))}>'
        return ': ' + ' '.join(map(render, self.body)) + ' ;'


def lookup(words, name, location=None):
    try:
        return words[name]
    except KeyError:
        raise BadWord(f'bad word: {name}', location) from None
