import io
import threading

from sixth.exceptions import EndOfInput, SixthError


# -------------
#  Reader
# -------------

class Token(str):
    """
    A string that knows where it came from in a file
    """

    def __new__(cls, s, file, lineno, col):
        obj = super().__new__(cls, s)
        obj.__init__(s, file, lineno, col)
        return obj

    def __init__(self, s, file, lineno, col):
        super().__init__()
        self.file = file
        self.lineno = lineno
        self.col = col

    def __str__(self):
        return super().__str__()

    def __repr__(self):
        return f"{self.file}:{self.lineno}:{self.col} " + super().__repr__()


def location_from(obj):
    match obj:
        case Token() as t:
            return t.file, t.lineno, t.col
        case SixthError() as err:
            return err.location
    return None


def split_line(line, file, lineno):
    "yield the whitespace separated tokens in line"
    i = 0
    n = len(line)
    while i < n:
        if line[i].isspace():
            i += 1
            continue
        start = i
        while i < n and not line[i].isspace():
            i += 1
        yield Token(line[start:i], file, lineno, start)


class TokenReader:
    """
    Hands out one token at a time from a text stream. Lines are only read
    when the tokens before them have been used up, so this works on an
    interactive terminal.
    """

    def __init__(self, stream, file=None):
        if isinstance(stream, str):
            stream = io.StringIO(stream)
        self.stream = stream
        self.file = file or getattr(stream, 'name', None) or '<stream>'
        self.lineno = 0
        self._pending = iter(())
        # `go` tasks may read tokens too
        self._lock = threading.Lock()

    def read_word(self):
        "The next token, or EndOfInput once the stream is exhausted"
        with self._lock:
            while True:
                token = next(self._pending, None)
                if token is not None:
                    return token
                line = self.stream.readline()
                if line == '':
                    raise EndOfInput(
                        'end of input', (self.file, self.lineno, 0)
                    )
                self.lineno += 1
                self._pending = split_line(line, self.file, self.lineno)
