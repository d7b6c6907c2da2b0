from dataclasses import dataclass
from typing import Any, Optional


# ----------------
#  Values
# ----------------

# A value is one of:
#   int         - a signed 64 bit integer, read and written in base 6
#   WordToken   - a name that has not been looked up
#   Literal     - the result of [ ... ]
#   Reference   - the result of & name

BASE = 6
DIGITS = '012345'

I64_MIN = -(1 << 63)
I64_MAX = (1 << 63) - 1


@dataclass(frozen=True, slots=True)
class WordToken:
    name: str

    def __repr__(self):
        return self.name


@dataclass(frozen=True, slots=True)
class Literal:
    items: tuple[Any, ...] = ()

    def __repr__(self):
        return render(self)


@dataclass(frozen=True, slots=True, eq=False)
class Reference:
    """
    Points at an entry in a dictionary by name. The entry is looked up
    when the reference is used, not when it is made.
    """
    words: dict
    name: str

    def __eq__(self, o):
        if not isinstance(o, Reference):
            return NotImplemented
        return self.words is o.words and self.name == o.name

    def __hash__(self):
        return hash((id(self.words), self.name))

    def __repr__(self):
        return render(self)


def is_integer(value):
    # bool is an int subclass, but never a value of ours
    return isinstance(value, int) and not isinstance(value, bool)


def to_i64(n: int) -> int:
    "wrap n into the signed 64 bit range, the way the machine would"
    return ((n - I64_MIN) % (1 << 64)) + I64_MIN


def format_senary(n: int) -> str:
    if n == 0:
        return '0'
    sign = '-' if n < 0 else ''
    n = abs(n)
    digits = []
    while n:
        n, d = divmod(n, BASE)
        digits.append(DIGITS[d])
    return sign + ''.join(reversed(digits))


def parse_number(token: str) -> Optional[int]:
    """
    Read token as a base 6 integer. Returns None when it isn't one, or
    when it doesn't fit in 64 bits.
    """
    text = str(token)
    sign = 1
    if text[:1] in ('+', '-'):
        if text[0] == '-':
            sign = -1
        text = text[1:]
    if not text or any(c not in DIGITS for c in text):
        return None
    n = sign * int(text, BASE)
    if not I64_MIN <= n <= I64_MAX:
        return None
    return n


def render(value) -> str:
    "The token text that, read again, gives back value"
    match value:
        case bool():
            pass
        case int():
            return format_senary(value)
        case WordToken(name):
            return str(name)
        case Literal(items):
            return '[ ' + ' '.join(map(render, items)) + ' ]'
        case Reference(_, name):
            return '& ' + str(name)
    raise TypeError(f'not a value: {value!r}')
