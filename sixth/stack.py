import threading
from collections.abc import Sequence

from sixth.exceptions import StackUnderflow


# ----------------
#  Stacks
# ----------------

# Both stacks are shared by every task spawned with `go`. The lock only
# makes a single push or pop atomic; a word that pops twice can still
# interleave with another task.


class DataStack(Sequence):
    "The stack the words operate on. Index 0 is the bottom."

    def __init__(self, xs=()):
        self._xs = list(xs)
        self._lock = threading.Lock()

    def __len__(self):
        return len(self._xs)

    def __getitem__(self, idx):
        return self._xs[idx]

    def __repr__(self):
        return f'DataStack({self._xs!r})'

    def push(self, value):
        with self._lock:
            self._xs.append(value)

    def pop(self, what='value'):
        with self._lock:
            if not self._xs:
                raise StackUnderflow(f'stack empty: expected a {what}')
            return self._xs.pop()

    def drop(self):
        "pop, but an empty stack is fine"
        with self._lock:
            if self._xs:
                self._xs.pop()

    def top(self, what='value'):
        with self._lock:
            if not self._xs:
                raise StackUnderflow(f'stack empty: expected a {what}')
            return self._xs[-1]

    def snapshot(self):
        with self._lock:
            return tuple(self._xs)


class LiteralStack:
    """
    Frames of values being collected between [ and ]. Each [ starts a
    new frame; values always go onto the newest one.
    """

    def __init__(self):
        self._frames = []
        self._lock = threading.Lock()

    def __len__(self):
        return len(self._frames)

    def __repr__(self):
        return f'LiteralStack({self._frames!r})'

    def push_frame(self):
        with self._lock:
            self._frames.append([])

    def pop_frame(self):
        with self._lock:
            if not self._frames:
                raise StackUnderflow('] without a matching [')
            return tuple(self._frames.pop())

    def push_on_top(self, value):
        with self._lock:
            if not self._frames:
                raise StackUnderflow('no literal is being collected')
            self._frames[-1].append(value)
