import time

from sixth.data import Literal, Reference, is_integer, render, to_i64
from sixth.exceptions import TypeMismatch
from sixth.reader import location_from
from sixth.runtime import Word, lookup


# ----------------
#  Built-in words
# ----------------

def pop_integer(interp, word):
    value = interp.stack.pop('number')
    if not is_integer(value):
        raise TypeMismatch(f'{word}: expected a number, got {render(value)}')
    return value


def execute_value(interp, value, word='run'):
    "run a reference or each item of a literal, as if typed in"
    match value:
        case Reference(words, name):
            lookup(words, name).run(interp)
        case Literal(items):
            for item in items:
                interp.execute_word(render(item))
        case _:
            raise TypeMismatch(
                f'{word}: expected a literal or reference, got {render(value)}'
            )


def w_print(interp):
    interp.emit(render(interp.stack.top()))


def w_stack(interp):
    for idx, item in enumerate(interp.stack.snapshot()):
        interp.emit(f'{render(idx)}\t{render(item)}')


def w_colon(interp):
    name = interp.read_word()
    interp.begin_definition(name)


def w_semicolon(interp):
    interp.end_definition()


def w_plus(interp):
    a = pop_integer(interp, '+')
    b = pop_integer(interp, '+')
    interp.stack.push(to_i64(a + b))


def w_go(interp):
    name = interp.read_word()
    word = lookup(interp.words, name, location_from(name))
    interp.spawn(word, str(name))


def w_sleep(interp):
    seconds = pop_integer(interp, 'sleep')
    if seconds > 0:
        time.sleep(seconds)


def w_ampersand(interp):
    name = interp.read_word()
    interp.stack.push(Reference(interp.words, str(name)))


def w_open_bracket(interp):
    interp.literals.push_frame()


def w_close_bracket(interp):
    # Always onto the data stack, even when another [ is still open
    interp.stack.push(Literal(interp.literals.pop_frame()))


def w_dup(interp):
    interp.stack.push(interp.stack.top())


def w_run(interp):
    execute_value(interp, interp.stack.pop())


def w_pop(interp):
    interp.stack.drop()


def w_if(interp):
    cond = pop_integer(interp, 'if')
    if cond == 0:
        # leaves the thing to execute where it is
        return
    execute_value(interp, interp.stack.pop(), 'if')


def w_equals(interp):
    a = interp.stack.pop()
    b = interp.stack.pop()
    interp.stack.push(1 if a == b else 0)


def w_not(interp):
    a = pop_integer(interp, '!')
    interp.stack.push(1 if a == 0 else 0)


def initial_words():
    return {
        'print': Word(w_print),
        'stack': Word(w_stack),
        ':': Word(w_colon),
        ';': Word(w_semicolon, immediate=True),
        '+': Word(w_plus),
        'go': Word(w_go),
        'sleep': Word(w_sleep),
        '&': Word(w_ampersand),
        '[': Word(w_open_bracket),
        ']': Word(w_close_bracket, immediate=True),
        'dup': Word(w_dup),
        'run': Word(w_run),
        'pop': Word(w_pop),
        'if': Word(w_if),
        '=': Word(w_equals),
        '!': Word(w_not),
    }
