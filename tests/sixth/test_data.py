import pytest

from sixth.data import (
    WordToken, Literal, Reference, render, parse_number, format_senary,
    to_i64, is_integer, I64_MIN, I64_MAX
)


# ----------------
#  Values
# ----------------


def test_render_integer():
    assert render(0) == '0'
    assert render(5) == '5'
    assert render(6) == '10'
    assert render(8) == '12'
    assert render(35) == '55'
    assert render(36) == '100'
    assert render(-8) == '-12'


def test_render_others():
    assert render(WordToken('dup')) == 'dup'
    assert render(Literal((1, WordToken('print'), 6))) == '[ 1 print 10 ]'
    assert render(Literal()) == '[  ]'
    assert render(Literal((Literal((1,)),))) == '[ [ 1 ] ]'
    assert render(Reference({}, 'dup')) == '& dup'


def test_render_not_a_value():
    with pytest.raises(TypeError):
        render('dup')
    with pytest.raises(TypeError):
        render(True)
    with pytest.raises(TypeError):
        render(None)
    with pytest.raises(TypeError):
        render(Literal(('oops',)))


def test_parse_number():
    assert parse_number('0') == 0
    assert parse_number('12') == 8
    assert parse_number('-12') == -8
    assert parse_number('+5') == 5
    assert parse_number('0012') == 8

    assert parse_number('6') is None
    assert parse_number('19') is None
    assert parse_number('') is None
    assert parse_number('+') is None
    assert parse_number('-') is None
    assert parse_number('1_0') is None
    assert parse_number(' 1') is None
    assert parse_number('dup') is None
    assert parse_number('--1') is None


def test_parse_number_range():
    assert parse_number(format_senary(I64_MAX)) == I64_MAX
    assert parse_number(format_senary(I64_MIN)) == I64_MIN
    assert parse_number(format_senary(I64_MAX + 1)) is None
    assert parse_number(format_senary(I64_MIN - 1)) is None


@pytest.mark.parametrize('n', [
    0, 1, -1, 5, 6, 7, 35, 36, -36, 1295, 1296, 10 ** 12, -(10 ** 12),
    I64_MAX, I64_MIN, I64_MAX - 1, I64_MIN + 1,
])
def test_senary_round_trip(n):
    assert parse_number(render(n)) == n


def test_to_i64():
    assert to_i64(5) == 5
    assert to_i64(-5) == -5
    assert to_i64(I64_MAX) == I64_MAX
    assert to_i64(I64_MAX + 1) == I64_MIN
    assert to_i64(I64_MIN - 1) == I64_MAX


def test_is_integer():
    assert is_integer(3)
    assert not is_integer(True)
    assert not is_integer(WordToken('3'))
    assert not is_integer(Literal((3,)))


def test_structural_equality():
    assert Literal((1, 2)) == Literal((1, 2))
    assert Literal((1, 2)) != Literal((1, 3))
    assert Literal((1, Literal((WordToken('x'),)))) \
        == Literal((1, Literal((WordToken('x'),))))
    assert Literal((1,)) != 1
    assert WordToken('1') != 1


def test_reference_equality():
    words = {}
    assert Reference(words, 'dup') == Reference(words, 'dup')
    assert Reference(words, 'dup') != Reference(words, 'pop')
    # Different dictionaries, even when they look the same
    assert Reference(words, 'dup') != Reference({}, 'dup')
    assert Literal((Reference(words, 'a'),)) \
        == Literal((Reference(words, 'a'),))
    assert len({Reference(words, 'a'), Reference(words, 'a')}) == 1


def test_reference_sees_later_changes():
    words = {}
    ref = Reference(words, 'thing')
    words['thing'] = 'defined later'
    assert ref.words['thing'] == 'defined later'
