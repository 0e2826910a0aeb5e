import docmod
import pytest
from docmod import InvalidArgumentError, InvalidOperandError


def test_pop_last():
    d = {'arr': [1, 2, 3]}
    docmod.apply(d, {'$pop': {'arr': 1}})
    assert d == {'arr': [1, 2]}


def test_pop_first():
    d = {'arr': [1, 2, 3]}
    docmod.apply(d, {'$pop': {'arr': -1}})
    assert d == {'arr': [2, 3]}


def test_pop_nested():
    d = {'a': {'arr': [1, 2]}}
    docmod.apply(d, {'$pop': {'a.arr': 1}})
    assert d == {'a': {'arr': [1]}}


@pytest.mark.parametrize('direction', [2, 0, '1', True, None])
def test_pop_bad_direction(direction):
    d = {'arr': [1, 2, 3]}
    with pytest.raises(InvalidArgumentError, match='expected 1 or -1'):
        docmod.apply(d, {'$pop': {'arr': direction}})
    assert d == {'arr': [1, 2, 3]}


def test_pop_absent_is_noop():
    d = {'a': {}}
    docmod.apply(d, {'$pop': {'arr': 1, 'a.arr': -1, 'x.y.z': 1}})
    assert d == {'a': {}}


def test_pop_absent_ignores_direction():
    d = {}
    docmod.apply(d, {'$pop': {'arr': 2}})
    assert d == {}


def test_pop_empty():
    d = {'arr': []}
    docmod.apply(d, {'$pop': {'arr': 1}})
    assert d == {'arr': []}


def test_pop_non_array():
    with pytest.raises(InvalidOperandError, match=r'\$pop'):
        docmod.apply({'arr': {'a': 1}}, {'$pop': {'arr': 1}})
