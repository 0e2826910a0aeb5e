import docmod
import pytest
from docmod import InvalidArgumentError, InvalidOperandError


def test_rename_into_new_path():
    d = {'a': 5}
    docmod.apply(d, {'$rename': {'a': 'b.c'}})
    assert d == {'b': {'c': 5}}


def test_rename_nested_source():
    d = {'a': {'b': 1, 'c': 2}}
    docmod.apply(d, {'$rename': {'a.b': 'x'}})
    assert d == {'a': {'c': 2}, 'x': 1}


def test_rename_overwrites_target():
    d = {'a': [1], 'b': 'old'}
    docmod.apply(d, {'$rename': {'a': 'b'}})
    assert d == {'b': [1]}


def test_rename_moves_same_object():
    inner = {'x': 1}
    d = {'a': inner}
    docmod.apply(d, {'$rename': {'a': 'b'}})
    assert d['b'] is inner


def test_rename_absent_is_noop():
    d = {'z': 1}
    docmod.apply(d, {'$rename': {'a': 'b.c', 'x.y': 'q'}})
    assert d == {'z': 1}


@pytest.mark.parametrize('source,target', [
    ('a', 'a'),
    ('a', 'a.b'),
    ('a.b', 'a'),
])
def test_rename_overlapping(source, target):
    d = {'a': {'b': 1}}
    with pytest.raises(InvalidArgumentError, match='overlap'):
        docmod.apply(d, {'$rename': {source: target}})
    assert d == {'a': {'b': 1}}


def test_rename_target_must_be_string():
    with pytest.raises(InvalidArgumentError, match='string'):
        docmod.apply({'a': 1}, {'$rename': {'a': 1}})


def test_rename_target_through_scalar():
    d = {'a': 1, 'b': 2}
    with pytest.raises(InvalidOperandError):
        docmod.apply(d, {'$rename': {'a': 'b.c'}})
    assert d == {'a': 1, 'b': 2}
