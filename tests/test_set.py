import docmod
import pytest


def test_set_flat():
    d = {'a': 1}
    docmod.apply(d, {'$set': {'a': 2, 'b': 3}})
    assert d == {'a': 2, 'b': 3}


def test_set_creates_intermediates():
    d = {'a': {'x': 1, 'b': {'y': 2}}}
    docmod.apply(d, {'$set': {'a.b.c': 3}})
    assert d == {'a': {'x': 1, 'b': {'y': 2, 'c': 3}}}


def test_set_fresh_path():
    d = {}
    docmod.apply(d, {'$set': {'a.b.c': 'hello'}})
    assert d == {'a': {'b': {'c': 'hello'}}}


def test_set_record_deep_merges():
    d = {'a': {'b': {'c': 1, 'd': 2}, 'e': 3}}
    docmod.apply(d, {'$set': {'a': {'b': {'c': 9}}}})
    assert d == {'a': {'b': {'c': 9, 'd': 2}, 'e': 3}}


def test_set_record_on_absent():
    d = {}
    docmod.apply(d, {'$set': {'a': {'b': 1}}})
    assert d == {'a': {'b': 1}}


def test_set_record_on_scalar_replaces():
    d = {'a': 5}
    docmod.apply(d, {'$set': {'a': {'b': 1}}})
    assert d == {'a': {'b': 1}}


def test_set_empty_record_keeps_existing():
    d = {'a': {'b': 1}}
    docmod.apply(d, {'$set': {'a': {}}})
    assert d == {'a': {'b': 1}}


def test_set_nested_record_keys_are_paths():
    d = {'a': {'b': {'c': 1}}}
    docmod.apply(d, {'$set': {'a': {'b.d': 2}}})
    assert d == {'a': {'b': {'c': 1, 'd': 2}}}


@pytest.mark.parametrize('before,value', [
    ({'a': [1, 2]}, 'x'),
    ({'a': {'b': 1}}, 7),
    ({'a': 'x'}, [1, 2]),
    ({'a': {'b': 1}}, [{'b': 2}]),
])
def test_set_non_record_replaces(before, value):
    docmod.apply(before, {'$set': {'a': value}})
    assert before == {'a': value}


def test_set_does_not_alias_spec():
    spec = {'$set': {'a': [1], 'b': {'c': [2]}}}
    d = {}
    docmod.apply(d, spec)
    d['a'].append(9)
    d['b']['c'].append(9)
    assert spec == {'$set': {'a': [1], 'b': {'c': [2]}}}


def test_set_on_insert_only_on_upsert():
    d = {}
    docmod.apply(d, {'$setOnInsert': {'a': 1}})
    assert d == {}
    docmod.apply(d, {'$setOnInsert': {'a': 1}}, upsert=True)
    assert d == {'a': 1}


def test_set_on_insert_runs_last():
    d = {}
    docmod.apply(d, {'$setOnInsert': {'a': 1}, '$set': {'a': 2}}, upsert=True)
    assert d == {'a': 1}


def test_set_on_insert_merges():
    d = {}
    docmod.apply(d, {'$set': {'a.b': 1}, '$setOnInsert': {'a': {'c': 2}}}, upsert=True)
    assert d == {'a': {'b': 1, 'c': 2}}
