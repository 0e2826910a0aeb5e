"""
Main api
"""
from . import engine
from . import operators


def apply(doc, spec, upsert=False, select=None, atomic=False):
    """
    Apply update operators in `spec` to `doc` in place
    >>> d = {'n': 1, 'tags': ['a']}
    >>> apply(d, {'$inc': {'n': 2}, '$push': {'tags': 'b'}})
    >>> d
    {'n': 3, 'tags': ['a', 'b']}
    >>> d = {}
    >>> apply(d, {'$set': {'a.b': 1}, '$setOnInsert': {'c': 2}}, upsert=True)
    >>> d
    {'a': {'b': 1}, 'c': 2}
    """
    engine.Updater(spec, select=select).update(doc, upsert=upsert, atomic=atomic)


def update(doc, spec, upsert=False, **kwargs):
    """
    Like `apply` but returns `doc`
    >>> update({'a': {'b': 1, 'c': 2}}, {'$set': {'a': {'b': 3}}})
    {'a': {'b': 3, 'c': 2}}
    >>> update({'a': 5}, {'$rename': {'a': 'b.c'}})
    {'b': {'c': 5}}
    """
    apply(doc, spec, upsert=upsert, **kwargs)
    return doc


def has_operators(spec):
    """
    True if `spec` holds update operators rather than a replacement document
    >>> has_operators({'$set': {'a': 1}})
    True
    >>> has_operators({'a': 1})
    False
    """
    return engine.has_operators(spec)


def names():
    """
    Operator names in the order they are applied
    >>> names()[:3]
    ('$set', '$unset', '$inc')
    """
    return tuple(operators.OPERATORS)
