"""
Tagged payload variants.

Operator payloads are classified once, when an update specification is
parsed, so handlers dispatch on the variant instead of re-inspecting the
raw value.
"""
import copy

from . import utils

EACH = '$each'


class Payload:
    def __init__(self, value):
        self.value = value
    def __repr__(self):
        return f'{self.__class__.__name__}({self.value!r})'
    def copy(self):
        """
        Deep copy of the raw value, safe to store in a document
        """
        return copy.deepcopy(self.value)


class Scalar(Payload):
    pass


class Array(Payload):
    def elements(self):
        """
        The array's items, deep copied into a new list
        """
        return self.copy() if isinstance(self.value, list) else list(self.copy())


class Record(Payload):
    """
    A document-shaped value. `fields` holds (key, payload) pairs with every
    nested value classified in turn; non-string keys become one-segment
    paths.
    """
    def __init__(self, value):
        super().__init__(value)
        self.fields = tuple(
            (k if isinstance(k, str) else (k,), classify(v)) for k, v in value.items())


class Each(Payload):
    """
    The {'$each': [...]} wrapper. Keys other than $each are kept in
    `modifiers` so handlers can reject them.
    """
    def __init__(self, value):
        super().__init__(value)
        self.each = value[EACH]
        self.modifiers = tuple(k for k in value.keys() if k != EACH)
    def is_valid(self):
        return utils.is_list_like(self.each)
    def elements(self):
        return [copy.deepcopy(v) for v in self.each]


def classify(value):
    """
    Wrap a raw payload in its variant
    >>> classify(7)
    Scalar(7)
    >>> classify([1, 2])
    Array([1, 2])
    >>> classify({'$each': [1]})
    Each({'$each': [1]})
    >>> classify({'a': 1}).fields
    (('a', Scalar(1)),)
    """
    if isinstance(value, Payload):
        return value
    if utils.is_dict_like(value):
        if EACH in value.keys():
            return Each(value)
        return Record(value)
    if utils.is_list_like(value):
        return Array(value)
    return Scalar(value)
