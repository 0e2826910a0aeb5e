"""
Shared type-checking helpers (duck-typing).
"""
import math
import numbers


def is_dict_like(node):
    """
    True if node is dict-like: has .keys() and __getitem__.
    """
    return (
        hasattr(node, 'keys') and callable(node.keys)
        and hasattr(node, '__getitem__')
    )


def is_list_like(node):
    """
    True if node is list-like: has __getitem__, not str/bytes, not dict-like.
    """
    return (
        hasattr(node, '__getitem__')
        and not isinstance(node, (str, bytes))
        and not is_dict_like(node)
    )


def is_array(node):
    """
    True if node is an array the engine can grow and shrink in place.
    """
    return isinstance(node, list)


def is_number(node):
    return isinstance(node, numbers.Number) and not isinstance(node, bool)


def is_finite(node):
    """
    True if node is a real, finite number (bools excluded).
    """
    return (
        isinstance(node, numbers.Real) and not isinstance(node, bool)
        and math.isfinite(node)
    )


def is_blank(node):
    """
    True if node counts as absent: None, False, zero, NaN or ''.
    Empty containers are not blank.
    """
    if node is None or node is False:
        return True
    if isinstance(node, str):
        return node == ''
    if is_number(node):
        return node != node or node == 0
    return False


def same(a, b):
    """
    Equality that keeps bools apart from numbers, at any depth.
    """
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if is_array(a) and is_array(b):
        return len(a) == len(b) and all(same(x, y) for x, y in zip(a, b))
    if is_dict_like(a) and is_dict_like(b):
        return (
            set(a.keys()) == set(b.keys())
            and all(same(a[k], b[k]) for k in a.keys())
        )
    return a == b


def contains(array, value):
    """
    True if `value` is `same` as an element of `array`.
    """
    return any(same(v, value) for v in array)
