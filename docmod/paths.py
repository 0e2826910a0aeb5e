"""
Path resolution through nested documents.

Two descents: `resolve_for_write` builds missing intermediates,
`locate_for_read` stops at the first absent one and never creates.
"""
import functools
import logging

from . import grammar
from . import utils
from .errors import InvalidArgumentError, InvalidOperandError

CACHE_SIZE = 300

logger = logging.getLogger(__name__)


@functools.lru_cache(CACHE_SIZE)
def _parse(key):
    return tuple(grammar.path.parse_string(key, parse_all=True).as_list())


def parse(key):
    """
    Split a dotted field path into its segments
    >>> parse('hello.there')
    ('hello', 'there')
    >>> parse('a..b')
    ('a', '', 'b')
    """
    if isinstance(key, tuple):
        return key
    if not isinstance(key, str):
        raise InvalidArgumentError(f"Field path must be a string, not {type(key).__name__}")
    return _parse(key)


def join(segments):
    return '.'.join(segments)


def lookup(container, key):
    """
    Value at `key` in `container`, or None if either is missing
    """
    if not utils.is_dict_like(container):
        return None
    try:
        return container[key]
    except KeyError:
        return None


def resolve_for_write(doc, key):
    """
    Walk to the container holding the last segment of `key`, creating an
    empty dict for every absent intermediate. Returns (container, last).
    >>> d = {}
    >>> container, last = resolve_for_write(d, 'a.b.c')
    >>> last, d
    ('c', {'a': {'b': {}}})
    """
    *parents, last = parse(key)
    node = doc
    for i, seg in enumerate(parents):
        child = lookup(node, seg)
        if utils.is_blank(child):
            child = node[seg] = {}
        elif not utils.is_dict_like(child):
            walked = join(parents[:i + 1])
            raise InvalidOperandError(
                f"Cannot update {type(child).__name__} at '{walked}' - "
                f"fields along '{key}' must be dicts", path=key)
        node = child
    return node, last


def locate_for_read(doc, key):
    """
    Walk as deep as existing, non-blank intermediates allow. A non-dict
    intermediate ends the walk one level down, where `lookup` finds nothing.
    Returns (container, segment) where descent stopped; the segment may or
    may not exist in the container.
    >>> locate_for_read({'a': {'b': 1}}, 'a.b')
    ({'b': 1}, 'b')
    >>> locate_for_read({'a': None}, 'a.b.c')
    ({'a': None}, 'a')
    """
    segments = parse(key)
    node = doc
    for seg in segments[:-1]:
        child = lookup(node, seg)
        if utils.is_blank(child):
            logger.debug('descent for %r stopped at %r', key, seg)
            return node, seg
        node = child
    return node, segments[-1]


def get(doc, key, default=None):
    """
    Value at `key`, or `default` if any part of the path is missing
    >>> get({'a': {'b': 0}}, 'a.b')
    0
    """
    node = doc
    for seg in parse(key):
        if not utils.is_dict_like(node) or seg not in node:
            return default
        node = node[seg]
    return node
