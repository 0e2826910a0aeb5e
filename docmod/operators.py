"""
Operator handlers, one class per family.

Each handler takes the body of its operator, checks it, classifies its
payloads into (path, payload) pairs and applies them to a document in place.
"""
import logging

from . import errors
from . import paths
from . import utils
from . import values

logger = logging.getLogger(__name__)


class ModifierOp:
    name = None
    upsert_only = False

    def __init__(self, name=None, upsert_only=False):
        if name:
            self.name = name
        self.upsert_only = upsert_only

    def __repr__(self):
        return self.name

    def parse(self, body):
        """
        Validate an operator body and classify its payloads
        """
        if not utils.is_dict_like(body):
            raise errors.argument(self.name, None, f"body must be a document, not {type(body).__name__}")
        for key in body.keys():
            if not isinstance(key, str):
                raise errors.argument(self.name, key, "field path must be a string")
        return tuple((key, values.classify(v)) for key, v in body.items())

    def apply(self, doc, body, **kwargs):
        for key, payload in self.parse(body):
            self.modify(doc, key, payload, **kwargs)

    def modify(self, doc, key, payload, **kwargs):
        raise NotImplementedError

    def skip(self, key):
        logger.debug('%s: nothing at %r', self.name, key)


class SetOp(ModifierOp):
    """
    Assign values, deep merging records into records.
    """
    name = '$set'

    def modify(self, doc, key, payload, **kwargs):
        container, last = paths.resolve_for_write(doc, key)
        if isinstance(payload, values.Record):
            dest = paths.lookup(container, last)
            if not utils.is_dict_like(dest):
                dest = container[last] = {}
            for k, p in payload.fields:
                self.modify(dest, k, p)
            return
        container[last] = payload.copy()


class UnsetOp(ModifierOp):
    name = '$unset'

    def modify(self, doc, key, payload, **kwargs):
        container, last = paths.locate_for_read(doc, key)
        if utils.is_blank(paths.lookup(container, last)):
            return self.skip(key)
        del container[last]


class IncOp(ModifierOp):
    name = '$inc'

    def modify(self, doc, key, payload, **kwargs):
        delta = payload.value
        if not utils.is_finite(delta):
            raise errors.argument(self.name, key, f"cannot increment by {delta!r}")
        container, last = paths.resolve_for_write(doc, key)
        current = paths.lookup(container, last)
        if utils.is_blank(current):
            current = 0
        elif not utils.is_finite(current):
            raise errors.operand(self.name, key, 'non-number')
        container[last] = current + delta


class PushOp(ModifierOp):
    """
    Append a value, or every value of an $each list, to an array.
    """
    name = '$push'

    def elements(self, key, payload):
        if isinstance(payload, values.Each):
            if payload.modifiers:
                raise errors.argument(self.name, key, f"unsupported modifier {payload.modifiers[0]}")
            if not payload.is_valid():
                raise errors.argument(self.name, key, "$each needs an array")
            return payload.elements()
        return [payload.copy()]

    def extend(self, current, elements):
        current.extend(elements)

    def modify(self, doc, key, payload, **kwargs):
        elements = self.elements(key, payload)
        container, last = paths.resolve_for_write(doc, key)
        current = paths.lookup(container, last)
        if utils.is_blank(current):
            container[last] = elements
        elif not utils.is_array(current):
            raise errors.operand(self.name, key, 'non-array')
        else:
            self.extend(current, elements)


class PushAllOp(PushOp):
    name = '$pushAll'

    def elements(self, key, payload):
        if not isinstance(payload, values.Array):
            raise errors.argument(self.name, key, "needs an array")
        return payload.elements()


class AddToSetOp(PushOp):
    """
    Append only values not already in the array when checked.
    """
    name = '$addToSet'

    def extend(self, current, elements):
        for v in elements:
            if not utils.contains(current, v):
                current.append(v)


class ArrayReadOp(ModifierOp):
    """
    Base for operators that shrink an existing array and ignore absent ones.
    """
    def existing(self, doc, key):
        """
        (container, last, array) or None when nothing is there
        """
        container, last = paths.locate_for_read(doc, key)
        current = paths.lookup(container, last)
        if utils.is_blank(current):
            self.skip(key)
            return None
        if not utils.is_array(current):
            raise errors.operand(self.name, key, 'non-array')
        return container, last, current


class PopOp(ArrayReadOp):
    name = '$pop'

    def modify(self, doc, key, payload, **kwargs):
        found = self.existing(doc, key)
        if found is None:
            return
        current = found[2]
        direction = payload.value
        if isinstance(direction, bool) or direction not in (1, -1):
            raise errors.argument(self.name, key, f"invalid argument {direction!r}, expected 1 or -1")
        if not current:
            return
        del current[-1 if direction == 1 else 0]


class PullOp(ArrayReadOp):
    """
    Remove the elements a filter expression selects. Selection is done by
    the `select` callable passed in by the dispatcher.
    """
    name = '$pull'

    def modify(self, doc, key, payload, select=None, **kwargs):
        found = self.existing(doc, key)
        if found is None:
            return
        current = found[2]
        matched = set(id(v) for v in select(payload.value, current))
        current[:] = [v for v in current if id(v) not in matched]


class PullAllOp(ArrayReadOp):
    name = '$pullAll'

    def modify(self, doc, key, payload, **kwargs):
        if not isinstance(payload, values.Array):
            raise errors.argument(self.name, key, "needs an array")
        found = self.existing(doc, key)
        if found is None:
            return
        current = found[2]
        current[:] = [v for v in current if not utils.contains(payload.value, v)]


class RenameOp(ModifierOp):
    name = '$rename'

    def modify(self, doc, key, payload, **kwargs):
        target = payload.value
        if not isinstance(target, str):
            raise errors.argument(self.name, key, "target must be a string")
        if target == key or target.startswith(key + '.') or key.startswith(target + '.'):
            raise errors.argument(self.name, key, f"source and target '{target}' overlap")
        container, last = paths.locate_for_read(doc, key)
        value = paths.lookup(container, last)
        if utils.is_blank(value):
            return self.skip(key)
        dest, dest_last = paths.resolve_for_write(doc, target)
        dest[dest_last] = value
        del container[last]


# Singleton instances.
SET = SetOp()
UNSET = UnsetOp()
INC = IncOp()
PUSH = PushOp()
PUSH_ALL = PushAllOp()
ADD_TO_SET = AddToSetOp()
POP = PopOp()
PULL = PullOp()
PULL_ALL = PullAllOp()
RENAME = RenameOp()
SET_ON_INSERT = SetOp('$setOnInsert', upsert_only=True)

# Lookup by operator name, in the order operators are applied.
OPERATORS = {op.name: op for op in (
    SET, UNSET, INC, PUSH, PUSH_ALL, ADD_TO_SET, POP, PULL, PULL_ALL, RENAME, SET_ON_INSERT,
)}
