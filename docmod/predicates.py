"""
Predicate operators for filter expressions.

PredOp is the base; subclasses define pred(actual, reference).
"""
import re

from . import utils
from .errors import InvalidArgumentError

# Stands in for the value of a field that does not exist.
marker = object()


def equals(actual, reference):
    """
    Equality with array semantics: an array matches a scalar it contains.
    A missing field equals None.
    """
    if actual is marker:
        return reference is None
    if utils.same(actual, reference):
        return True
    if utils.is_array(actual) and not utils.is_array(reference):
        return utils.contains(actual, reference)
    return False


def _as_list(op, reference):
    if not utils.is_list_like(reference):
        raise InvalidArgumentError(f"{op} needs an array")
    return reference


class PredOp:
    """
    Base predicate operator.
    """
    op = None

    def pred(self, actual, reference):
        """
        Return True if actual satisfies the predicate against reference.
        """
        raise NotImplementedError

    def __repr__(self):
        return self.op


class EqPred(PredOp):
    op = '$eq'

    def pred(self, actual, reference):
        return equals(actual, reference)


class NePred(PredOp):
    op = '$ne'

    def pred(self, actual, reference):
        return not equals(actual, reference)


class OrderPred(PredOp):
    """
    Ordering comparison. Missing values and incomparable types never match.
    """
    def compare(self, actual, reference):
        raise NotImplementedError

    def pred(self, actual, reference):
        if actual is marker:
            return False
        if utils.is_array(actual):
            return any(self.pred(v, reference) for v in actual)
        try:
            return self.compare(actual, reference)
        except TypeError:
            return False


class LtPred(OrderPred):
    op = '$lt'

    def compare(self, actual, reference):
        return actual < reference


class GtPred(OrderPred):
    op = '$gt'

    def compare(self, actual, reference):
        return actual > reference


class LePred(OrderPred):
    op = '$lte'

    def compare(self, actual, reference):
        return actual <= reference


class GePred(OrderPred):
    op = '$gte'

    def compare(self, actual, reference):
        return actual >= reference


class InPred(PredOp):
    op = '$in'

    def pred(self, actual, reference):
        return any(equals(actual, r) for r in _as_list(self.op, reference))


class NinPred(PredOp):
    op = '$nin'

    def pred(self, actual, reference):
        return not any(equals(actual, r) for r in _as_list(self.op, reference))


class ExistsPred(PredOp):
    op = '$exists'

    def pred(self, actual, reference):
        return (actual is not marker) == bool(reference)


class SizePred(PredOp):
    op = '$size'

    def pred(self, actual, reference):
        return utils.is_array(actual) and len(actual) == reference


class AllPred(PredOp):
    op = '$all'

    def pred(self, actual, reference):
        if not utils.is_array(actual):
            return False
        return all(equals(actual, r) for r in _as_list(self.op, reference))


class RegexPred(PredOp):
    """
    Regular expression search. reference is a pattern string, a compiled
    pattern, or a (pattern, options) pair where options holds i, m, s, x.
    """
    op = '$regex'
    flags = {'i': re.IGNORECASE, 'm': re.MULTILINE, 's': re.DOTALL, 'x': re.VERBOSE}

    def compile(self, reference):
        if isinstance(reference, re.Pattern):
            return reference
        options = ''
        if isinstance(reference, tuple):
            reference, options = reference
        if not isinstance(reference, str):
            raise InvalidArgumentError(f"{self.op} needs a string pattern")
        flags = 0
        for o in options or '':
            if o not in self.flags:
                raise InvalidArgumentError(f"{self.op}: unknown option {o!r}")
            flags |= self.flags[o]
        return re.compile(reference, flags)

    def pred(self, actual, reference):
        pattern = self.compile(reference)
        if utils.is_array(actual):
            return any(isinstance(v, str) and pattern.search(v) for v in actual)
        return isinstance(actual, str) and pattern.search(actual) is not None


# Singleton instances.
EQ = EqPred()
NE = NePred()
LT = LtPred()
GT = GtPred()
LE = LePred()
GE = GePred()
IN = InPred()
NIN = NinPred()
EXISTS = ExistsPred()
SIZE = SizePred()
ALL = AllPred()
REGEX = RegexPred()

# Lookup by operator name.
PRED_OPS = {p.op: p for p in (EQ, NE, LT, GT, LE, GE, IN, NIN, EXISTS, SIZE, ALL, REGEX)}
