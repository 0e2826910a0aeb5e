"""
Operator dispatch.

An Updater holds an update specification and applies it to any number
of documents. Each body is checked when its family runs. Families run in the fixed order of
operators.OPERATORS; $setOnInsert runs only for upserts.
"""
import copy
import logging

from . import utils
from .errors import InvalidArgumentError
from .match import select_matching
from .operators import OPERATORS

logger = logging.getLogger(__name__)


def has_operators(spec):
    """
    True if any top-level key of spec is an operator ($-prefixed)
    """
    return any(isinstance(k, str) and k.startswith('$') for k in spec.keys())


class Updater:
    def __init__(self, spec, select=None):
        if not utils.is_dict_like(spec):
            raise InvalidArgumentError(f"Update specification must be a document, not {type(spec).__name__}")
        self.spec = spec
        self.select = select or select_matching
        self.bodies = tuple(
            (op, spec[name])
            for name, op in OPERATORS.items()
            if name in spec and spec[name] is not None
        )

    def __repr__(self):
        return f'{self.__class__.__name__}({[op.name for op, _ in self.bodies]})'

    def has_operators(self):
        return has_operators(self.spec)

    def update(self, doc, upsert=False, atomic=False):
        """
        Apply to doc in place. On error the remaining families are skipped
        and earlier ones stay applied, unless atomic is set, in which case
        doc is left as it was.
        """
        if atomic:
            work = copy.deepcopy(doc)
            self.update(work, upsert=upsert)
            doc.clear()
            doc.update(work)
            return
        for op, body in self.bodies:
            if op.upsert_only and not upsert:
                continue
            logger.debug('applying %s', op.name)
            op.apply(doc, body, select=self.select)
