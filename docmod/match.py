"""
Default filter evaluator for $pull.

select_matching(expression, candidates) returns the candidates an
expression matches, in order. An expression is one of
    a literal                    7, 'x', [1, 2]    element == literal
    an operator document         {'$gte': 6}       applied to the element
    a field document             {'a.b': 1, '$or': [...]}
                                                   applied to dict elements
"""
import re

from . import paths
from . import utils
from .errors import InvalidArgumentError
from .predicates import EQ, PRED_OPS, REGEX, marker

LOGICAL = ('$and', '$or', '$nor')


def select_matching(expression, candidates):
    """
    Subsequence of candidates matching expression
    >>> select_matching({'$gt': 1}, [1, 2, 3])
    [2, 3]
    >>> select_matching({'a': 1}, [{'a': 1}, {'a': 2}, 5])
    [{'a': 1}]
    """
    return [c for c in candidates if matches(expression, c)]


def is_operator_doc(expression):
    return (
        utils.is_dict_like(expression) and len(expression) > 0
        and all(isinstance(k, str) and k.startswith('$') for k in expression.keys())
        and not any(k in LOGICAL for k in expression.keys())
    )


def matches(expression, element):
    """
    True if element satisfies expression
    """
    if is_operator_doc(expression):
        return test(element, expression)
    if utils.is_dict_like(expression):
        return _match_document(element, expression)
    return EQ.pred(element, expression)


def _match_document(element, query):
    for key, cond in query.items():
        if key in LOGICAL:
            if not _match_logical(element, key, cond):
                return False
        elif isinstance(key, str) and key.startswith('$'):
            raise InvalidArgumentError(f"Unsupported filter operator: {key}")
        elif not utils.is_dict_like(element):
            return False
        elif not test(paths.get(element, key, marker), cond):
            return False
    return True


def _match_logical(element, op, clauses):
    if not utils.is_list_like(clauses) or not clauses:
        raise InvalidArgumentError(f"{op} needs a non-empty array of expressions")
    results = (matches(clause, element) for clause in clauses)
    if op == '$and':
        return all(results)
    if op == '$or':
        return any(results)
    return not any(results)


def test(actual, cond):
    """
    Test one value (possibly `marker`) against a condition: an operator
    document or a literal.
    """
    if not is_operator_doc(cond):
        return EQ.pred(actual, cond)
    for op, reference in cond.items():
        if op == '$options':
            if '$regex' not in cond:
                raise InvalidArgumentError("$options needs $regex")
            continue
        if op == '$regex':
            reference = (reference, cond.get('$options', ''))
            ok = REGEX.pred(actual, reference)
        elif op == '$not':
            if not (is_operator_doc(reference) or isinstance(reference, re.Pattern)):
                raise InvalidArgumentError("$not needs an operator document or a pattern")
            ok = not (test(actual, reference) if is_operator_doc(reference)
                      else REGEX.pred(actual, reference))
        elif op == '$elemMatch':
            if not utils.is_dict_like(reference):
                raise InvalidArgumentError("$elemMatch needs a document")
            ok = utils.is_array(actual) and any(matches(reference, v) for v in actual)
        elif op in PRED_OPS:
            ok = PRED_OPS[op].pred(actual, reference)
        else:
            raise InvalidArgumentError(f"Unsupported filter operator: {op}")
        if not ok:
            return False
    return True

