"""
Apply document-database style update operators to nested documents in place.
"""
from .api import apply, update, has_operators, names
from .engine import Updater
from .errors import UpdateError, InvalidOperandError, InvalidArgumentError
from .match import select_matching
from .operators import OPERATORS

__all__ = [
    'apply', 'update', 'has_operators', 'names', 'Updater',
    'UpdateError', 'InvalidOperandError', 'InvalidArgumentError',
    'select_matching', 'OPERATORS',
]
