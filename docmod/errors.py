"""
Errors raised while applying an update specification.
"""


class UpdateError(Exception):
    """
    Base class for update errors. `operator` and `path` name where the
    failure happened when known.
    """
    def __init__(self, message, operator=None, path=None):
        super().__init__(message)
        self.operator = operator
        self.path = path


class InvalidOperandError(UpdateError, TypeError):
    """
    The existing value at a path has the wrong shape for the operator,
    e.g. $inc on a string or $push on a dict.
    """


class InvalidArgumentError(UpdateError, ValueError):
    """
    The operator payload itself is malformed, e.g. $pop with 2.
    """


def operand(operator, path, what):
    return InvalidOperandError(
        f"Cannot apply {operator} modifier to {what} at '{path}'",
        operator=operator, path=path)


def argument(operator, path, message):
    location = f" at '{path}'" if path is not None else ''
    return InvalidArgumentError(f"{operator}{location}: {message}", operator=operator, path=path)
