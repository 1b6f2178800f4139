"""Error classes and helpers"""

__all__ = [
    "AssertionFailure",
    "AssignError",
    "CategoryError",
    "ParseError",
    "expect",
]


class AssertionFailure(AssertionError):
    """A postcondition did not hold after a mutation.

    Args:
        expression: (str) Source text of the checked expression
        expected: Value the expression should have
        actual: Value the expression actually has
    """

    def __init__(self, expression, expected, actual):
        self.expression = expression
        self.expected = expected
        self.actual = actual
        super().__init__(f"{expression} == {expected!r} failed, got {actual!r}")


class ParseError(Exception):
    """Exception raised for parsing errors.

    Args:
        message: (str) Error description
        position: (tuple | None) Optional (line, column) where error occurred

    Attributes:
        message: (str) Error description
        position: (tuple | None) (line, column) where error occurred
    """

    def __init__(self, message, position=None):
        self.message = message
        self.position = position
        super().__init__(message)


class CategoryError(Exception):
    """Expression form that a dialect does not have."""

    def __init__(self, message, position=None):
        self.message = message
        self.position = position
        super().__init__(message)


class AssignError(Exception):
    """Assignment to something that cannot be assigned."""

    def __init__(self, message, position=None):
        self.message = message
        self.position = position
        super().__init__(message)


def expect(expression, actual, expected):
    """Fail fast unless a checked expression has its expected value.

    Args:
        expression: (str) Source text naming what was checked
        actual: Value that was computed
        expected: Value it must equal

    Raises:
        AssertionFailure: If the values differ
    """
    if actual != expected:
        raise AssertionFailure(expression, expected, actual)
