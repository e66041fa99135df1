"""
Exception types raised by the expression tree package.

Every error is a ValueError so callers that only care about "bad input" can
catch that, while callers that need to tell the cases apart can use the
specific classes below.
"""

from typing import Optional


class ExpressionError(ValueError):
    """Base class for all expression errors"""


class MalformedExpression(ExpressionError):
    """Raised when a prefix expression string cannot be parsed into a tree"""


class InvalidArgument(ExpressionError):
    """Raised when an operation receives an absent or unusable argument"""


class InvalidExpression(InvalidArgument):
    """Raised when a tree is not a well-formed arithmetic expression"""

    def __init__(self, reason: str = "tree is not a valid arithmetic expression"):
        super().__init__(reason)
        self.reason = reason


class InvalidSubstitution(InvalidArgument):
    """Raised when a variable would be replaced by an absent or non-integer value"""

    def __init__(self, variable: Optional[str], message: Optional[str] = None):
        if message is None:
            message = f"no integer value to substitute for variable '{variable}'"
        super().__init__(message)
        self.variable = variable


class InvalidPosition(ValueError):
    """Raised when a tree position is out of range or has been removed"""
