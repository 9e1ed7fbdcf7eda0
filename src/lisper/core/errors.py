"""
Error types for Lisper parsing, evaluation, and configuration.
"""


class LisperError(Exception):
    """Base exception for all Lisper errors.

    Carries a single human-readable reason; there are no structured codes.
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class ParseError(LisperError):
    """
    Raised when a token stream cannot be turned into an expression.

    Examples:
    - Empty token stream where a form was expected
    - Missing closing parenthesis
    - Closing parenthesis at the start of a form
    """

    pass


class EvalError(LisperError):
    """
    Raised when an expression cannot be evaluated.

    Examples:
    - Empty call list ``()``
    - Operator name not bound in the environment
    """

    pass
