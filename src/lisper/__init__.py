"""
Lisper - a minimal S-expression language front end.

Converts text into an expression tree and evaluates it against a table
of built-in numeric and boolean operations.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version

from .core.errors import EvalError, LisperError, ParseError
from .core.ir import Bool, Expr, List, Number, Symbol
from .core.lang import (
    Environment,
    create_default_env,
    evaluate,
    parse,
    parse_all,
    parse_token,
    read,
    run,
    tokenize,
)


def _get_version() -> str:
    """Get the installed distribution version."""
    try:
        return _metadata_version("lisper")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    # Expressions
    "Bool",
    "Expr",
    "List",
    "Number",
    "Symbol",
    # Pipeline
    "Environment",
    "create_default_env",
    "evaluate",
    "parse",
    "parse_all",
    "parse_token",
    "read",
    "run",
    "tokenize",
    # Errors
    "LisperError",
    "ParseError",
    "EvalError",
]
