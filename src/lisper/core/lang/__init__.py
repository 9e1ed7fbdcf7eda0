"""
Lisper S-expression language.

Tokenizer, parser, built-ins, and evaluator: text → tokens → tree → value.

Usage:
    from lisper.core.lang import create_default_env, evaluate, parse, tokenize

    expr, rest = parse(tokenize("(+ 1 (* 2 3))"))
    result = evaluate(expr, create_default_env())
    # str(result) == "7"
"""

from lisper.core.lang.environment import Builtin, Environment, create_default_env
from lisper.core.lang.evaluator import evaluate, run
from lisper.core.lang.parser import parse, parse_all, parse_token, read
from lisper.core.lang.tokenizer import tokenize

__all__ = [
    "Builtin",
    "Environment",
    "create_default_env",
    "evaluate",
    "parse",
    "parse_all",
    "parse_token",
    "read",
    "run",
    "tokenize",
]
