"""
Expression evaluator for Lisper.

A structural walk over the four expression variants. Numbers and booleans
evaluate to themselves; a list is a call whose head names a built-in and
whose tail is evaluated left to right before dispatch. The first failure
propagates unchanged; there is no partial result.
"""

from __future__ import annotations

import logging

from lisper.core.errors import EvalError
from lisper.core.ir.expressions import Bool, Expr, List, Number, Symbol
from lisper.core.lang.environment import Environment, create_default_env
from lisper.core.lang.parser import read

logger = logging.getLogger(__name__)

# Argument handed to a built-in reached through a bare symbol
_BARE_SYMBOL_ARG = Bool(value=True)


def evaluate(expr: Expr, env: Environment) -> Expr:
    """Evaluate an expression against an environment.

    The environment is only read. Built-in results are returned as-is.

    Args:
        expr: Parsed expression.
        env: Built-in lookup table.

    Returns:
        The resulting expression.

    Raises:
        EvalError: If a call list is empty or names an unbound operation.
    """
    if isinstance(expr, (Number, Bool)):
        return expr

    if isinstance(expr, List):
        return _evaluate_call(expr, env)

    if isinstance(expr, Symbol):
        return _evaluate_symbol(expr, env)

    raise EvalError(f"Unknown expression type: {type(expr).__name__}")


def _evaluate_call(expr: List, env: Environment) -> Expr:
    """Evaluate arguments, then dispatch on the head's rendered text."""
    head = expr.head
    if head is None:
        raise EvalError("Error reading expression")

    args = [evaluate(arg, env) for arg in expr.tail]

    name = str(head)
    func = env.get(name)
    if func is None:
        raise EvalError("Error, function not found.")

    logger.debug("Calling %s with %d argument(s)", name, len(args))
    return func(List(items=args))


def _evaluate_symbol(expr: Symbol, env: Environment) -> Expr:
    """Invoke a bare operator name with a throwaway argument.

    This is not variable lookup: ``pi`` yields pi, ``+`` yields 0.
    """
    func = env.get(expr.name)
    if func is None:
        raise EvalError("Eval issue, not a real expression")

    logger.debug("Calling bare symbol %s", expr.name)
    return func(_BARE_SYMBOL_ARG)


def run(source: str, env: Environment | None = None) -> list[Expr]:
    """Read every top-level form in source and evaluate each in order.

    Nothing is evaluated if any form fails to parse.
    """
    if env is None:
        env = create_default_env()
    forms = read(source)
    return [evaluate(form, env) for form in forms]
