"""
Built-in functions for Lisper.

Every built-in takes one pre-evaluated argument bundle (a ``List``) and
returns a new expression. Built-ins are total: wrong arity or non-numeric
arguments never raise, they are skipped or replaced by a default value.
Float arithmetic follows IEEE-754, so dividing by zero gives inf or NaN.
"""

from __future__ import annotations

import logging
import math
import operator
from collections.abc import Callable

from lisper.core.ir.expressions import Bool, Expr, List, Number

logger = logging.getLogger(__name__)


def _args(bundle: Expr) -> list[Expr]:
    """Elements of an argument bundle; anything but a List carries none."""
    if isinstance(bundle, List):
        return bundle.items
    return []


def _fold(bundle: Expr, op: Callable[[float, float], float]) -> Number:
    """Left fold over the numbers in a bundle, seeded by index 0 only."""
    acc = 0.0
    for i, arg in enumerate(_args(bundle)):
        if isinstance(arg, Number):
            if i == 0:
                acc = arg.value
            else:
                acc = op(acc, arg.value)
    return Number(value=acc)


def _compare(bundle: Expr, op: Callable[[float, float], bool]) -> Bool:
    """Compare adjacent numbers; only the last comparison is kept."""
    prev = 0.0
    result = False
    for i, arg in enumerate(_args(bundle)):
        if isinstance(arg, Number):
            if i == 0:
                prev = arg.value
            else:
                result = op(prev, arg.value)
                prev = arg.value
    return Bool(value=result)


def _unary(bundle: Expr, fn: Callable[[float], float]) -> Number:
    """Apply fn to a leading Number; 0.0 when there is none."""
    items = _args(bundle)
    if items and isinstance(items[0], Number):
        try:
            return Number(value=fn(items[0].value))
        except ValueError:
            # math raises on inf input where IEEE gives NaN
            return Number(value=math.nan)
    return Number(value=0.0)


# ---------------------------------------------------------------------------
# IEEE-754 helpers
# ---------------------------------------------------------------------------


def _ieee_div(a: float, b: float) -> float:
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _ieee_mod(a: float, b: float) -> float:
    """Truncated remainder, sign follows the dividend."""
    try:
        return math.fmod(a, b)
    except ValueError:
        return math.nan


# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------


def add(args: Expr) -> Expr:
    return _fold(args, operator.add)


def sub(args: Expr) -> Expr:
    return _fold(args, operator.sub)


def mul(args: Expr) -> Expr:
    return _fold(args, operator.mul)


def div(args: Expr) -> Expr:
    return _fold(args, _ieee_div)


def modulus(args: Expr) -> Expr:
    return _fold(args, _ieee_mod)


# ---------------------------------------------------------------------------
# Comparators
# ---------------------------------------------------------------------------


def less_than(args: Expr) -> Expr:
    return _compare(args, operator.lt)


def more_than(args: Expr) -> Expr:
    return _compare(args, operator.gt)


def equals(args: Expr) -> Expr:
    return _compare(args, operator.eq)


def _traced_le(prev: float, current: float) -> bool:
    result = prev <= current
    logger.debug("%s <= %s = %s", prev, current, result)
    return result


def less_or_equal(args: Expr) -> Expr:
    return _compare(args, _traced_le)


def more_or_equal(args: Expr) -> Expr:
    return _compare(args, operator.ge)


# ---------------------------------------------------------------------------
# Trigonometry and constants
# ---------------------------------------------------------------------------


def sin(args: Expr) -> Expr:
    return _unary(args, math.sin)


def cos(args: Expr) -> Expr:
    return _unary(args, math.cos)


def tan(args: Expr) -> Expr:
    return _unary(args, math.tan)


def pi(args: Expr) -> Expr:
    """Always pi; the argument is ignored."""
    return Number(value=math.pi)
