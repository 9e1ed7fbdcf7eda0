"""
Lisper Intermediate Representation (IR) types.

The expression tree shared by the parser, the environment, and the evaluator.
"""

from .expressions import Bool, Expr, List, Number, Symbol, format_number

__all__ = [
    "Bool",
    "Expr",
    "List",
    "Number",
    "Symbol",
    "format_number",
]
