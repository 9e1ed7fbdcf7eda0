"""
Expression tree types for Lisper.

An expression is a closed union of four immutable variants:

- Bool: ``true`` / ``false``
- Symbol: an operator name, or any atom that is neither bool nor number
- Number: a 64-bit float
- List: an ordered sequence of expressions; both a parenthesized form
  and the packaged argument bundle handed to a built-in

Lists exclusively own their elements, so every tree is acyclic.
"""

from __future__ import annotations

import math
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Rendering helpers
# ---------------------------------------------------------------------------


def format_number(value: float) -> str:
    """Render a float without exponent notation or a trailing ``.0``.

    Examples:
        >>> format_number(65.0)
        '65'
        >>> format_number(0.5)
        '0.5'
        >>> format_number(1e-07)
        '0.0000001'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    text = repr(value)
    if "e" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Bool(BaseModel):
    """A boolean literal."""

    value: bool = Field(description="The boolean value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return "true" if self.value else "false"


class Symbol(BaseModel):
    """
    An identifier, normally naming a built-in.

    Any atom that is not a boolean or number literal becomes a Symbol,
    so malformed input such as ``1_000`` is held here verbatim.
    """

    name: str = Field(description="Raw token text")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.name


class Number(BaseModel):
    """A 64-bit floating point number."""

    value: float = Field(description="The numeric value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return format_number(self.value)


class List(BaseModel):
    """
    An ordered sequence of expressions.

    Rendered as ``(a,b,c)``: elements are joined by commas, not spaces,
    so a rendered list is not generally re-readable.
    """

    items: list[Expr] = Field(default_factory=list, description="Elements in source order")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return "(" + ",".join(str(item) for item in self.items) + ")"

    @property
    def head(self) -> Expr | None:
        """The first element, or None for an empty list."""
        return self.items[0] if self.items else None

    @property
    def tail(self) -> list[Expr]:
        """Every element after the first."""
        return self.items[1:]


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Bool | Symbol | Number | List

# Rebuild models for recursive forward references
List.model_rebuild()
