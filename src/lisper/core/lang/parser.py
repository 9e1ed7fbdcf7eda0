"""
Recursive descent parser for Lisper.

Grammar:
    form  → "(" form* ")" | atom
    atom  → BOOL | NUMBER | SYMBOL

One token of lookahead decides every branch; there is no backtracking.
``parse`` consumes exactly one form and hands back the unconsumed tokens,
so it can be called repeatedly to walk a stream of top-level forms.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from lisper.core.errors import ParseError
from lisper.core.ir.expressions import Bool, Expr, List, Number, Symbol
from lisper.core.lang.tokenizer import LPAREN, RPAREN, tokenize

logger = logging.getLogger(__name__)

_BOOLEANS = {"true": True, "false": False}

# Decimal float with optional fraction and exponent, or inf/infinity/nan.
# Narrower than float(): "1_000", " 1" and non-ASCII digits are not numbers here.
_NUMBER_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE | re.ASCII,
)


class _Parser:
    """Cursor over a token sequence."""

    def __init__(self, tokens: Sequence[str]) -> None:
        self.tokens = tokens
        self.pos = 0

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    @property
    def current(self) -> str:
        return self.tokens[self.pos]

    def advance(self) -> str:
        tok = self.tokens[self.pos]
        self.pos += 1
        return tok

    def remaining(self) -> list[str]:
        return list(self.tokens[self.pos :])

    # -- Grammar rules --

    def parse_form(self) -> Expr:
        """'(' form* ')' | atom"""
        if self.at_end:
            raise ParseError("Could not get token")

        tok = self.advance()
        if tok == LPAREN:
            return self.parse_list()
        if tok == RPAREN:
            raise ParseError("Parsing error, found unexpected ).")
        return parse_token(tok)

    def parse_list(self) -> List:
        """form* ')' -- the opening parenthesis is already consumed."""
        items: list[Expr] = []
        while True:
            if self.at_end:
                raise ParseError("Error reading token, missing ).")
            if self.current == RPAREN:
                self.advance()
                return List(items=items)
            items.append(self.parse_form())


def parse_token(token: str) -> Expr:
    """Classify a single atom token.

    Booleans win over numbers, and numbers win over symbols.

    Examples:
        >>> parse_token("99")
        Number(value=99.0)
        >>> parse_token("true")
        Bool(value=True)
        >>> parse_token("+")
        Symbol(name='+')
    """
    if token in _BOOLEANS:
        return Bool(value=_BOOLEANS[token])
    if _NUMBER_RE.fullmatch(token):
        return Number(value=float(token))
    return Symbol(name=token)


def parse(tokens: Sequence[str]) -> tuple[Expr, list[str]]:
    """Parse one form from the front of a token sequence.

    Args:
        tokens: Tokens as produced by ``tokenize``.

    Returns:
        The parsed expression and the tokens following it.

    Raises:
        ParseError: If the sequence is empty, a list is never closed,
            or a form starts with ``)``.
    """
    parser = _Parser(tokens)
    expr = parser.parse_form()
    logger.debug("Parsed form %s (%d tokens left)", expr, len(tokens) - parser.pos)
    return expr, parser.remaining()


def parse_all(tokens: Sequence[str]) -> list[Expr]:
    """Parse every top-level form in a token sequence, in order."""
    forms: list[Expr] = []
    rest = list(tokens)
    while rest:
        expr, rest = parse(rest)
        forms.append(expr)
    return forms


def read(source: str) -> list[Expr]:
    """Tokenize and parse source text into its top-level forms."""
    return parse_all(tokenize(source))
