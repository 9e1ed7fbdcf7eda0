"""
Tokenizer for Lisper source text.

Splits text into atom strings and isolated parentheses. There is no
quoting, escaping, or comment syntax, and tokenizing never fails:
malformed input is reported later by the parser.
"""

from __future__ import annotations

import re

LPAREN = "("
RPAREN = ")"

# Unicode White_Space; str.split() would also split on \x1c-\x1f
_WHITESPACE_RE = re.compile(
    "[\t\n\x0b\x0c\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+"
)


def tokenize(source: str) -> list[str]:
    """Tokenize source text into a list of token strings.

    Every parenthesis becomes its own token; everything else is split on
    runs of whitespace, so ``<=`` stays a single token.

    Examples:
        >>> tokenize("(+ 1 (* 2 3))")
        ['(', '+', '1', '(', '*', '2', '3', ')', ')']
    """
    padded = source.replace(LPAREN, f" {LPAREN} ").replace(RPAREN, f" {RPAREN} ")
    return [tok for tok in _WHITESPACE_RE.split(padded) if tok]
