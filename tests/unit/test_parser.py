"""Tests for the Lisper parser.

Covers:
- Atom classification priority (bool, then number, then symbol)
- List parsing and remaining-token handling
- Parse errors
"""

from __future__ import annotations

import math

import pytest

from lisper.core.errors import ParseError
from lisper.core.ir.expressions import Bool, List, Number, Symbol
from lisper.core.lang.parser import parse, parse_all, parse_token, read
from lisper.core.lang.tokenizer import tokenize

# ============================================================================
# Atom classification
# ============================================================================


class TestParseToken:
    def test_number(self) -> None:
        assert parse_token("99") == Number(value=99.0)

    def test_bool(self) -> None:
        assert parse_token("true") == Bool(value=True)
        assert parse_token("false") == Bool(value=False)

    def test_symbol(self) -> None:
        assert parse_token("+") == Symbol(name="+")
        assert parse_token("sin") == Symbol(name="sin")

    def test_bool_is_case_sensitive(self) -> None:
        assert parse_token("True") == Symbol(name="True")

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("-2.5", -2.5),
            ("+4", 4.0),
            ("1e3", 1000.0),
            ("2.", 2.0),
            (".5", 0.5),
            ("1E-2", 0.01),
        ],
    )
    def test_number_spellings(self, token: str, expected: float) -> None:
        assert parse_token(token) == Number(value=expected)

    def test_special_floats(self) -> None:
        inf = parse_token("inf")
        assert isinstance(inf, Number)
        assert inf.value == math.inf
        nan = parse_token("NaN")
        assert isinstance(nan, Number)
        assert math.isnan(nan.value)

    def test_non_numbers_become_symbols(self) -> None:
        for token in ["1_000", "-", ".", "1e", "x1", "<=", "\u0663", "\uff11", "1\u0660"]:
            assert parse_token(token) == Symbol(name=token)

    def test_atom_render_round_trip(self) -> None:
        for token in ["99", "2.5", "-0.125", "true", "false"]:
            atom = parse_token(token)
            assert parse_token(str(atom)) == atom


# ============================================================================
# Forms
# ============================================================================


class TestParse:
    def test_simple_list(self) -> None:
        expr, rest = parse(["(", "+", "1", "1", ")"])
        assert expr == List(items=[Symbol(name="+"), Number(value=1.0), Number(value=1.0)])
        assert rest == []

    def test_spaced_source(self) -> None:
        expr, rest = parse(tokenize("( + 1 1 )"))
        assert isinstance(expr, List)
        assert len(expr.items) == 3
        assert rest == []

    def test_atom_returns_rest(self) -> None:
        expr, rest = parse(["42", "(", ")"])
        assert expr == Number(value=42.0)
        assert rest == ["(", ")"]

    def test_adjacent_forms(self) -> None:
        first, rest = parse(tokenize("(+ 1) (* 2 2)"))
        assert isinstance(first, List)
        assert len(first.items) == 2
        assert rest == ["(", "*", "2", "2", ")"]

        second, rest = parse(rest)
        assert second == List(
            items=[Symbol(name="*"), Number(value=2.0), Number(value=2.0)]
        )
        assert rest == []

    def test_nested(self) -> None:
        expr, _ = parse(tokenize("(+ 1 (* 2 3))"))
        assert expr == List(
            items=[
                Symbol(name="+"),
                Number(value=1.0),
                List(items=[Symbol(name="*"), Number(value=2.0), Number(value=3.0)]),
            ]
        )

    def test_empty_list(self) -> None:
        expr, rest = parse(["(", ")"])
        assert expr == List(items=[])
        assert rest == []

    def test_input_not_modified(self) -> None:
        tokens = tokenize("(+ 1 2) 3")
        parse(tokens)
        assert tokens == ["(", "+", "1", "2", ")", "3"]

    def test_deep_nesting(self) -> None:
        depth = 200
        expr, rest = parse(tokenize("(" * depth + ")" * depth))
        assert rest == []
        for _ in range(depth - 1):
            assert isinstance(expr, List)
            expr = expr.items[0]
        assert expr == List(items=[])


class TestParseErrors:
    def test_empty_tokens(self) -> None:
        with pytest.raises(ParseError, match="Could not get token"):
            parse([])

    def test_missing_close(self) -> None:
        with pytest.raises(ParseError, match=r"missing \)"):
            parse(tokenize("(+ 1"))

    def test_missing_close_nested(self) -> None:
        with pytest.raises(ParseError, match=r"missing \)"):
            parse(tokenize("(+ 1 (* 2 3)"))

    def test_unexpected_close(self) -> None:
        with pytest.raises(ParseError, match=r"unexpected \)"):
            parse(tokenize(") 1"))

    def test_reason_attribute(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse([])
        assert exc_info.value.reason == "Could not get token"
        assert str(exc_info.value) == "Could not get token"


class TestParseAll:
    def test_multiple_forms(self) -> None:
        forms = parse_all(tokenize("(+ 1 2) true (sin 0)"))
        assert len(forms) == 3
        assert forms[1] == Bool(value=True)

    def test_empty(self) -> None:
        assert parse_all([]) == []
        assert read("   ") == []

    def test_trailing_error(self) -> None:
        with pytest.raises(ParseError):
            read("(+ 1 2) )")

    def test_read(self) -> None:
        assert read("pi") == [Symbol(name="pi")]
