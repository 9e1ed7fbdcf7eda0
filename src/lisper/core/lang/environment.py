"""
Built-in lookup table for Lisper evaluation.

An Environment maps operation names to pure functions of the fixed
signature ``(Expr) -> Expr``. It is populated once and never mutated,
so a single instance can be shared freely between evaluations.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType

from lisper.core.ir.expressions import Expr
from lisper.core.lang import builtins

Builtin = Callable[[Expr], Expr]

# Symbolic names, always bound
_CORE_BUILTINS: dict[str, Builtin] = {
    # Arithmetic
    "+": builtins.add,
    "-": builtins.sub,
    "*": builtins.mul,
    "/": builtins.div,
    "%": builtins.modulus,
    # Comparators
    "<": builtins.less_than,
    ">": builtins.more_than,
    "=": builtins.equals,
    "==": builtins.equals,
    "<=": builtins.less_or_equal,
    ">=": builtins.more_or_equal,
    # Trig
    "sin": builtins.sin,
    "cos": builtins.cos,
    "tan": builtins.tan,
    "pi": builtins.pi,
}

# Long-form arithmetic names
_ALIAS_BUILTINS: dict[str, Builtin] = {
    "add": builtins.add,
    "sub": builtins.sub,
    "mul": builtins.mul,
    "div": builtins.div,
    "mod": builtins.modulus,
}


class Environment:
    """Read-only mapping from operation name to built-in."""

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Builtin]) -> None:
        self._data: Mapping[str, Builtin] = MappingProxyType(dict(data))

    @property
    def data(self) -> Mapping[str, Builtin]:
        """Read-only view of the bindings."""
        return self._data

    def get(self, name: str) -> Builtin | None:
        return self._data.get(name)

    def names(self) -> list[str]:
        return sorted(self._data)

    def with_builtins(self, extra: Mapping[str, Builtin]) -> Environment:
        """Return a new environment with extra bindings layered on top."""
        return Environment({**self._data, **extra})

    def __contains__(self, name: object) -> bool:
        return name in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Environment({', '.join(self.names())})"


def create_default_env(aliases: bool = True) -> Environment:
    """Create an environment holding the standard built-ins.

    Args:
        aliases: Also bind the long-form names ``add sub mul div mod``.
    """
    data = dict(_CORE_BUILTINS)
    if aliases:
        data.update(_ALIAS_BUILTINS)
    return Environment(data)
