"""Runtime environment for mal.

The Environment stores bindings of Symbols to values and supports nested
lexical scopes via an `outer` link. Frames are shared by reference: every
closure created while a frame is active keeps it alive.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Optional

from mal import Expression
from mal.errors import MalArityError, MalTypeError, MalUnboundSymbol
from mal.types.symbol import Symbol

VARIADIC_MARKER = Symbol("&")


def check_params(binds: list[Symbol]) -> None:
    """A `&` may appear once, as the next-to-last parameter."""
    if VARIADIC_MARKER not in binds:
        return
    if binds.count(VARIADIC_MARKER) != 1 or binds.index(VARIADIC_MARKER) != len(binds) - 2:
        raise MalTypeError("'&' must be followed by exactly one parameter")


class Environment:
    """Hierarchical mapping from Symbols to mal values."""

    __slots__ = ("vars", "outer")

    def __init__(
        self,
        outer: Optional[Environment] = None,
        binds: Iterable[Symbol] = (),
        exprs: Iterable[Expression] = (),
    ):
        self.vars: dict[Symbol, Expression] = {}
        self.outer: Environment | None = outer
        self._bind(list(binds), list(exprs))

    def _bind(self, binds: list[Symbol], exprs: list[Expression]) -> None:
        """Bind parameters to arguments positionally.

        A `&` parameter collects every remaining argument into a list bound
        to the single symbol that follows it.
        """
        check_params(binds)
        if VARIADIC_MARKER in binds:
            idx = binds.index(VARIADIC_MARKER)
            fixed, rest_name = binds[:idx], binds[idx + 1]
            if len(exprs) < len(fixed):
                raise MalArityError(
                    f"Expected at least {len(fixed)} argument(s), got {len(exprs)}"
                )
            for name, value in zip(fixed, exprs):
                self.define(name, value)
            self.define(rest_name, list(exprs[len(fixed):]))
            return

        if len(binds) != len(exprs):
            raise MalArityError(f"Expected {len(binds)} argument(s), got {len(exprs)}")
        for name, value in zip(binds, exprs):
            self.define(name, value)

    def define(self, name: Symbol, value: Expression) -> Expression:
        """Bind `name` to `value` in this frame only."""
        if not isinstance(name, Symbol):
            raise MalTypeError(f"Cannot define {name!r} as a symbol")
        self.vars[name] = value
        return value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> Expression:
        """Look up the value bound to `name`, innermost frame first.

        Raises MalUnboundSymbol if no frame binds it.
        """
        env = self.find(name)
        if env is None:
            raise MalUnboundSymbol(f"'{name}' not found")
        return env.vars[name]

    def update(self, mapping: dict[Symbol, Expression]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env = self
            chain = []
            while env is not None:
                with StringIO() as env_buf:
                    env._write_vars(env_buf)
                    chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
