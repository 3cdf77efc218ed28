"""Function values: built-ins and user closures share one representation."""

from __future__ import annotations

from mal import Expression, NativeFn
from mal.types.symbol import Symbol


class Function:
    """A callable mal value.

    `native` receives the list of (already evaluated) arguments. Closures
    created by fn* also record their parameters, body and captured
    environment; built-ins only carry a name.
    """

    __slots__ = ("native", "is_macro", "name", "params", "body", "env")

    def __init__(
        self,
        native: NativeFn,
        *,
        name: str | None = None,
        params: list[Symbol] | None = None,
        body: Expression = None,
        env=None,
        is_macro: bool = False,
    ):
        self.native = native
        self.is_macro = is_macro
        self.name = name
        self.params = params
        self.body = body
        # Shared with every other closure created in the same scope
        self.env = env

    @property
    def is_closure(self) -> bool:
        return self.params is not None

    def to_macro(self) -> Function:
        """Return a macro copy of this function; self is left unchanged."""
        return Function(
            self.native,
            name=self.name,
            params=self.params,
            body=self.body,
            env=self.env,
            is_macro=True,
        )

    def __call__(self, args: list[Expression]) -> Expression:
        return self.native(list(args))

    def __repr__(self) -> str:
        kind = "macro" if self.is_macro else "function"
        if self.name:
            return f"#<{kind} {self.name}>"
        return f"#<{kind}>"
