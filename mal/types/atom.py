from __future__ import annotations

from mal import Expression


class Atom:
    """A one-slot mutable reference cell.

    Atoms compare by identity: two atoms holding equal values are distinct.
    `swap` is a plain read-modify-write and is not safe under concurrent use.
    """

    __slots__ = ("value",)

    def __init__(self, value: Expression):
        self.value = value

    def deref(self) -> Expression:
        return self.value

    def reset(self, value: Expression) -> Expression:
        self.value = value
        return value

    def swap(self, fn, extra_args: list[Expression]) -> Expression:
        return self.reset(fn([self.value, *extra_args]))

    def __repr__(self) -> str:
        return f"(atom {self.value!r})"
