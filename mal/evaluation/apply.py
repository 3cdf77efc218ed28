"""Function application for the evaluator and built-ins that call back
into user code (swap!, eval)."""

from mal import Expression
from mal.errors import MalNotCallable
from mal.printer import render
from mal.types.function import Function


def apply(head: Expression, args: list[Expression]) -> Expression:
    """Invoke a Function with already-evaluated arguments."""
    if not isinstance(head, Function):
        raise MalNotCallable(f"Cannot apply non-function {render(head, readably=True)}")
    return head(args)
