"""Rendering of mal values back to text.

`render` is total: every value has a rendering, although functions and
atoms do not read back in. With `readably=True` strings are quoted and
escaped so that the printable subset round-trips through the reader.
"""

from __future__ import annotations

from mal import Expression
from mal.types.atom import Atom
from mal.types.function import Function
from mal.types.nil import NilType
from mal.types.symbol import Symbol

NIL_TOKEN = "nil"


def escape_string(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


def render(expr: Expression, readably: bool = False) -> str:
    match expr:
        # bool before int: True/False are ints to Python
        case bool():
            return "true" if expr else "false"
        case int():
            return str(expr)
        case NilType():
            return NIL_TOKEN
        case Symbol():
            return expr.name
        case str():
            return escape_string(expr) if readably else expr
        case list():
            return "(" + " ".join(render(item, readably) for item in expr) + ")"
        case Function():
            return repr(expr)
        case Atom():
            return f"(atom {render(expr.value, readably)})"
        case _:
            return f"#<{type(expr).__name__}>"
