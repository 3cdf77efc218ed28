"""Special form: defmacro!.

(defmacro! name fn-expr) evaluates fn-expr to a function and binds a
macro copy of it under name.
"""

from __future__ import annotations

from mal import EvaluatorFn, Expression
from mal.errors import MalArityError, MalTypeError
from mal.types.environment import Environment
from mal.types.function import Function
from mal.types.symbol import Symbol


def defmacro_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    if len(tail) != 2:
        raise MalArityError("defmacro! requires a name and a function")

    macro_name, fn_expr = tail
    if not isinstance(macro_name, Symbol):
        raise MalTypeError(f"Macro name must be a symbol, got {macro_name!r}")

    fn = evaluate_fn(fn_expr, env)
    if not isinstance(fn, Function):
        raise MalTypeError(f"defmacro! expects a function, got {fn!r}")

    return env.define(macro_name, fn.to_macro())
