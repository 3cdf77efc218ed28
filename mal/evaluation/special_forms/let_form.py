"""Special form: let*.

(let* (name1 val1 name2 val2 ...) body...)

Bindings are evaluated left to right in the new frame, so each value
expression can see the names bound before it.
"""

from mal import EvaluatorFn, Expression
from mal.errors import MalArityError, MalTypeError
from mal.types.environment import Environment
from mal.types.nil import Nil
from mal.types.symbol import Symbol


def let_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    if len(tail) < 2:
        raise MalArityError("let* requires bindings and at least one body form")

    bindings, *body = tail
    if not isinstance(bindings, list):
        raise MalTypeError("let* bindings must be a list")
    if len(bindings) % 2 != 0:
        raise MalTypeError("let* bindings must have an even number of forms")

    local_env = Environment(outer=env)
    for name, val_expr in zip(bindings[::2], bindings[1::2]):
        if not isinstance(name, Symbol):
            raise MalTypeError(f"let* binding name must be a symbol, got {name!r}")
        local_env.define(name, evaluate_fn(val_expr, local_env))

    result: Expression = Nil
    for form in body:
        result = evaluate_fn(form, local_env)
    return result
