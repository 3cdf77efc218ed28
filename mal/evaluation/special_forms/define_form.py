from mal import EvaluatorFn, Expression
from mal.errors import MalArityError, MalTypeError
from mal.types.environment import Environment
from mal.types.symbol import Symbol


def define_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """
    (def! name value)
    Binds in the current frame and returns the bound value.
    """
    if len(tail) != 2:
        raise MalArityError("def! requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise MalTypeError(f"def! name must be a symbol, got {name!r}")
    value = evaluate_fn(val_expr, env)
    return env.define(name, value)
