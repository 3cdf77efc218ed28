from mal import EvaluatorFn, Expression
from mal.errors import MalArityError
from mal.types.environment import Environment
from mal.types.nil import Nil, is_truthy


def if_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    if len(tail) not in (2, 3):
        raise MalArityError("if requires a condition, a then-branch and an optional else-branch")

    cond = evaluate_fn(tail[0], env)
    if is_truthy(cond):
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return Nil
