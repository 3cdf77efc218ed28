from mal import EvaluatorFn, Expression
from mal.types.environment import Environment
from mal.types.nil import Nil


def do_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    result: Expression = Nil
    for e in tail:
        result = evaluate_fn(e, env)
    return result
