from mal import EvaluatorFn, Expression
from mal.errors import MalArityError, MalTypeError
from mal.types.environment import Environment, check_params
from mal.types.function import Function
from mal.types.nil import Nil
from mal.types.symbol import Symbol


def fn_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    # (fn* (params) body...) allows zero or more body forms.
    # Several forms are wrapped in an implicit do; none gives a function returning nil.
    if not tail:
        raise MalArityError("fn* requires at least a parameter list")

    params, *body_forms = tail
    if not isinstance(params, list) or not all(isinstance(p, Symbol) for p in params):
        raise MalTypeError("fn* parameters must be a list of symbols")
    check_params(params)

    if not body_forms:
        body = Nil
    elif len(body_forms) == 1:
        body = body_forms[0]
    else:
        body = [Symbol("do"), *body_forms]

    def closure(args: list[Expression]) -> Expression:
        return evaluate_fn(body, Environment(env, params, args))

    return Function(closure, params=params, body=body, env=env)
