from mal import EvaluatorFn, Expression
from mal.errors import MalArityError, MalEvaluationError, MalTypeError
from mal.types.environment import Environment
from mal.types.symbol import Symbol

QUASIQUOTE = Symbol("quasiquote")
UNQUOTE = Symbol("unquote")
SPLICE_UNQUOTE = Symbol("splice-unquote")


def eval_quasiquote(
    evaluate_fn: EvaluatorFn,
    expr: Expression,
    env: Environment,
    depth: int = 1,
) -> Expression:
    """Build the quasiquoted structure, evaluating depth-1 unquotes.

    Nested quasiquotes raise the depth; their unquotes stay as data.
    """
    if not isinstance(expr, list) or not expr:
        return expr

    head = expr[0]
    if head == UNQUOTE and len(expr) == 2:
        if depth == 1:
            return evaluate_fn(expr[1], env)
        return [UNQUOTE, eval_quasiquote(evaluate_fn, expr[1], env, depth - 1)]
    if head == SPLICE_UNQUOTE and len(expr) == 2 and depth > 1:
        return [SPLICE_UNQUOTE, eval_quasiquote(evaluate_fn, expr[1], env, depth - 1)]
    if head == QUASIQUOTE and len(expr) == 2:
        return [QUASIQUOTE, eval_quasiquote(evaluate_fn, expr[1], env, depth + 1)]

    result: list[Expression] = []
    for item in expr:
        if isinstance(item, list) and len(item) == 2 and item[0] == SPLICE_UNQUOTE and depth == 1:
            spliced = evaluate_fn(item[1], env)
            if not isinstance(spliced, list):
                raise MalTypeError("splice-unquote must produce a list")
            result.extend(spliced)
            continue
        result.append(eval_quasiquote(evaluate_fn, item, env, depth))
    return result


def quote_form(
    tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn
) -> Expression:
    if len(tail) != 1:
        raise MalArityError("quote expects exactly 1 argument")
    return tail[0]


def quasiquote_form(
    tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn
) -> Expression:
    if len(tail) != 1:
        raise MalArityError("quasiquote expects exactly 1 argument")
    return eval_quasiquote(evaluate_fn, tail[0], env)


def unquote_form(
    tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn
) -> Expression:
    raise MalEvaluationError("unquote is not valid outside of quasiquote")


def splice_unquote_form(
    tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn
) -> Expression:
    raise MalEvaluationError("splice-unquote is not valid outside of quasiquote")
