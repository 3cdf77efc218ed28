"""Core evaluator for the mal interpreter.

Implements macro expansion, special-form dispatch, and function
application. Evaluation recurses on the host stack; there is no tail-call
elimination.
"""

from __future__ import annotations

from mal import Expression
from mal.evaluation.apply import apply
from mal.evaluation.macros import macro_expand
from mal.evaluation.special_forms import SPECIAL_FORMS
from mal.types.environment import Environment
from mal.types.symbol import Symbol


def eval_atom(expr: Expression, env: Environment) -> Expression:
    """Self-evaluation: symbols resolve through the environment, all else is itself."""
    if isinstance(expr, Symbol):
        return env.lookup(expr)
    return expr


def evaluate(expr: Expression, env: Environment) -> Expression:
    if not isinstance(expr, list):
        return eval_atom(expr, env)
    if not expr:
        return expr

    # Macros expand before special-form dispatch
    expr = macro_expand(expr, env)
    if not isinstance(expr, list):
        return eval_atom(expr, env)

    match expr:
        case []:
            return expr
        case [Symbol() as head, *tail] if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail, env, evaluate)
        case [head, *tail]:
            fn = evaluate(head, env)
            args = [evaluate(arg, env) for arg in tail]
            return apply(fn, args)
