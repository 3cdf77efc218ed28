"""Special form that exposes the macro expander to mal code.

(macroexpand form) expands head-position macros in form until the head is
no longer a macro call and returns the expansion without evaluating it.
The operand itself is not evaluated either.
"""

from mal import EvaluatorFn, Expression
from mal.errors import MalArityError
from mal.evaluation.macros import macro_expand
from mal.types.environment import Environment


def macroexpand_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    if len(tail) != 1:
        raise MalArityError("macroexpand expects exactly 1 argument")
    return macro_expand(tail[0], env)
