"""Macro expansion loop.

Macros are ordinary Function values flagged `is_macro`. A form whose head
symbol is bound to a macro is rewritten by calling the macro on the
unevaluated tail, repeatedly, until the head is no longer a macro call.
"""

from __future__ import annotations

from mal import Expression
from mal.types.environment import Environment
from mal.types.function import Function
from mal.types.symbol import Symbol


def macro_for(form: Expression, env: Environment) -> Function | None:
    """Return the macro a form's head symbol is bound to, if any."""
    if isinstance(form, list) and form and isinstance(form[0], Symbol):
        scope = env.find(form[0])
        if scope is not None:
            value = scope.vars[form[0]]
            if isinstance(value, Function) and value.is_macro:
                return value
    return None


def is_macro_call(form: Expression, env: Environment) -> bool:
    return macro_for(form, env) is not None


def macro_expand(form: Expression, env: Environment) -> Expression:
    """Expand head-position macros to a fixpoint."""
    while (macro := macro_for(form, env)) is not None:
        form = macro(form[1:])
    return form
