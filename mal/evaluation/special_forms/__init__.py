"""Registry of special forms for the mal evaluator.

Maps Symbols to handler functions that implement non-standard evaluation
rules. Every handler takes (tail, env, evaluate_fn), where tail is the
unevaluated operand list. The evaluator consults this table after macro
expansion and before ordinary function application.
"""

from mal.types.symbol import Symbol
from mal.evaluation.special_forms.define_form import define_form
from mal.evaluation.special_forms.let_form import let_form
from mal.evaluation.special_forms.do_form import do_form
from mal.evaluation.special_forms.if_form import if_form
from mal.evaluation.special_forms.fn_form import fn_form
from mal.evaluation.special_forms.quote_forms import (
    quote_form,
    quasiquote_form,
    unquote_form,
    splice_unquote_form,
)
from mal.evaluation.special_forms.defmacro_form import defmacro_form
from mal.evaluation.special_forms.macroexpand_form import macroexpand_form

SPECIAL_FORMS = {
    Symbol("def!"): define_form,
    Symbol("let*"): let_form,
    Symbol("do"): do_form,
    Symbol("if"): if_form,
    Symbol("fn*"): fn_form,
    Symbol("quote"): quote_form,
    Symbol("quasiquote"): quasiquote_form,
    Symbol("unquote"): unquote_form,
    Symbol("splice-unquote"): splice_unquote_form,
    Symbol("defmacro!"): defmacro_form,
    Symbol("macroexpand"): macroexpand_form,
}
