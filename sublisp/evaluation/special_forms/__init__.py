"""Registry of special forms for the sublisp evaluator.

Special forms are bound in the global table like any primitive, as Func
values. They differ only in how they treat their unevaluated arguments.
"""

from sublisp.types.token import Func
from sublisp.evaluation.special_forms.quote_form import quote_form
from sublisp.evaluation.special_forms.let_form import let_form
from sublisp.evaluation.special_forms.lambda_form import lambda_form
from sublisp.evaluation.special_forms.apply_form import apply_form
from sublisp.evaluation.special_forms.cond_form import cond_form
from sublisp.evaluation.special_forms.eval_form import eval_form
from sublisp.evaluation.special_forms.quit_form import quit_form

SPECIAL_FORMS = {
    "quote": quote_form,
    "let": let_form,
    "lambda": lambda_form,
    "apply": apply_form,
    "cond": cond_form,
    "eval": eval_form,
    "quit": quit_form,
}


def special_form_funcs() -> dict[str, Func]:
    return {name: Func(name, form) for name, form in SPECIAL_FORMS.items()}
