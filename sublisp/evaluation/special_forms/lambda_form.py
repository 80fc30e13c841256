from sublisp import EvaluatorFn
from sublisp.errors import SublispArityError
from sublisp.types.context import Context
from sublisp.types.token import Token, List, LAMBDA
from sublisp.evaluation.special_forms.apply_form import apply_form


def is_lambda_list(expr: Token) -> bool:
    """True for a non-empty list whose first element is the symbol lambda."""
    return isinstance(expr, List) and len(expr) > 0 and expr[0] == LAMBDA


def lambda_form(tail: list[Token], ctx: Context, evaluate_fn: EvaluatorFn) -> Token:
    # (lambda (lambda params body) args) applies the inner lambda right away.
    # Anything else builds the (lambda params body) list as data.
    if len(tail) != 2:
        raise SublispArityError("lambda requires a parameter list and a body.")

    if is_lambda_list(tail[0]):
        return apply_form(tail, ctx, evaluate_fn)

    return List([LAMBDA, *tail])
