from sublisp import EvaluatorFn
from sublisp.errors import SublispArityError
from sublisp.types.context import Context
from sublisp.types.token import Token, Quote


def quote_form(tail: list[Token], ctx: Context, evaluate_fn: EvaluatorFn) -> Token:
    """(quote expr) => a Quote holding the rendered text of expr, unevaluated."""
    if len(tail) != 1:
        raise SublispArityError("quote expects exactly 1 argument.")
    return Quote(str(tail[0]))
