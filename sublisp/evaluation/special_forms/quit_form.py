from sublisp import EvaluatorFn
from sublisp.errors import SublispQuit
from sublisp.types.context import Context
from sublisp.types.token import Token


def quit_form(tail: list[Token], ctx: Context, evaluate_fn: EvaluatorFn) -> Token:
    """(quit) unwinds the current evaluation and asks the session to end."""
    raise SublispQuit()
