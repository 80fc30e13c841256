from sublisp import EvaluatorFn
from sublisp.errors import SublispArityError
from sublisp.types.context import Context
from sublisp.types.token import Token
from sublisp.evaluation.arguments import eval_args


def eval_form(tail: list[Token], ctx: Context, evaluate_fn: EvaluatorFn) -> Token:
    # (eval expr): expr is evaluated like any argument (a Quote stays a Quote),
    # then the result is evaluated once more.
    if len(tail) != 1:
        raise SublispArityError("eval expects exactly one argument.")
    (value,) = eval_args(tail, ctx, evaluate_fn)
    return evaluate_fn(value, ctx)
