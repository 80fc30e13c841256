from sublisp import EvaluatorFn
from sublisp.errors import SublispArityError
from sublisp.types.context import Context
from sublisp.types.token import Token, List
from sublisp.evaluation.apply import apply as apply_engine


def apply_form(tail: list[Token], ctx: Context, evaluate_fn: EvaluatorFn) -> Token:
    """
    (apply fn args)

    fn is used as is when it is a list, otherwise it names a global. args is
    evaluated; a list supplies the arguments, any other value is the single
    argument. Application itself is delegated to the central engine.
    """
    if len(tail) != 2:
        raise SublispArityError("apply expects exactly two arguments: function and argument list.")

    fn_expr, args_expr = tail

    if isinstance(fn_expr, List):
        callee = fn_expr
    else:
        callee = ctx.get(str(fn_expr))

    args_val = evaluate_fn(args_expr, ctx)
    args = list(args_val) if isinstance(args_val, List) else [args_val]

    return apply_engine(callee, args, ctx, evaluate_fn)
