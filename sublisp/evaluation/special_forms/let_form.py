from sublisp import EvaluatorFn
from sublisp.errors import SublispArityError, SublispTypeError
from sublisp.types.context import Context
from sublisp.types.token import Token, Sym


def let_form(tail: list[Token], ctx: Context, evaluate_fn: EvaluatorFn) -> Token:
    """
    (let name value)
    Binds the evaluated value globally under name and returns the value form
    as written, so chained definitions can refer back to the original form.
    """
    if len(tail) != 2:
        raise SublispArityError("let requires exactly 2 arguments.")

    name, val_expr = tail
    if not isinstance(name, Sym):
        raise SublispTypeError("let requires a symbol as its first argument.")

    value = evaluate_fn(val_expr, ctx)
    ctx.insert(name.name, value)
    return val_expr
