from sublisp import EvaluatorFn
from sublisp.errors import SublispArityError, SublispMalformedError, SublispTypeError
from sublisp.types.context import Context
from sublisp.types.token import Token, List, NIL


def _is_true(value: Token) -> bool:
    # Only #t counts; #f, #nil and non-booleans all fall through
    try:
        return value.to_bool()
    except SublispTypeError:
        return False


def cond_form(tail: list[Token], ctx: Context, evaluate_fn: EvaluatorFn) -> Token:
    """Evaluate a (cond (test result) ...).

    For each clause in order, evaluate test; on the first true test evaluate
    and return result. Every clause must be a two element list. If no clause
    matches, return #nil.
    """
    if not tail:
        raise SublispArityError("cond requires at least 1 clause.")

    for clause in tail:
        if not isinstance(clause, List) or len(clause) != 2:
            raise SublispMalformedError()
        test, result = clause
        if _is_true(evaluate_fn(test, ctx)):
            return evaluate_fn(result, ctx)

    return NIL
