"""Shared argument evaluation for natives."""

from sublisp import EvaluatorFn
from sublisp.types.context import Context
from sublisp.types.token import Token, Quote


def eval_args(tail: list[Token], ctx: Context, evaluate_fn: EvaluatorFn) -> list[Token]:
    """Evaluate arguments left to right, stopping at the first failure.

    Quote arguments are passed through untouched so a native receiving 'x
    sees the Quote itself rather than the value of x.
    """
    return [arg if isinstance(arg, Quote) else evaluate_fn(arg, ctx) for arg in tail]
