"""Core evaluator for the sublisp interpreter.

Implements expression dispatch and list application. Every successful result
is memoized in the context's per-turn cache under the rendered text of the
expression, and that cache is consulted before anything is evaluated.
"""

from __future__ import annotations

from sublisp.errors import SublispUnboundSymbol, SublispEvalError
from sublisp.reader.parser import parse
from sublisp.types.context import Context
from sublisp.types.token import Token, List, Num, Str, Sym, Quote, Func
from sublisp.evaluation.special_forms.apply_form import apply_form
from sublisp.evaluation.special_forms.lambda_form import is_lambda_list


def evaluate(expr: Token, ctx: Context) -> Token:
    """Evaluate `expr` against `ctx`, consulting and filling the turn cache."""
    key = str(expr)
    cached = ctx.get_local(key)
    if cached is not None:
        return cached

    match expr:
        case Num() | Str():
            result = expr

        case Sym(name):
            bound = ctx.get(name)
            if bound is None:
                raise SublispUnboundSymbol(f"undefined symbol `{expr!r}`")
            # A symbol may be bound to an unevaluated expression
            result = evaluate(bound, ctx) if isinstance(bound, List) else bound

        case Quote(text):
            result = evaluate(parse(text), ctx)

        case List():
            result = evaluate_list(expr, ctx)

        case _:
            raise SublispEvalError("unexpected expression.")

    ctx.insert_local(key, result)
    return result


def evaluate_list(lst: List, ctx: Context) -> Token:
    """Application dispatch for a list expression.

    - () evaluates to itself.
    - ((lambda params body) args) is an immediate call, handed to apply.
    - A head that evaluates to a Func is called with the unevaluated tail.
    - Otherwise every element is evaluated. If that produced a list mentioning
      lambda (a symbol bound to a lambda list sitting in head position), the new
      list is evaluated again, unless it renders exactly like the input.
    """
    if not lst.items:
        return lst

    head, *tail_args = lst.items

    if is_lambda_list(head):
        return apply_form(list(lst.items), ctx, evaluate)

    fn = evaluate(head, ctx)
    if isinstance(fn, Func):
        return fn(tail_args, ctx, evaluate)

    evaluated = List(evaluate(tok, ctx) for tok in lst.items)
    rendered = str(evaluated)
    if "lambda" in rendered and rendered != str(lst):
        return evaluate(evaluated, ctx)
    return evaluated
