"""Built-in procedures for the sublisp runtime context.

This module defines the arithmetic, comparison, boolean and list primitives
exposed to Lisp code, and `register`, which installs them together with the
special forms and the boolean constants into a Context.

Every primitive receives its arguments unevaluated; most evaluate them
straight away through eval_args.
"""
from __future__ import annotations

import math

from sublisp import EvaluatorFn
from sublisp.types.context import Context
from sublisp.types.token import Token, List, Func, from_bool, from_float, TRUE, FALSE, NIL
from sublisp.errors import SublispArityError, SublispEvalError
from sublisp.evaluation.arguments import eval_args
from sublisp.evaluation.special_forms import special_form_funcs


def _require(tail: list[Token], count: int, name: str) -> None:
    if len(tail) != count:
        raise SublispArityError(f"{name} requires exactly {count} argument(s).")


def _require_at_least(tail: list[Token], count: int, name: str) -> None:
    if len(tail) < count:
        raise SublispArityError(f"{name} requires at least {count} arguments.")


def _numbers(tail: list[Token], ctx: Context, evaluate_fn: EvaluatorFn) -> list[float]:
    values = Token.to_vec_float(eval_args(tail, ctx, evaluate_fn))
    if not all(math.isfinite(v) for v in values):
        raise SublispEvalError("number out of range.")
    return values


def _booleans(tail: list[Token], ctx: Context, evaluate_fn: EvaluatorFn) -> list[bool]:
    return Token.to_vec_bool(eval_args(tail, ctx, evaluate_fn))


# -------------------------------
# Arithmetic
# -------------------------------
def add(tail: list[Token], ctx: Context, evaluate_fn: EvaluatorFn) -> Token:
    """Return the sum of two or more numbers."""
    _require_at_least(tail, 2, "+")
    return from_float(sum(_numbers(tail, ctx, evaluate_fn)))


def sub(tail: list[Token], ctx: Context, evaluate_fn: EvaluatorFn) -> Token:
    """Subtract the sum of all subsequent numbers from the first."""
    _require_at_least(tail, 2, "-")
    first, *rest = _numbers(tail, ctx, evaluate_fn)
    return from_float(first - sum(rest))


def mul(tail: list[Token], ctx: Context, evaluate_fn: EvaluatorFn) -> Token:
    _require(tail, 2, "*")
    a, b = _numbers(tail, ctx, evaluate_fn)
    return from_float(a * b)


def div(tail: list[Token], ctx: Context, evaluate_fn: EvaluatorFn) -> Token:
    _require(tail, 2, "/")
    a, b = _numbers(tail, ctx, evaluate_fn)
    if b == 0:
        raise SublispEvalError("division by zero.")
    return from_float(a / b)


def mod(tail: list[Token], ctx: Context, evaluate_fn: EvaluatorFn) -> Token:
    """(mod n d) => remainder of n / d, with the sign of n."""
    _require(tail, 2, "mod")
    n, d = _numbers(tail, ctx, evaluate_fn)
    if d == 0:
        raise SublispEvalError("modulo by zero.")
    return from_float(math.fmod(n, d))


# -------------------------------
# Comparison
# -------------------------------
def lt(tail: list[Token], ctx: Context, evaluate_fn: EvaluatorFn) -> Token:
    _require(tail, 2, "<")
    a, b = _numbers(tail, ctx, evaluate_fn)
    return from_bool(a < b)


def gt(tail: list[Token], ctx: Context, evaluate_fn: EvaluatorFn) -> Token:
    _require(tail, 2, ">")
    a, b = _numbers(tail, ctx, evaluate_fn)
    return from_bool(a > b)


def equals(tail: list[Token], ctx: Context, evaluate_fn: EvaluatorFn) -> Token:
    """Return #t if both arguments are structurally equal, else #f."""
    _require(tail, 2, "eq")
    a, b = eval_args(tail, ctx, evaluate_fn)
    return from_bool(a == b)


def not_equals(tail: list[Token], ctx: Context, evaluate_fn: EvaluatorFn) -> Token:
    """Logical negation of eq."""
    result = equals(tail, ctx, evaluate_fn)
    return from_bool(not result.to_bool())


# -------------------------------
# Boolean logic
# -------------------------------
def logical_and(tail: list[Token], ctx: Context, evaluate_fn: EvaluatorFn) -> Token:
    _require_at_least(tail, 2, "and")
    return from_bool(all(_booleans(tail, ctx, evaluate_fn)))


def logical_or(tail: list[Token], ctx: Context, evaluate_fn: EvaluatorFn) -> Token:
    _require_at_least(tail, 2, "or")
    return from_bool(any(_booleans(tail, ctx, evaluate_fn)))


def logical_not(tail: list[Token], ctx: Context, evaluate_fn: EvaluatorFn) -> Token:
    _require(tail, 1, "not")
    (value,) = _booleans(tail, ctx, evaluate_fn)
    return from_bool(not value)


# -------------------------------
# List operations
# -------------------------------
def cons(tail: list[Token], ctx: Context, evaluate_fn: EvaluatorFn) -> Token:
    """Evaluate every argument and collect the values into a list."""
    _require_at_least(tail, 1, "cons")
    return List(eval_args(tail, ctx, evaluate_fn))


def car(tail: list[Token], ctx: Context, evaluate_fn: EvaluatorFn) -> Token:
    """First element of a non-empty list, otherwise #nil."""
    _require(tail, 1, "car")
    value = evaluate_fn(tail[0], ctx)
    if isinstance(value, List) and value.items:
        (first,) = eval_args([value[0]], ctx, evaluate_fn)
        return first
    return NIL


def cdr(tail: list[Token], ctx: Context, evaluate_fn: EvaluatorFn) -> Token:
    """All but the first element of a non-empty list, otherwise #nil."""
    _require(tail, 1, "cdr")
    value = evaluate_fn(tail[0], ctx)
    if isinstance(value, List) and value.items:
        return List(eval_args(list(value[1:]), ctx, evaluate_fn))
    return NIL


def atom(tail: list[Token], ctx: Context, evaluate_fn: EvaluatorFn) -> Token:
    """#t unless the argument, as written, is a list."""
    _require(tail, 1, "atom")
    return from_bool(not isinstance(tail[0], List))


PRIMITIVES = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "mod": mod,
    "%": mod,
    "<": lt,
    ">": gt,
    "and": logical_and,
    "or": logical_or,
    "not": logical_not,
    "cons": cons,
    "car": car,
    "cdr": cdr,
    "atom": atom,
    "eq": equals,
    "neq": not_equals,
}


# -------------------------------
# Registration
# -------------------------------
def register(ctx: Context) -> None:
    ctx.update({
        "#t": TRUE,
        "#f": FALSE,
        "#nil": NIL,
    })
    ctx.update({name: Func(name, fn) for name, fn in PRIMITIVES.items()})
    ctx.update(special_form_funcs())
