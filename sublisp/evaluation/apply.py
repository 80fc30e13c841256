"""Application engine for sublisp.

This module centralizes function application semantics for the interpreter:
- User functions are plain data lists of the shape (lambda params body).
  Applying one renders the body to text, replaces each parameter name with
  the rendered argument, re-parses the result and evaluates it.
- Primitive procedures (Func) are invoked with the argument list directly.

Substitution is sequential and purely textual. A parameter name that also
occurs inside another symbol (x inside max), or inside an argument that an
earlier parameter already substituted, is replaced there too.
"""

import logging
from typing import Optional

from sublisp import EvaluatorFn
from sublisp.errors import SublispArityError, SublispTypeError, SublispEvalError
from sublisp.reader.parser import parse
from sublisp.types.context import Context
from sublisp.types.token import Token, List, Func, NIL, LAMBDA

logger = logging.getLogger(__name__)


def substitute(body: Token, params: list[Token], args: list[Token]) -> str:
    """Render `body` and replace each parameter, in order, with its argument."""
    text = str(body)
    for param, arg in zip(params, args):
        text = text.replace(str(param), str(arg))
    return text


def apply_lambda(
    fn: List,
    args: list[Token],
    ctx: Context,
    evaluate_fn: EvaluatorFn,
) -> Token:
    """Apply a (lambda params body) list to already-evaluated arguments.

    - fn must have exactly 3 elements and start with the symbol lambda.
    - A body that is not a non-empty list evaluates to #nil without looking
      at the arguments.
    - The number of arguments must equal the number of parameters.
    """
    if len(fn) != 3:
        raise SublispArityError()
    if fn[0] != LAMBDA:
        raise SublispTypeError()

    params = list(fn[1]) if isinstance(fn[1], List) else []
    body = fn[2]

    if not isinstance(body, List) or not body.items:
        return NIL

    if len(args) != len(params):
        raise SublispArityError(
            f"expected {len(params)} argument(s), got {len(args)}."
        )

    source = substitute(body, params, args)
    logger.debug("apply %s -> %s", fn, source)
    return evaluate_fn(parse(source), ctx)


def apply(
    callee: Optional[Token],
    args: list[Token],
    ctx: Context,
    evaluate_fn: EvaluatorFn,
) -> Token:
    """Apply either a lambda list or a primitive procedure.

    - For a List, defer to apply_lambda.
    - For a Func, invoke it with the argument list.
    - Otherwise (including an unresolved callee), raise an evaluation error.
    """
    if isinstance(callee, List):
        return apply_lambda(callee, args, ctx, evaluate_fn)
    if isinstance(callee, Func):
        return callee(args, ctx, evaluate_fn)
    raise SublispEvalError("execution error")
