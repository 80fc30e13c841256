# Core type aliases for sublisp's data model.
# Code and data share one representation: the Token variants defined in
# sublisp.types.token. Natives (primitives and special forms) all receive their
# arguments unevaluated together with the Context and the evaluator function,
# so they can decide for themselves what to evaluate.

from typing import Any, Callable

# Evaluator function type: passed into natives so they never import the evaluator
EvaluatorFn = Callable[..., Any]

# Native procedure type: (unevaluated args, context, evaluator) -> Token
NativeFn = Callable[[list, Any, EvaluatorFn], Any]

__version__ = "0.1.0"
