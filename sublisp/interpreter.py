from __future__ import annotations

import logging
from typing import Optional

from sublisp.errors import SublispError, SublispQuit
from sublisp.reader.parser import parse_all
from sublisp.types.context import Context
from sublisp.types.token import Token, NIL
from sublisp.evaluation.evaluator import evaluate
from sublisp.builtin.env_builtin import register

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Evaluates sublisp source one turn at a time against a persistent context.
    Global bindings survive between turns; the evaluation cache does not.
    """
    def __init__(self, ctx: Context | None = None):
        if ctx is None:
            ctx = Context()
            register(ctx)
        self.ctx = ctx

    def eval(self, code: str) -> Token:
        """Evaluate every expression in `code` and return the last result.

        The whole line is read before anything runs.
        """
        result: Token = NIL
        try:
            for expr in list(parse_all(code)):
                result = evaluate(expr, self.ctx)
        finally:
            self.ctx.clear_locals()
        return result

    def run(self, line: str) -> Optional[str]:
        """Evaluate one line and render what the session should print.

        Returns None once the line asks for the session to end.
        """
        try:
            return f"> {self.eval(line)}"
        except SublispQuit:
            return None
        except SublispError as e:
            return str(e)
        except RecursionError:
            logger.debug("recursion limit hit evaluating %r", line)
            return "error: maximum recursion depth exceeded."


#  Example use-age:
if __name__ == "__main__":
    interp = Interpreter()

    tests = [
        "(+ 1 2 3)                                   ;; -> 6",
        "(cond (#f 1) (#t 2) (#t 3))                 ;; -> 2",
        "(let sq (lambda (num) (* num num)))",
        "(sq 12)                                     ;; -> 144",
        "(car (cons 1 2 3))                          ;; -> 1",
        "(cdr ())                                    ;; -> #nil",
    ]

    for code in tests:
        source = code.split(";;")[0]
        print(code, "=>", interp.run(source))
