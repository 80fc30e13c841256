from timeit import timeit

from sublisp.interpreter import Interpreter
from sublisp.reader.parser import parse
from sublisp.evaluation.evaluator import evaluate


FACT = "(let fact (lambda (k) (cond ((< k 2) 1) (#t (* k (fact (- k 1)))))))"


def time_cold(code: str, rounds: int) -> float:
    """Time evaluation with the turn cache cleared before every round, the way
    the REPL sees a fresh line. Parses once.
    """
    itp = Interpreter()
    itp.eval(FACT)
    expr = parse(code)

    def run():
        evaluate(expr, itp.ctx)
        itp.ctx.clear_locals()

    return timeit(run, number=rounds)


def time_warm(code: str, rounds: int) -> float:
    """Time repeated evaluation of the same tree within one turn: every round
    after the first is answered from the cache.
    """
    itp = Interpreter()
    itp.eval(FACT)
    expr = parse(code)
    evaluate(expr, itp.ctx)
    return timeit(lambda: evaluate(expr, itp.ctx), number=rounds)


def time_parse(code: str, rounds: int) -> float:
    return timeit(lambda: parse(code), number=rounds)


def main():
    cases = {
        "arith": "(+ (* 2 3) (- 10 4) (/ 9 3))",
        "lists": "(car (cdr (cons 1 2 3 4 5)))",
        "fact10": "(fact 10)",
        "fact20": "(fact 20)",
    }
    rounds = 2000
    print(f"{'case':<8} {'parse':>10} {'cold':>10} {'warm':>10}")
    for name, code in cases.items():
        p = time_parse(code, rounds)
        c = time_cold(code, rounds)
        w = time_warm(code, rounds)
        print(f"{name:<8} {p:>10.4f} {c:>10.4f} {w:>10.4f}")


if __name__ == "__main__":
    main()
