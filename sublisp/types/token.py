"""Token variants for sublisp.

Tokens are both the syntax tree produced by the reader and the runtime values
produced by the evaluator. The set of variants is closed:

    - List  -> ordered sequence of tokens (code or data)
    - Num   -> decimal number kept as its source text
    - Str   -> string literal, including its delimiting quotes
    - Sym   -> identifier, also #t / #f / #nil
    - Quote -> source text of a deferred expression
    - Func  -> primitive procedure

Numbers stay textual so that function application can splice them back into
source text; they are coerced to float only when arithmetic needs them.
"""

from __future__ import annotations

import math
import sys
from decimal import Decimal
from typing import Iterable

from sublisp import NativeFn
from sublisp.errors import SublispTypeError, SublispEvalError


class Token:
    """Common base for all token variants."""

    __slots__ = ()

    def to_float(self) -> float:
        raise SublispTypeError("value is not a number.")

    def to_bool(self) -> bool:
        raise SublispTypeError("value is not a boolean.")

    @staticmethod
    def to_vec_float(tokens: Iterable[Token]) -> list[float]:
        """Coerce every token to a float, failing on the first non-number."""
        return [tok.to_float() for tok in tokens]

    @staticmethod
    def to_vec_bool(tokens: Iterable[Token]) -> list[bool]:
        """Coerce every token to a bool, failing on the first non-boolean."""
        return [tok.to_bool() for tok in tokens]


class _TextToken(Token):
    """Shared behaviour for the variants that are nothing but their text."""

    __slots__ = ("text",)
    __match_args__ = ("text",)

    def __init__(self, text: str):
        object.__setattr__(self, "text", text)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other) -> bool:
        return type(other) is type(self) and self.text == other.text

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.text))

    def __repr__(self):
        return f"{type(self).__name__}({self.text!r})"

    def __str__(self):
        return self.text


class Num(_TextToken):
    __slots__ = ()

    def to_float(self) -> float:
        try:
            return float(self.text)
        except ValueError:
            raise SublispTypeError("value is not a number.") from None


class Str(_TextToken):
    __slots__ = ()


class Quote(_TextToken):
    __slots__ = ()


class Sym(_TextToken):
    __slots__ = ()

    def __init__(self, name: str):
        # Intern to keep repeated lookups of builtin names cheap
        super().__init__(sys.intern(name))

    @property
    def name(self) -> str:
        return self.text

    def to_bool(self) -> bool:
        if self.text == "#t":
            return True
        if self.text in ("#f", "#nil"):
            return False
        raise SublispTypeError("value is not a boolean.")


class List(Token):
    __slots__ = ("items",)
    __match_args__ = ("items",)

    def __init__(self, items: Iterable[Token] = ()):
        object.__setattr__(self, "items", tuple(items))

    def __setattr__(self, name, value):
        raise AttributeError("List is immutable")

    def __eq__(self, other) -> bool:
        if not isinstance(other, List) or len(self.items) != len(other.items):
            return False
        return all(a == b for a, b in zip(self.items, other.items))

    def __hash__(self) -> int:
        return hash(("List", self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __bool__(self) -> bool:
        # A token is always a value, even the empty list
        return True

    def __repr__(self):
        return f"List([{', '.join(repr(tok) for tok in self.items)}])"

    def __str__(self):
        return f"({' '.join(str(tok) for tok in self.items)})"


class Func(Token):
    """A primitive procedure.

    Func values compare unequal to everything, themselves included, so two
    procedures are never considered the same value by eq.
    """

    __slots__ = ("name", "procedure")

    def __init__(self, name: str, procedure: NativeFn):
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "procedure", procedure)

    def __setattr__(self, name, value):
        raise AttributeError("Func is immutable")

    def __call__(self, tail, ctx, evaluate_fn) -> Token:
        return self.procedure(tail, ctx, evaluate_fn)

    def __eq__(self, other) -> bool:
        return False

    def __ne__(self, other) -> bool:
        return True

    __hash__ = object.__hash__

    def __repr__(self):
        return f"Func({self.name!r})"

    def __str__(self):
        return "Fn<()>"


def from_bool(value: bool) -> Sym:
    return Sym("#t") if value else Sym("#f")


def format_float(value: float) -> str:
    """Positional decimal text the reader accepts back: no exponent, and no
    trailing '.0' on integral values.
    """
    if not math.isfinite(value):
        raise SublispEvalError("number out of range.")
    if value.is_integer():
        return str(int(value))
    # shortest repr digits, written out without exponent
    return format(Decimal(repr(value)), "f")


def from_float(value: float) -> Num:
    return Num(format_float(value))


TRUE = Sym("#t")
FALSE = Sym("#f")
NIL = Sym("#nil")
LAMBDA = Sym("lambda")
