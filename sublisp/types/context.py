"""Runtime context for sublisp.

The Context holds two string-keyed tables:

- globals: identifier name -> bound Token. Filled with the builtins at startup
  and mutated only by the `let` form; bindings live for the whole session.
- locals: rendered text of an already-evaluated expression -> its result. This
  is a per-turn memoization cache, not a lexical scope. The interpreter clears
  it after every top-level input; the evaluator never does.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from sublisp.types.token import Token


class Context:
    """Global symbol table plus the per-turn evaluation cache."""

    __slots__ = ("globals", "locals")

    def __init__(self):
        self.globals: dict[str, Token] = {}
        self.locals: dict[str, Token] = {}

    def get(self, name: str) -> Optional[Token]:
        """Return the global bound to `name`, or None when unbound."""
        return self.globals.get(str(name))

    def insert(self, name: str, value: Token) -> None:
        """Bind `name` to `value`; an existing binding is replaced."""
        self.globals[str(name)] = value

    def update(self, mapping: dict[str, Token]) -> None:
        """Bulk-insert a mapping of name -> value."""
        for k, v in mapping.items():
            self.insert(k, v)

    def get_local(self, key: str) -> Optional[Token]:
        return self.locals.get(key)

    def insert_local(self, key: str, value: Token) -> None:
        self.locals[key] = value

    def clear_locals(self) -> None:
        self.locals.clear()

    def names(self) -> list[str]:
        return sorted(self.globals)

    def __contains__(self, name) -> bool:
        return str(name) in self.globals

    def _write_table(self, buffer: StringIO, table: dict[str, Token]) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in table.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_table(buffer, self.globals)
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Context globals=")
            self._write_table(buffer, self.globals)
            buffer.write(" locals=")
            self._write_table(buffer, self.locals)
            buffer.write(">")
            return buffer.getvalue()
