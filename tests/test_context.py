from sublisp.types.context import Context
from sublisp.types.token import Num, Sym, NIL


def test_globals_get_and_insert():
    ctx = Context()
    assert ctx.get("x") is None
    ctx.insert("x", Num("1"))
    assert ctx.get("x") == Num("1")
    assert "x" in ctx
    ctx.insert("x", Num("2"))
    assert ctx.get("x") == Num("2")


def test_locals_are_a_separate_cache():
    ctx = Context()
    ctx.insert("x", Num("1"))
    ctx.insert_local("(+ 1 2)", Num("3"))
    assert ctx.get_local("(+ 1 2)") == Num("3")
    assert ctx.get("(+ 1 2)") is None
    assert ctx.get_local("x") is None

    ctx.clear_locals()
    assert ctx.get_local("(+ 1 2)") is None
    assert ctx.get("x") == Num("1")


def test_names_and_views():
    ctx = Context()
    ctx.update({"b": NIL, "a": Sym("#t")})
    assert ctx.names() == ["a", "b"]
    assert str(ctx) == "{b: #nil, a: #t}"
    ctx.insert_local("k", Num("5"))
    assert repr(ctx) == "<Context globals={b: #nil, a: #t} locals={k: 5}>"
