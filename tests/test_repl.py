from sublisp import config
from sublisp.repl import REPL


def make_repl(tmp_path, lines):
    inputs = iter(lines)
    outputs = []

    def reader(prompt):
        try:
            return next(inputs)
        except StopIteration:
            raise EOFError

    repl = REPL(history=tmp_path / "session.lisp", prompt="* ", reader=reader, writer=outputs.append)
    return repl, outputs


def test_session_prints_results_and_errors_until_quit(tmp_path):
    repl, outputs = make_repl(tmp_path, ["(+ 1 2)", "   ", "(car)", "(quit)", "(+ 5 5)"])
    repl.start()
    assert outputs == ["", "> 3\n", "error: car requires exactly 1 argument(s).", ""]
    assert (tmp_path / "session.lisp").exists()


def test_session_ends_on_eof(tmp_path):
    repl, outputs = make_repl(tmp_path, ["(let x 2)", "(* x x)"])
    repl.start()
    assert outputs == ["", "> 2\n", "> 4\n", ""]


def test_completion_offers_global_names(tmp_path):
    repl, _ = make_repl(tmp_path, [])
    assert repl.complete("co", 0) == "cond"
    assert repl.complete("co", 1) == "cons"
    assert repl.complete("co", 2) is None


# -------------------------------
# Configuration
# -------------------------------

def test_config_defaults(monkeypatch):
    for var in ("SUBLISP_HISTORY", "SUBLISP_HISTORY_LENGTH", "SUBLISP_PROMPT", "SUBLISP_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    assert config.get_history_path().name == "session.lisp"
    assert config.get_history_length() == 1000
    assert config.get_prompt() == "* "
    assert config.get_log_level() == "WARNING"


def test_config_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("SUBLISP_HISTORY", str(tmp_path / "h.lisp"))
    monkeypatch.setenv("SUBLISP_HISTORY_LENGTH", "not-a-number")
    monkeypatch.setenv("SUBLISP_PROMPT", "λ ")
    monkeypatch.setenv("SUBLISP_LOG_LEVEL", "debug")
    assert config.get_history_path() == tmp_path / "h.lisp"
    assert config.get_history_length() == 1000
    assert config.get_prompt() == "λ "
    assert config.get_log_level() == "DEBUG"


def test_repl_uses_configured_history(monkeypatch, tmp_path):
    monkeypatch.setenv("SUBLISP_HISTORY", str(tmp_path / "other.lisp"))
    assert REPL().history == tmp_path / "other.lisp"
