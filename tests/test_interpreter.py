import io

import pytest

from malpy import errors
from malpy.interpreter import Interpreter
from malpy.repl import REPL, main
from malpy.types.environment import NativeRegistry
from malpy.types.nil import Nil


def test_eval_returns_last_value(interp):
    assert interp.eval("(def! a 2) (* a 21)") == 42


def test_eval_empty_input_is_nil(interp):
    assert interp.eval("") is Nil
    assert interp.eval("; only a comment") is Nil


def test_definitions_persist_between_calls(interp):
    interp.eval("(def! inc (fn* (n) (+ n 1)))")
    assert interp.eval("(inc 41)") == 42


def test_definitions_survive_errors(interp):
    with pytest.raises(errors.SymbolNotFound):
        interp.eval("(do (def! a 1) (boom))")
    assert interp.eval("a") == 1


def test_rep_prints_first_form_only(interp):
    assert interp.rep("(+ 1 2) (def! never 1)") == "3"
    with pytest.raises(errors.SymbolNotFound):
        interp.eval("never")


def test_rep_prints_values(interp):
    assert interp.rep('(list 1 "two" nil true)') == '(1 "two" nil true)'
    assert interp.rep("") == "nil"


def test_custom_registry():
    interp = Interpreter(NativeRegistry({"twice": lambda env, args: args[0] * 2}))
    assert interp.eval("(twice 21)") == 42
    with pytest.raises(errors.SymbolNotFound):
        interp.eval("(+ 1 2)")


def test_interpreter_accepts_only_a_registry():
    with pytest.raises(TypeError):
        Interpreter(None, lambda expr, env: 0)


@pytest.mark.parametrize(
    "source,complete",
    [
        ("(+ 1 2)", True),
        ("", True),
        ("(+ 1", False),
        ("(let* (a 1)\n", False),
        ("[1 {2", False),
        ('"open', True),
        (")", True),
        ('(a "b\\q")', True),
    ]
)
def test_is_complete(source, complete):
    assert Interpreter.is_complete(source) is complete


# -------------------------------
# Session loop
# -------------------------------
def _session(lines):
    feed = iter(lines)

    def fake_input(prompt):
        try:
            return next(feed)
        except StopIteration:
            raise EOFError

    out = io.StringIO()
    REPL(Interpreter(), input_fn=fake_input, out=out).run()
    # the loop ends the last prompt line on EOF
    return out.getvalue().rstrip("\n").splitlines()


def test_session_prints_results():
    assert _session(["(+ 1 2)", "(def! x 5)", "(* x x)"]) == ["3", "5", "25"]


def test_session_reports_errors_and_continues():
    assert _session(["(+ nope 1)", "(1 2)", '"a\\qb"', "(+ 1 1)"]) == [
        "error: symbol 'nope' not found",
        "error: '1' is not a function",
        "error: unknown escape sequence \\q",
        "2",
    ]


def test_session_joins_continuation_lines():
    assert _session(["(let* (a 1", "      b 2)", "  (+ a b))"]) == ["3"]


def test_session_skips_blank_lines():
    assert _session(["", "   ", "7"]) == ["7"]


def test_session_reports_unterminated_input_at_eof():
    assert _session(["(+ 1"]) == ["error: unexpected end of input"]


def test_session_stops_on_interrupt():
    def interrupted(prompt):
        raise KeyboardInterrupt

    out = io.StringIO()
    REPL(Interpreter(), input_fn=interrupted, out=out).run()
    assert out.getvalue() == "\n"


def test_completion_candidates():
    interp = Interpreter()
    interp.eval("(def! counter 1)")
    repl = REPL(interp)
    assert repl.complete("cou", 0) == "count"
    assert repl.complete("cou", 1) == "counter"
    assert repl.complete("cou", 2) is None
    assert repl.complete("le", 0) == "let*"


def test_main_runs_file(tmp_path):
    source = tmp_path / "prog.mal"
    source.write_text("(def! a 1)\n(+ a 1)\n")
    assert main([str(source)]) == 0


def test_main_reports_file_errors(tmp_path, capsys):
    source = tmp_path / "bad.mal"
    source.write_text("(+ 1 missing)")
    assert main([str(source)]) == 1
    assert "error: symbol 'missing' not found" in capsys.readouterr().err
