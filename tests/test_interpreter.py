import io
import json

import pytest

from mal import config
from mal.errors import MalArityError, MalEmptyInput, MalUnboundSymbol
from mal.interpreter import Interpreter
from mal.repl import main, repl
from mal.repl_server import ReplServer
from mal.types.nil import Nil
from mal.types.symbol import Symbol


def _lines(*lines):
    """input() replacement feeding the given lines, then EOF."""
    it = iter(lines)

    def _input(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return _input


# -------------------------------
# Interpreter
# -------------------------------

def test_bootstrap_not(interp):
    assert interp.eval("(not false)") is True
    assert interp.eval("(not nil)") is True
    assert interp.eval("(not 0)") is False


def test_eval_reads_a_single_form(interp):
    assert interp.eval("(def! a 1) (def! a 2)") == 1
    assert interp.eval("a") == 1


def test_empty_input(interp):
    with pytest.raises(MalEmptyInput):
        interp.eval("   ")


def test_rep_renders_readably(interp):
    assert interp.rep('(str "a" "b")') == '"ab"'
    assert interp.rep("(list 1 nil true)") == "(1 nil true)"


def test_eval_builtin_uses_root_env(interp):
    assert interp.eval("(eval (list '+ 1 2))") == 3
    assert interp.eval("(let* (x 1) (eval '(def! from-eval 5)))") == 5
    assert interp.eval("from-eval") == 5
    with pytest.raises(MalArityError):
        interp.eval("(eval)")


def test_eval_of_read_string(interp):
    assert interp.eval('(eval (read-string "(* 6 7)"))') == 42


def test_error_isolation(interp):
    with pytest.raises(MalUnboundSymbol):
        interp.eval("(undefined-symbol)")
    assert interp.eval("(def! after 3)") == 3
    assert interp.eval("after") == 3


def test_failed_def_leaves_binding_untouched(interp):
    interp.eval("(def! keep 1)")
    with pytest.raises(MalUnboundSymbol):
        interp.eval("(def! keep (+ 1 missing))")
    assert interp.eval("keep") == 1


def test_string_prelude():
    itp = Interpreter(prelude="(def! x 10) (def! double (fn* (n) (* 2 n)))")
    assert itp.eval("(double x)") == 20


def test_default_prelude(interp_prelude):
    assert interp_prelude.eval("(inc 1)") == 2
    assert interp_prelude.eval("(dec 1)") == 0
    assert interp_prelude.eval("(when true 1 2)") == 2
    assert interp_prelude.eval("(when false 1)") is Nil
    assert interp_prelude.eval("(unless false 3)") == 3


def test_load_file(interp_prelude, tmp_path):
    src = tmp_path / "lib.mal"
    src.write_text(
        ";; a library\n(def! square (fn* (x) (* x x)))\n(def! nine (square 3)) ; trailing comment",
        encoding="utf-8",
    )
    assert interp_prelude.eval(f'(load-file "{src}")') is Nil
    assert interp_prelude.eval("nine") == 9


def test_prelude_path_from_environment(monkeypatch, tmp_path):
    (tmp_path / "b.mal").write_text("(def! order (list order 2))", encoding="utf-8")
    (tmp_path / "a.mal").write_text("(def! order 1)", encoding="utf-8")
    monkeypatch.setenv("MAL_PRELUDE_PATH", str(tmp_path))
    itp = Interpreter()
    assert itp.eval("order") == [1, 2]
    assert itp.env.find(Symbol("inc")) is None


def test_missing_prelude_file(monkeypatch, tmp_path):
    monkeypatch.setenv("MAL_PRELUDE_PATH", str(tmp_path / "nope.mal"))
    with pytest.raises(FileNotFoundError):
        Interpreter()


def test_config_defaults(monkeypatch):
    for var in ("MAL_PROMPT", "MAL_LOG_LEVEL", "MAL_REPL_HOST", "MAL_REPL_PORT"):
        monkeypatch.delenv(var, raising=False)
    assert config.get_prompt() == "user> "
    assert config.get_log_level() == "WARNING"
    assert config.get_repl_address() == ("127.0.0.1", 8765)
    monkeypatch.setenv("MAL_REPL_PORT", "9000")
    monkeypatch.setenv("MAL_LOG_LEVEL", "debug")
    assert config.get_repl_address() == ("127.0.0.1", 9000)
    assert config.get_log_level() == "DEBUG"


# -------------------------------
# REPL
# -------------------------------

def test_repl_prints_results_and_survives_errors(interp):
    out = io.StringIO()
    repl(
        interp,
        input_fn=_lines("(def! a 2)", "(undefined-symbol)", "", "; comment", "1" * 5000, "(* a 3)", "(1"),
        output=out,
    )
    lines = out.getvalue().splitlines()
    assert lines[0] == "2"
    assert lines[1].startswith("Error: ")
    assert "undefined-symbol" in lines[1]
    assert lines[2].startswith("Error: Number out of range")
    assert lines[3] == "6"
    assert lines[4].startswith("Error: ")
    assert len(lines) == 5


def test_repl_reports_empty_read_inside_code(interp):
    out = io.StringIO()
    repl(
        interp,
        input_fn=_lines(
            '(read-string "")', "  ;; nothing here", '(eval (read-string ";x"))', "(+ 1 2)",
        ),
        output=out,
    )
    lines = out.getvalue().splitlines()
    assert len(lines) == 3
    assert lines[0].startswith("Error: ")
    assert lines[1].startswith("Error: ")
    assert lines[2] == "3"


def test_repl_uses_prompt(interp):
    prompts = []

    def _input(prompt):
        prompts.append(prompt)
        raise EOFError

    repl(interp, input_fn=_input, output=io.StringIO(), prompt="mal> ")
    assert prompts == ["mal> "]


def test_main_runs_script(tmp_path, capsys):
    script = tmp_path / "script.mal"
    script.write_text('(println "hello" (inc 41))', encoding="utf-8")
    assert main([str(script)]) == 0
    assert capsys.readouterr().out == "hello 42\n"


def test_main_reports_script_errors(tmp_path):
    script = tmp_path / "bad.mal"
    script.write_text("(undefined-symbol)", encoding="utf-8")
    assert main([str(script)]) == 1


# -------------------------------
# REPL server
# -------------------------------

@pytest.fixture
def server(interp):
    return ReplServer(host="127.0.0.1", port=0, interp=interp)


def _request(server, payload):
    return server.handle_request(json.dumps(payload).encode("utf-8"))


def test_server_eval_keeps_session_state(server):
    assert _request(server, {"cmd": "eval", "code": "(def! a 4)"}) == {"ok": True, "result": "4"}
    assert _request(server, {"cmd": "eval", "code": '(str "a" a)'}) == {"ok": True, "result": '"a4"'}


def test_server_reports_errors(server):
    resp = _request(server, {"cmd": "eval", "code": "(nope)"})
    assert resp["ok"] is False
    assert "nope" in resp["error"]


def test_server_rejects_bad_requests(server):
    assert server.handle_request(b"not json")["ok"] is False
    assert _request(server, {"cmd": "shutdown"}) == {"ok": False, "error": "Unknown cmd: shutdown"}
    assert _request(server, {"cmd": "eval", "code": 5})["ok"] is False
