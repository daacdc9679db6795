import io

import pytest

from algorithm_w import abstract_syntax as ast
from algorithm_w.main import build_parser, main, show_inference

EXPECTED_OUTPUT = """\
let id = \\x -> x in id :: b -> b
let id = \\x -> x in id id :: d -> d
let id = \\x -> let y = x in y in id id :: d -> d
let id = \\x -> let y = x in y in id id 2 :: Int
let id = \\x -> x x in id
error: occurs check fails: a vs. a -> b
\\m -> let y = m in let x = y True in x :: (Bool -> b) -> b
"""


def test_examples(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == EXPECTED_OUTPUT


def test_show_inference_reports_errors(capsys):
    show_inference(ast.Variable("x"))
    assert capsys.readouterr().out == "x\nerror: unbound variable: x\n"


def test_interactive(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("\\x -> x\n\nlet = 1\nf\n"))
    assert main(["-i"]) == 0
    out = capsys.readouterr().out
    assert "\\x -> x :: a -> a\n" in out
    assert "ParseException" in out
    assert "f\nerror: unbound variable: f\n" in out


def test_long_flags(capsys, monkeypatch):
    args = build_parser().parse_args(["--interactive", "--verbose"])
    assert args.interactive and args.verbose

    monkeypatch.setattr("sys.stdin", io.StringIO("1\n"))
    assert main(["--interactive"]) == 0
    assert "1 :: Int\n" in capsys.readouterr().out


def test_unknown_flag_is_rejected(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--bogus"])
    assert exc.value.code == 2
    assert "--bogus" in capsys.readouterr().err
