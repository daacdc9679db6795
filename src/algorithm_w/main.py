import argparse
import logging
import sys
from typing import Optional

import pyparsing as pp

from algorithm_w import abstract_syntax as ast, parser
from algorithm_w.environment import TypeEnv, empty_tenv
from algorithm_w.errors import InferenceError
from algorithm_w.type_checker import type_inference

_id_abs = ast.Abstraction("x", ast.Variable("x"))
_id_let_abs = ast.Abstraction(
    "x", ast.Let("y", ast.Variable("x"), ast.Variable("y"))
)
_id_id = ast.Application(ast.Variable("id"), ast.Variable("id"))

EXAMPLES = [
    ast.Let("id", _id_abs, ast.Variable("id")),
    ast.Let("id", _id_abs, _id_id),
    ast.Let("id", _id_let_abs, _id_id),
    ast.Let("id", _id_let_abs, ast.Application(_id_id, ast.integer(2))),
    ast.Let(
        "id",
        ast.Abstraction("x", ast.Application(ast.Variable("x"), ast.Variable("x"))),
        ast.Variable("id"),
    ),
    ast.Abstraction(
        "m",
        ast.Let(
            "y",
            ast.Variable("m"),
            ast.Let(
                "x", ast.Application(ast.Variable("y"), ast.TRUE), ast.Variable("x")
            ),
        ),
    ),
]


def show_inference(expr: ast.Expression, env: Optional[TypeEnv] = None):
    try:
        ty = type_inference(empty_tenv() if env is None else env, expr)
        print(f"{expr} :: {ty}")
    except InferenceError as e:
        print(f"{expr}\nerror: {e}")


def repl(env: TypeEnv):
    while True:
        try:
            src = input("> ")
        except EOFError:
            break
        if not src.strip():
            continue
        try:
            expr = parser.parse_expr(src)
        except pp.ParseBaseException as e:
            print(f"{type(e).__name__}: {e}")
            continue
        show_inference(expr, env)


def build_parser() -> argparse.ArgumentParser:
    arg_parser = argparse.ArgumentParser(
        prog="algorithm-w",
        description="Infer types of the sample expressions, then optionally read more from stdin.",
    )
    arg_parser.add_argument(
        "-i", "--interactive", action="store_true", help="read expressions from stdin"
    )
    arg_parser.add_argument(
        "-v", "--verbose", action="store_true", help="log unifier and let decisions"
    )
    return arg_parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    for expr in EXAMPLES:
        show_inference(expr)

    if args.interactive:
        repl(empty_tenv())
    return 0


if __name__ == "__main__":
    sys.exit(main())
