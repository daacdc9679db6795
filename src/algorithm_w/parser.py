import functools
import string

import pyparsing as pp

from algorithm_w import abstract_syntax as ast
from algorithm_w import type_impls as t


def parse_expr(src: str) -> ast.Expression:
    return expr.parse_string(src, True)[0]


def parse_type(src: str) -> t.Type:
    return type_expr.parse_string(src, True)[0]


def parse_scheme(src: str) -> t.Scheme:
    return scheme.parse_string(src, True)[0]


### Expressions

_ident_init_chars = string.ascii_lowercase + "_"
_ident_body_chars = _ident_init_chars + pp.nums + string.ascii_uppercase + "'"

# keywords end where identifiers do, so `in'` is an identifier
kw = functools.partial(pp.Keyword, ident_chars=_ident_body_chars)

keyword = pp.MatchFirst(
    map(kw, ["let", "in", "fun", "forall", "True", "False", "Int", "Bool"])
)
ident = ~keyword + pp.Word(_ident_init_chars, _ident_body_chars)

expr = pp.Forward()

boolean = (kw("True") | kw("False")).set_parse_action(
    lambda t: ast.boolean(t[0] == "True")
)

integer = pp.Regex(r"-?\d+").set_parse_action(lambda t: ast.integer(int(t[0])))

varref = ident.copy().set_parse_action(lambda t: ast.Variable(t[0]))

function = (
    (pp.Suppress("\\") | pp.Suppress(kw("fun")))
    + ident
    + pp.Suppress("->")
    + expr
).set_parse_action(lambda t: ast.Abstraction(t[0], t[1]))

let = (
    pp.Suppress(kw("let"))
    + ident
    + pp.Suppress("=")
    + expr
    + pp.Suppress(kw("in"))
    + expr
).set_parse_action(lambda t: ast.Let(t[0], t[1], t[2]))

simple_expr = boolean | integer | varref | (pp.Suppress("(") + expr + pp.Suppress(")"))

call_expr = pp.OneOrMore(simple_expr).set_parse_action(
    lambda t: functools.reduce(ast.Application, t[1:], t[0])
)

expr <<= function | let | call_expr


### Types

type_expr = pp.Forward()

type_var = pp.Word(string.ascii_lowercase, string.ascii_lowercase + pp.nums)

simple_type = (
    kw("Int").set_parse_action(lambda _: t.INT)
    | kw("Bool").set_parse_action(lambda _: t.BOOL)
    | (~keyword + type_var).set_parse_action(lambda tok: t.TypeVariable(tok[0]))
    | (pp.Suppress("(") + type_expr + pp.Suppress(")"))
)

type_expr <<= (simple_type + pp.Optional(pp.Suppress("->") + type_expr)).set_parse_action(
    lambda tok: t.FunctionType(tok[0], tok[1]) if len(tok) == 2 else tok[0]
)

scheme = (
    pp.Optional(
        pp.Suppress(kw("forall"))
        + pp.Group(pp.OneOrMore(~keyword + type_var))
        + pp.Suppress(".")
    )
    + type_expr
).set_parse_action(
    lambda tok: t.Scheme(tuple(tok[0]), tok[1]) if len(tok) == 2 else t.mono(tok[0])
)
