from __future__ import annotations

import logging
from typing import Mapping, Union

from algorithm_w import abstract_syntax as ast
from algorithm_w.environment import TypeEnv
from algorithm_w.fresh import NameSupply
from algorithm_w.substitution import Substitution
from algorithm_w.type_impls import (
    BOOL,
    INT,
    FunctionType,
    Scheme,
    Type,
    TypeVariable,
    free_type_vars,
    mono,
    structural_visitor,
)
from algorithm_w.unify import mgu

logger = logging.getLogger(__name__)


def generalize(env: TypeEnv, ty: Type) -> Scheme:
    """Quantify over the variables of `ty` that the environment does not mention."""
    env_vars = free_type_vars(env)
    return Scheme(tuple(v for v in type_vars_in_order(ty) if v not in env_vars), ty)


def instantiate(scheme: Scheme, supply: NameSupply) -> Type:
    subst = Substitution({v: supply.new_type_variable() for v in scheme.vars})
    return subst.apply(scheme.body)


def type_vars_in_order(ty: Type) -> list[str]:
    """Names of the type variables in `ty`, left to right, without repetitions."""
    match ty:
        case TypeVariable(name):
            return [name]
        case _:
            names = structural_visitor(ty, type_vars_in_order, lambda xs: sum(xs, []))
            return list(dict.fromkeys(names))


def infer(
    env: TypeEnv, expr: ast.Expression, supply: NameSupply
) -> tuple[Substitution, Type]:
    match expr:
        case ast.Variable(var):
            return Substitution.empty(), instantiate(env.lookup(var), supply)

        case ast.Literal(ast.IntLiteral()):
            return Substitution.empty(), INT

        case ast.Literal(ast.BoolLiteral()):
            return Substitution.empty(), BOOL

        case ast.Abstraction(var, body):
            tv = supply.new_type_variable()
            env_ = env.remove(var).extend(var, mono(tv))
            s1, t1 = infer(env_, body, supply)
            return s1, FunctionType(s1.apply(tv), t1)

        case ast.Application(fun, arg):
            tv = supply.new_type_variable()
            s1, t1 = infer(env, fun, supply)
            s2, t2 = infer(s1.apply(env), arg, supply)
            s3 = mgu(s2.apply(t1), FunctionType(t2, tv))
            return s3.compose(s2.compose(s1)), s3.apply(tv)

        case ast.Let(var, val, body):
            s1, t1 = infer(env, val, supply)
            env_ = env.remove(var)
            scheme = generalize(s1.apply(env_), t1)
            logger.debug("let %s : %s", var, scheme)
            env__ = env_.extend(var, scheme)
            s2, t2 = infer(s1.apply(env__), body, supply)
            return s1.compose(s2), t2

        case _:
            raise NotImplementedError(expr)


def infer_with_substitution(
    env: Union[TypeEnv, Mapping[str, Scheme]], expr: ast.Expression
) -> tuple[Substitution, Type]:
    if not isinstance(env, TypeEnv):
        env = TypeEnv(env)
    subst, ty = infer(env, expr, NameSupply())
    return subst, subst.apply(ty)


def type_inference(
    env: Union[TypeEnv, Mapping[str, Scheme]], expr: ast.Expression
) -> Type:
    """Most general type of `expr` under `env`.

    Raises an InferenceError if the expression has no type.

    Fresh type variables are named a, b, c, ... so free type variables in `env`
    should use other names (e.g. with digits) to avoid clashing with them."""
    _, ty = infer_with_substitution(env, expr)
    return ty
