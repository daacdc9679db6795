import logging

from algorithm_w.errors import NoOccurrenceViolation, UnificationFailure
from algorithm_w.substitution import Substitution
from algorithm_w.type_impls import (
    BoolType,
    FunctionType,
    IntType,
    Type,
    TypeVariable,
    free_type_vars,
)

logger = logging.getLogger(__name__)


def mgu(a: Type, b: Type) -> Substitution:
    """Most general unifier of two types."""
    match a, b:
        case FunctionType(l, r), FunctionType(l_, r_):
            s1 = mgu(l, l_)
            s2 = mgu(s1.apply(r), s1.apply(r_))
            return s2.compose(s1)
        case TypeVariable(u), t:
            return bind_variable(u, t)
        case t, TypeVariable(u):
            return bind_variable(u, t)
        case IntType(), IntType():
            return Substitution.empty()
        case BoolType(), BoolType():
            return Substitution.empty()
        case _:
            raise UnificationFailure(a, b)


def bind_variable(var: str, struc: Type) -> Substitution:
    if struc == TypeVariable(var):
        return Substitution.empty()
    if occurs(var, struc):
        raise NoOccurrenceViolation(var, struc)
    logger.debug("bind %s := %s", var, struc)
    return Substitution.singleton(var, struc)


def occurs(var: str, struc: Type) -> bool:
    return var in free_type_vars(struc)
