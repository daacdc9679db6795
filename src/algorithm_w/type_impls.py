from __future__ import annotations

import abc
import dataclasses
import functools
from typing import Any, Callable

class Type(abc.ABC):
    pass


@dataclasses.dataclass(frozen=True)
class TypeVariable(Type):
    name: str

    def __str__(self):
        return self.name


@dataclasses.dataclass(frozen=True)
class IntType(Type):
    def __str__(self):
        return "Int"


@dataclasses.dataclass(frozen=True)
class BoolType(Type):
    def __str__(self):
        return "Bool"


@dataclasses.dataclass(frozen=True)
class FunctionType(Type):
    targ: Type
    tret: Type

    def __str__(self):
        match self.targ:
            case FunctionType():
                return f"({self.targ}) -> {self.tret}"
            case _:
                return f"{self.targ} -> {self.tret}"


@functools.singledispatch
def structural_visitor(struc: Type, visitor: Callable[[Type], Any], reducer=None) -> Any:
    """Visits the immediate child types of `struc`.

    Without a reducer, a type of the same kind is rebuilt from the visitor results.
    With a reducer, the reducer gets an iterator over the visitor results instead.
    Variables and base types have no children.
    """
    if reducer is None:
        return struc
    return reducer(iter(()))


@structural_visitor.register
def _(struc: FunctionType, visitor: Callable[[Type], Any], reducer=None) -> Any:
    if reducer is None:
        return FunctionType(visitor(struc.targ), visitor(struc.tret))
    return reducer(visitor(x) for x in (struc.targ, struc.tret))


@dataclasses.dataclass(frozen=True)
class Scheme:
    """A type quantified over the type variables named in `vars`.

    All other variables of the body are free and shared with the context."""

    vars: tuple[str, ...]
    body: Type

    def __str__(self):
        if not self.vars:
            return str(self.body)
        return f"forall {' '.join(self.vars)}. {self.body}"


def mono(ty: Type) -> Scheme:
    return Scheme((), ty)


@functools.singledispatch
def free_type_vars(x) -> frozenset[str]:
    raise NotImplementedError(x)


@free_type_vars.register
def _(x: Type) -> frozenset[str]:
    match x:
        case TypeVariable(name):
            return frozenset({name})
        case _:
            return structural_visitor(x, free_type_vars, _union_all)


@free_type_vars.register
def _(x: Scheme) -> frozenset[str]:
    return free_type_vars(x.body) - set(x.vars)


@free_type_vars.register
def _(x: list) -> frozenset[str]:
    return _union_all(free_type_vars(item) for item in x)


def _union_all(sets) -> frozenset[str]:
    return frozenset().union(*sets)


INT = IntType()
BOOL = BoolType()
