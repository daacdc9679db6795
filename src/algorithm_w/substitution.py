from __future__ import annotations

import functools
from typing import Any, Optional, Iterator

from algorithm_w.type_impls import Type, TypeVariable, Scheme, structural_visitor


class Substitution:
    """Finite mapping from type variable names to types."""

    def __init__(self, subs: Optional[dict[str, Type]] = None):
        self.subs = dict(subs or {})

    @staticmethod
    def empty() -> Substitution:
        return Substitution()

    @staticmethod
    def singleton(var: str, ty: Type) -> Substitution:
        return Substitution({var: ty})

    def apply(self, struc: Any) -> Any:
        if not self.subs:
            return struc
        return substitute(struc, self)

    def compose(self, other: Substitution) -> Substitution:
        """Substitution that behaves like applying `other` first, then `self`.

        Bindings of `self` win over those of `other` on the same variable."""
        new_subs = {v: self.apply(t) for v, t in other.subs.items()}
        new_subs.update(self.subs)
        return Substitution(new_subs)

    def get(self, var: str, default: Optional[Type] = None) -> Optional[Type]:
        return self.subs.get(var, default)

    def __contains__(self, var: str) -> bool:
        return var in self.subs

    def __iter__(self) -> Iterator[str]:
        return iter(self.subs)

    def __len__(self) -> int:
        return len(self.subs)

    def __eq__(self, other):
        if not isinstance(other, Substitution):
            return NotImplemented
        return self.subs == other.subs

    def __repr__(self):
        return f"Substitution({self.subs!r})"

    def __str__(self):
        items = ", ".join(f"{v}: {self.subs[v]}" for v in sorted(self.subs))
        return "{" + items + "}"


def empty() -> Substitution:
    return Substitution.empty()


def compose(s1: Substitution, s2: Substitution) -> Substitution:
    return s1.compose(s2)


@functools.singledispatch
def substitute(struc: Any, subst: Substitution) -> Any:
    raise NotImplementedError(struc)


@substitute.register
def _(struc: Type, subst: Substitution) -> Type:
    match struc:
        case TypeVariable(name):
            return subst.get(name, struc)
        case _:
            return structural_visitor(struc, lambda x: substitute(x, subst))


@substitute.register
def _(struc: Scheme, subst: Substitution) -> Scheme:
    # quantified variables are local to the scheme and stay untouched
    inner = Substitution({v: t for v, t in subst.subs.items() if v not in struc.vars})
    return Scheme(struc.vars, inner.apply(struc.body))


@substitute.register
def _(struc: list, subst: Substitution) -> list:
    return [substitute(x, subst) for x in struc]
