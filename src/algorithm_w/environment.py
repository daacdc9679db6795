from __future__ import annotations

from typing import Iterator, Mapping, Optional

from algorithm_w.errors import UnboundError
from algorithm_w.substitution import Substitution, substitute
from algorithm_w.type_impls import Scheme, free_type_vars


class TypeEnv:
    """Maps term variables to type schemes. Operations return new environments."""

    def __init__(self, bindings: Optional[Mapping[str, Scheme]] = None):
        self.bindings: dict[str, Scheme] = dict(bindings or {})

    def lookup(self, var: str) -> Scheme:
        try:
            return self.bindings[var]
        except KeyError:
            raise UnboundError(var) from None

    def extend(self, var: str, scheme: Scheme) -> TypeEnv:
        bindings = dict(self.bindings)
        bindings[var] = scheme
        return TypeEnv(bindings)

    def remove(self, var: str) -> TypeEnv:
        bindings = dict(self.bindings)
        bindings.pop(var, None)
        return TypeEnv(bindings)

    def apply(self, subst: Substitution) -> TypeEnv:
        return subst.apply(self)

    def __contains__(self, var: str) -> bool:
        return var in self.bindings

    def __iter__(self) -> Iterator[str]:
        return iter(self.bindings)

    def __len__(self) -> int:
        return len(self.bindings)

    def __eq__(self, other):
        if not isinstance(other, TypeEnv):
            return NotImplemented
        return self.bindings == other.bindings

    def __repr__(self):
        return f"TypeEnv({self.bindings!r})"

    def __str__(self):
        return ", ".join(f"{k} : {v}" for k, v in self.bindings.items())


@substitute.register
def _(struc: TypeEnv, subst: Substitution) -> TypeEnv:
    return TypeEnv({k: substitute(v, subst) for k, v in struc.bindings.items()})


@free_type_vars.register
def _(x: TypeEnv) -> frozenset[str]:
    return free_type_vars(list(x.bindings.values()))


def empty_tenv() -> TypeEnv:
    return TypeEnv()
