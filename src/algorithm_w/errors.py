from __future__ import annotations

import dataclasses

from algorithm_w.type_impls import Type


class InferenceError(Exception):
    """Base class of everything that makes an expression untypable."""


@dataclasses.dataclass
class UnboundError(InferenceError):
    var: str

    def __str__(self):
        return f"unbound variable: {self.var}"


@dataclasses.dataclass
class UnificationFailure(InferenceError):
    left: Type
    right: Type

    def __str__(self):
        return f"types do not unify: {self.left} vs. {self.right}"


@dataclasses.dataclass
class NoOccurrenceViolation(InferenceError):
    var: str
    struc: Type

    def __str__(self):
        return f"occurs check fails: {self.var} vs. {self.struc}"
