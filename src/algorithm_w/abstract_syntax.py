from __future__ import annotations

import abc
import dataclasses


class Expression(abc.ABC):
    pass


class LiteralValue(abc.ABC):
    pass


@dataclasses.dataclass(frozen=True)
class IntLiteral(LiteralValue):
    val: int

    def __str__(self):
        return str(self.val)


@dataclasses.dataclass(frozen=True)
class BoolLiteral(LiteralValue):
    val: bool

    def __str__(self):
        return "True" if self.val else "False"


@dataclasses.dataclass(frozen=True)
class Variable(Expression):
    var: str

    def __str__(self):
        return self.var


@dataclasses.dataclass(frozen=True)
class Literal(Expression):
    lit: LiteralValue

    def __str__(self):
        return str(self.lit)


@dataclasses.dataclass(frozen=True)
class Application(Expression):
    fun: Expression
    arg: Expression

    def __str__(self):
        match self.fun:
            case Abstraction() | Let():
                fun = f"({self.fun})"
            case _:
                fun = str(self.fun)
        match self.arg:
            case Application() | Abstraction() | Let():
                arg = f"({self.arg})"
            case _:
                arg = str(self.arg)
        return f"{fun} {arg}"


@dataclasses.dataclass(frozen=True)
class Abstraction(Expression):
    var: str
    body: Expression

    def __str__(self):
        return f"\\{self.var} -> {self.body}"


@dataclasses.dataclass(frozen=True)
class Let(Expression):
    var: str
    val: Expression
    body: Expression

    def __str__(self):
        return f"let {self.var} = {self.val} in {self.body}"


def integer(val: int) -> Literal:
    return Literal(IntLiteral(val))


def boolean(val: bool) -> Literal:
    return Literal(BoolLiteral(val))


TRUE = boolean(True)
FALSE = boolean(False)
