import pytest

from algorithm_w.environment import TypeEnv, empty_tenv
from algorithm_w.errors import UnboundError
from algorithm_w.substitution import Substitution
from algorithm_w.type_impls import (
    INT,
    FunctionType,
    Scheme,
    TypeVariable,
    free_type_vars,
    mono,
)

a, b, c = map(TypeVariable, "abc")


def test_lookup():
    env = empty_tenv().extend("x", mono(INT))
    assert env.lookup("x") == mono(INT)

    with pytest.raises(UnboundError):
        env.lookup("y")


def test_extend_shadows_and_leaves_original():
    env = empty_tenv().extend("x", mono(INT))
    env2 = env.extend("x", mono(a))
    assert env2.lookup("x") == mono(a)
    assert env.lookup("x") == mono(INT)


def test_remove():
    env = TypeEnv({"x": mono(INT), "y": mono(a)})
    assert "x" not in env.remove("x")
    assert "y" in env.remove("x")
    assert "x" in env


def test_remove_absent_is_harmless():
    env = TypeEnv({"x": mono(INT)})
    assert env.remove("z") == env


def test_free_type_vars_excludes_bound_vars_per_scheme():
    env = TypeEnv(
        {
            "f": Scheme(("a",), FunctionType(a, b)),
            "y": mono(c),
            "z": mono(a),
        }
    )
    assert free_type_vars(env) == {"a", "b", "c"}
    assert free_type_vars(env.remove("z")) == {"b", "c"}


def test_apply_substitution():
    env = TypeEnv({"f": Scheme(("a",), FunctionType(a, b)), "y": mono(a)})
    subst = Substitution({"a": INT, "b": c})
    assert env.apply(subst) == TypeEnv(
        {"f": Scheme(("a",), FunctionType(a, c)), "y": mono(INT)}
    )
