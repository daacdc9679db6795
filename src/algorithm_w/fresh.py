import string

from algorithm_w.type_impls import TypeVariable


class NameSupply:
    """Hands out type variable names a, b, ..., z, ba, bb, ...

    One supply belongs to one top-level inference run."""

    def __init__(self, counter: int = 0):
        self.counter = counter

    def new_type_variable(self) -> TypeVariable:
        name = encode_name(self.counter)
        self.counter += 1
        return TypeVariable(name)


def encode_name(n: int) -> str:
    """Positional base-26 with 'a' as the zero digit, most significant digit first."""
    if n < 0:
        raise ValueError(n)
    digits = string.ascii_lowercase[n % 26]
    n //= 26
    while n > 0:
        digits = string.ascii_lowercase[n % 26] + digits
        n //= 26
    return digits
