"""The same factorial, written the way programmers write it at different stages."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from functools import cached_property
import logging
import math
from typing import Protocol, Union

from factorials.lib import validate
from factorials.parallel import parallel_factorial
from factorials.sequence import channel_factorial, nth_factorial

logger = logging.getLogger(__name__)

StyleFn = Callable[[int], int]


def junior(n: int) -> int:
    validate(n)
    result = 1
    i = 1
    while i <= n:
        result = result * i
        i = i + 1
    return result


def functional(n: int) -> int:
    """Linear recursion. Inputs deeper than the recursion limit raise ``RecursionError``."""
    validate(n)
    return 1 if n == 0 else n * functional(n - 1)


@dataclass(frozen=True)
class Integer:
    """Boundary input that resolved to a usable integer."""

    n: int


@dataclass(frozen=True)
class Other:
    """Boundary input of any other type."""

    value: object


Resolved = Union[Integer, Other]


def resolve(value: object) -> Resolved:
    """
    Classify an arbitrary value once, at the boundary.

    Only real ints qualify: ``bool`` and integral floats such as ``5.0`` are ``Other``.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return Integer(value)
    return Other(value)


def generic(value: object) -> int:
    """
    Accept anything, resolve it into a tagged variant, then compute.

    Raises:
        TypeError: If the value is not an int.
        InvalidFactorialError: If the value is a negative int.
    """
    resolved = resolve(value)
    if isinstance(resolved, Other):
        raise TypeError(f"cannot compute the factorial of {type(resolved.value).__name__}")
    return junior(resolved.n)


def threaded(n: int) -> int:
    return parallel_factorial(n, workers=2)


def channel(n: int) -> int:
    return channel_factorial(n)


class FactorialCalculator(Protocol):
    """Anything that can turn n into n!."""

    def __call__(self, n: int) -> int: ...


@dataclass(frozen=True)
class Factorial:
    """
    Immutable value object wrapping n and its factorial.

    The value is computed on first access and cached on the instance. Nothing is
    mutated across recursive calls.

    Attributes:
        n: The input value, validated on construction.
        calculator: Strategy used to compute the value.
    """

    n: int
    calculator: FactorialCalculator = field(default=junior, compare=False, repr=False)

    def __post_init__(self) -> None:
        validate(self.n)

    @cached_property
    def value(self) -> int:
        return self.calculator(self.n)

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True)
class FactorialService:
    """Creates ``Factorial`` value objects that share one calculator strategy."""

    calculator: FactorialCalculator = junior

    def create(self, n: int) -> Factorial:
        return Factorial(n, self.calculator)

    def compute(self, n: int) -> int:
        return self.create(n).value


def enterprise(n: int) -> int:
    return FactorialService().compute(n)


def senior(n: int) -> int:
    validate(n)
    return math.prod(range(1, n + 1))


def idiomatic(n: int) -> int:
    return nth_factorial(n)


STYLES: dict[str, StyleFn] = {
    "junior": junior,
    "functional": functional,
    "generic": generic,
    "threaded": threaded,
    "channel": channel,
    "enterprise": enterprise,
    "senior": senior,
    "idiomatic": idiomatic,
}


def get_style(name: str) -> StyleFn:
    """
    Look up a style by name.

    Raises:
        KeyError: If no style has that name. The message lists the available names.
    """
    try:
        return STYLES[name]
    except KeyError:
        raise KeyError(f"unknown style {name!r}, expected one of: {', '.join(STYLES)}") from None


def compare(n: int) -> dict[str, int]:
    """Run every style on n and return the result of each, keyed by style name."""
    results = {}
    for name, fn in STYLES.items():
        logger.debug("computing fact(%d) with the %s style", n, name)
        results[name] = fn(n)
    return results
