import math

import pytest

from factorials.lib import InvalidFactorialError
from factorials.styles import (
    STYLES,
    Factorial,
    FactorialService,
    Integer,
    Other,
    compare,
    functional,
    generic,
    get_style,
    resolve,
    senior,
)

STYLE_NAMES = list(STYLES)


@pytest.mark.parametrize("name", STYLE_NAMES)
@pytest.mark.parametrize("n", range(13))
def test_style_matches_closed_form(name: str, n: int) -> None:
    assert get_style(name)(n) == math.prod(range(1, n + 1))


# fmt: off
@pytest.mark.parametrize('n,expected', [
    (0, 1),
    (1, 1),
    (5, 120),
    (10, 3628800),
])
# fmt: on
@pytest.mark.parametrize("name", STYLE_NAMES)
def test_style_known_values(name: str, n: int, expected: int) -> None:
    assert STYLES[name](n) == expected


@pytest.mark.parametrize("name", STYLE_NAMES)
def test_style_recurrence_and_monotonicity(name: str) -> None:
    fn = STYLES[name]
    for n in range(1, 15):
        assert fn(n) == n * fn(n - 1)
        assert fn(n) >= fn(n - 1)


@pytest.mark.parametrize("name", STYLE_NAMES)
def test_style_is_pure(name: str) -> None:
    fn = STYLES[name]
    assert fn(9) == fn(9)


@pytest.mark.parametrize("name", STYLE_NAMES)
def test_style_rejects_negative(name: str) -> None:
    with pytest.raises(InvalidFactorialError):
        STYLES[name](-1)


def test_style_order() -> None:
    assert STYLE_NAMES == [
        "junior",
        "functional",
        "generic",
        "threaded",
        "channel",
        "enterprise",
        "senior",
        "idiomatic",
    ]


def test_get_style_unknown() -> None:
    with pytest.raises(KeyError, match="junior"):
        get_style("intern")


def test_compare_agrees() -> None:
    results = compare(7)
    assert set(results) == set(STYLES)
    assert set(results.values()) == {5040}


def test_resolve() -> None:
    assert resolve(4) == Integer(4)
    assert resolve(4.0) == Other(4.0)
    assert resolve(True) == Other(True)
    assert resolve("4") == Other("4")


@pytest.mark.parametrize("value", [4.0, "4", None, [4], False])
def test_generic_rejects_other(value: object) -> None:
    with pytest.raises(TypeError):
        generic(value)


def test_functional_recursion_limit() -> None:
    with pytest.raises(RecursionError):
        functional(100_000)


def test_factorial_value_object() -> None:
    value = Factorial(6)
    assert value.value == 720
    assert int(value) == 720
    assert value == Factorial(6, senior)
    with pytest.raises(AttributeError):
        value.n = 7  # type: ignore[misc]


def test_factorial_value_object_caches() -> None:
    calls = []

    def counting(n: int) -> int:
        calls.append(n)
        return senior(n)

    value = Factorial(5, counting)
    assert value.value == 120
    assert value.value == 120
    assert calls == [5]


def test_factorial_value_object_rejects_negative() -> None:
    with pytest.raises(InvalidFactorialError):
        Factorial(-2)


def test_factorial_service() -> None:
    service = FactorialService(senior)
    assert service.create(4) == Factorial(4)
    assert service.compute(4) == 24
