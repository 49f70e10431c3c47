import logging

import pytest

from factorials.config import FactorialConfig, FactorialConfigError
from factorials.lib import FactorialError, FactorialOverflowError
from factorials.log import LOGGER_NAME, configure_logging


def test_default_config() -> None:
    config = FactorialConfig()
    assert config.style == "idiomatic"
    assert config.build_calculator()(5) == 120


def test_config_is_keyword_only() -> None:
    with pytest.raises(TypeError):
        FactorialConfig("junior")  # type: ignore[misc]


@pytest.mark.parametrize("style", ["junior", "threaded", "channel", "senior"])
def test_config_styles(style: str) -> None:
    assert FactorialConfig(style=style).build_calculator()(10) == 3628800


def test_config_threaded_pivot() -> None:
    calculator = FactorialConfig(style="threaded", pivot=3).build_calculator()
    assert calculator(7) == 5040


def test_config_threaded_workers() -> None:
    calculator = FactorialConfig(style="threaded", workers=4).build_calculator()
    assert calculator(12) == 479001600


def test_config_bits() -> None:
    calculator = FactorialConfig(style="senior", bits=64).build_calculator()
    assert calculator(20) == 2432902008176640000
    with pytest.raises(FactorialOverflowError):
        calculator(21)


# fmt: off
@pytest.mark.parametrize('kwargs', [
    {"style": "intern"},
    {"workers": 0},
    {"bits": 1},
])
# fmt: on
def test_config_invalid(kwargs: dict[str, object]) -> None:
    config = FactorialConfig(**kwargs)  # type: ignore[arg-type]
    with pytest.raises(FactorialConfigError):
        config.validate()
    with pytest.raises(FactorialError):
        config.build_calculator()


def test_configure_logging() -> None:
    logger = configure_logging("debug")
    assert logger.name == LOGGER_NAME
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1

    configure_logging(logging.INFO)
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1


def test_configure_logging_unknown_level() -> None:
    with pytest.raises(ValueError):
        configure_logging("chatty")
