"""Configuration dataclass for a factorial computation."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import partial
import logging

from factorials.lib import FactorialError, check_width
from factorials.parallel import parallel_factorial
from factorials.styles import STYLES, get_style

logger = logging.getLogger(__name__)


class FactorialConfigError(FactorialError):
    """Error generated if a configuration setting is invalid."""


@dataclass(kw_only=True, frozen=True)
class FactorialConfig:
    """
    Configuration for computing a factorial.

    Attributes:
        style: Name of the style in ``factorials.styles.STYLES``.
        workers: Fan-out for the threaded style.
        pivot: Optional explicit split point for the threaded style.
        bits: Optional signed integer width the result must fit in.
        log_level: Level name passed to ``configure_logging``.
    """

    style: str = "idiomatic"
    workers: int = 2
    pivot: int | None = None
    bits: int | None = None
    log_level: str = "WARNING"

    def validate(self) -> None:
        if self.style not in STYLES:
            raise FactorialConfigError(
                f"unknown style {self.style!r}, expected one of: {', '.join(STYLES)}"
            )
        if self.workers < 1:
            raise FactorialConfigError(f"workers must be at least 1: {self.workers}")
        if self.bits is not None and self.bits < 2:
            raise FactorialConfigError(f"bits must be at least 2: {self.bits}")

    def build_calculator(self) -> Callable[[int], int]:
        """Return a callable computing n! with the configured style and limits."""
        self.validate()

        compute: Callable[[int], int]
        if self.style == "threaded":
            compute = partial(parallel_factorial, workers=self.workers, pivot=self.pivot)
        else:
            compute = get_style(self.style)
        logger.debug("using the %s style (bits=%s)", self.style, self.bits)

        bits = self.bits
        if bits is None:
            return compute

        def bounded(n: int) -> int:
            return check_width(n, compute(n), bits)

        return bounded
