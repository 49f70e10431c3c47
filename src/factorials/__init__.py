"""Factorial, written at every stage of programmer maturity."""

from factorials.lib import (
    FactorialError,
    FactorialOverflowError,
    InvalidFactorialError,
    checked_factorial,
    factorial,
)
from factorials.parallel import parallel_factorial, partition, range_product, split_at
from factorials.sequence import (
    FactorialChannel,
    PrefixFactorials,
    channel_factorial,
    nth_factorial,
    prefix_factorials,
)
from factorials.styles import STYLES, Factorial, FactorialService, compare, get_style

__all__ = [
    "STYLES",
    "Factorial",
    "FactorialChannel",
    "FactorialError",
    "FactorialOverflowError",
    "FactorialService",
    "InvalidFactorialError",
    "PrefixFactorials",
    "channel_factorial",
    "checked_factorial",
    "compare",
    "factorial",
    "get_style",
    "nth_factorial",
    "parallel_factorial",
    "partition",
    "prefix_factorials",
    "range_product",
    "split_at",
]
