"""Divide-and-conquer factorial over exact, disjoint sub-ranges of ``[1, n]``."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
import logging

from factorials.lib import InvalidFactorialError, validate

logger = logging.getLogger(__name__)

Span = tuple[int, int]
"""Inclusive integer range ``(start, stop)``. Empty when ``stop < start``."""


def range_product(start: int, stop: int) -> int:
    """
    Multiply every integer in the inclusive range ``[start, stop]``.

    Args:
        start: First factor.
        stop: Last factor.

    Returns:
        The partial product, or 1 for an empty range.
    """
    product = 1
    for value in range(start, stop + 1):
        product *= value
    return product


def split_at(n: int, pivot: int) -> tuple[Span, Span]:
    """
    Split ``[1, n]`` into ``[1, pivot]`` and ``[pivot + 1, n]``.

    The pivot belongs to the left range only.

    Raises:
        InvalidFactorialError: If the pivot lies outside ``[0, n]``.
    """
    validate(n)
    if not 0 <= pivot <= n:
        raise InvalidFactorialError(f"pivot must be within [0, {n}]: {pivot}")
    return (1, pivot), (pivot + 1, n)


def partition(n: int, parts: int) -> list[Span]:
    """
    Split ``[1, n]`` into ``parts`` contiguous ranges whose sizes differ by at most one.

    Every integer in ``[1, n]`` lands in exactly one range. When ``parts > n`` the
    trailing ranges are empty.

    Args:
        n: Upper bound of the range.
        parts: Number of ranges to produce.

    Raises:
        InvalidFactorialError: If n is negative or parts is less than 1.

    Returns:
        The list of inclusive ranges, in increasing order.
    """
    validate(n)
    if parts < 1:
        raise InvalidFactorialError(f"parts must be at least 1: {parts}")

    size, extra = divmod(n, parts)
    spans: list[Span] = []
    start = 1
    for index in range(parts):
        length = size + (1 if index < extra else 0)
        spans.append((start, start + length - 1))
        start += length
    return spans


def parallel_factorial(n: int, *, workers: int = 2, pivot: int | None = None) -> int:
    """
    Compute n! by multiplying partial products computed on worker threads.

    Args:
        n: A non-negative input value.
        workers: Fan-out used when no pivot is given.
        pivot: Optional explicit two-way split point (see ``split_at``).

    Returns:
        Computed factorial.
    """
    spans = list(split_at(n, pivot)) if pivot is not None else partition(n, workers)
    logger.debug("fact(%d) split into %s", n, spans)

    with ThreadPoolExecutor(max_workers=len(spans)) as executor:
        futures = [executor.submit(range_product, start, stop) for start, stop in spans]
    # Leaving the executor joins every worker.

    result = 1
    for future in futures:
        result *= future.result()
    return result
