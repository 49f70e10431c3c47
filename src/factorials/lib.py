class FactorialError(RuntimeError):
    """Base class for errors raised while computing a factorial."""


class InvalidFactorialError(FactorialError):
    """Error generated if an invalid factorial input, split or integer width is given."""


class FactorialOverflowError(FactorialError):
    """Error generated if a factorial does not fit the requested integer width."""


def validate(n: int) -> int:
    """Checks that n is a usable factorial input.

    Args:
        n: Candidate input value.

    Raises:
        TypeError: If n is not an integer (bool is rejected too).
        InvalidFactorialError: If n is less than 0.

    Returns:
        The same n, unchanged.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"n must be an int, got {type(n).__name__}")
    if n < 0:
        raise InvalidFactorialError(f"n is less than zero: {n}")
    return n


def factorial(n: int) -> int:
    """Computes the factorial through iterative accumulation.

    The result is an arbitrary-precision int, so large inputs never wrap.

    Args:
        n: A non-negative input value.

    Raises:
        TypeError: If n is not an integer.
        InvalidFactorialError: If n is less than 0.

    Returns:
        Computed factorial.
    """
    validate(n)

    product = 1
    for value in range(2, n + 1):
        product *= value
    return product


def checked_factorial(n: int, bits: int = 64) -> int:
    """Computes the factorial and checks that it fits a signed integer of ``bits`` width.

    Args:
        n: A non-negative input value.
        bits: Width of the target signed integer type.

    Raises:
        InvalidFactorialError: If n is less than 0 or bits is less than 2.
        FactorialOverflowError: If n! exceeds ``2 ** (bits - 1) - 1``.

    Returns:
        Computed factorial.
    """
    if bits < 2:
        raise InvalidFactorialError(f"bits must be at least 2: {bits}")

    return check_width(n, factorial(n), bits)


def check_width(n: int, result: int, bits: int) -> int:
    """Raises FactorialOverflowError if result does not fit a signed ``bits``-wide integer."""
    if result > (1 << (bits - 1)) - 1:
        raise FactorialOverflowError(f"fact({n}) overflows a signed {bits}-bit integer")
    return result
