"""Prefix factorials as a lazy sequence and as a producer/consumer channel."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import islice
import logging
import queue
import threading
from types import TracebackType

from factorials.lib import validate

logger = logging.getLogger(__name__)


def prefix_factorials(n: int) -> Iterator[int]:
    """Yield ``0!, 1!, ..., n!`` one at a time."""
    validate(n)
    product = 1
    yield product
    for value in range(1, n + 1):
        product *= value
        yield product


def nth_factorial(n: int) -> int:
    """Return n! by taking element ``n`` of the lazy prefix sequence."""
    return next(islice(prefix_factorials(n), n, None))


class PrefixFactorials:
    """
    Finite, restartable sequence of prefix factorials ``0!`` through ``n!``.

    Nothing is cached: every iteration recomputes from scratch, so two iterations
    never share state.

    Example:
        >>> list(PrefixFactorials(4))
        [1, 1, 2, 6, 24]
    """

    __slots__ = ("_n",)

    def __init__(self, n: int) -> None:
        self._n = validate(n)

    @property
    def n(self) -> int:
        return self._n

    def __iter__(self) -> Iterator[int]:
        return prefix_factorials(self._n)

    def __len__(self) -> int:
        return self._n + 1

    def __getitem__(self, index: int) -> int:
        if index < 0:
            index += len(self)
        if not 0 <= index < len(self):
            raise IndexError("prefix factorial index out of range")
        return next(islice(prefix_factorials(self._n), index, None))

    def last(self) -> int:
        return self[-1]

    def __repr__(self) -> str:
        return f"PrefixFactorials({self._n})"


class _Closed:
    """End-of-stream marker put on the queue by the producer."""


class _Failed:
    def __init__(self, error: BaseException) -> None:
        self.error = error


_CLOSED = _Closed()


class FactorialChannel:
    """
    Single producer thread streaming prefix factorials through a bounded queue.

    The consumer iterates the channel. Closing the channel early (explicitly, by
    leaving a ``with`` block, or by abandoning the iteration) stops the producer and
    joins its thread. Iterating a closed channel yields nothing.

    Args:
        n: Last prefix factorial to produce.
        maxsize: Capacity of the queue between producer and consumer.
    """

    def __init__(self, n: int, *, maxsize: int = 1) -> None:
        self.n = validate(n)
        self._queue: queue.Queue[int | _Closed | _Failed] = queue.Queue(maxsize=maxsize)
        self._stop = threading.Event()
        self._consumed = False
        self._thread = threading.Thread(
            target=self._produce, name=f"factorial-producer-{n}", daemon=True
        )
        self._thread.start()

    def _produce(self) -> None:
        logger.debug("producer for fact(%d) started", self.n)
        try:
            for value in prefix_factorials(self.n):
                if self._stop.is_set():
                    logger.debug("producer for fact(%d) stopped early", self.n)
                    return
                # Blocks while the queue is full. close() drains it to unblock us.
                self._queue.put(value)
        except Exception as error:
            self._queue.put(_Failed(error))
            return
        self._queue.put(_CLOSED)
        logger.debug("producer for fact(%d) finished", self.n)

    def __iter__(self) -> Iterator[int]:
        if self._consumed:
            raise RuntimeError("FactorialChannel can only be iterated once")
        self._consumed = True
        return self._receive()

    def _receive(self) -> Iterator[int]:
        try:
            while not self._stop.is_set():
                item = self._queue.get()
                if isinstance(item, _Closed):
                    return
                if isinstance(item, _Failed):
                    raise item.error
                yield item
        finally:
            self.close()

    @property
    def closed(self) -> bool:
        return self._stop.is_set()

    @property
    def producer_alive(self) -> bool:
        return self._thread.is_alive()

    def _drain(self) -> None:
        while True:
            try:
                self._queue.get_nowait()
            except queue.Empty:
                return

    def close(self) -> None:
        """Stop the producer, unblock it if needed, and wait for its thread to exit."""
        self._stop.set()
        while self._thread.is_alive():
            self._drain()
            self._thread.join(timeout=0.05)
        # Wake a consumer blocked in get() with an end marker instead of stale values.
        self._drain()
        self._queue.put_nowait(_CLOSED)

    def __enter__(self) -> FactorialChannel:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def channel_factorial(n: int) -> int:
    """Return n! as the last value received from a ``FactorialChannel``."""
    result = 1
    with FactorialChannel(n) as channel:
        for result in channel:
            pass
    return result
