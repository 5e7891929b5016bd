from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_worker_state = threading.local()


def _run_as_worker(work: Callable[[int, int], None], start: int, stop: int) -> None:
    _worker_state.active = True
    try:
        work(start, stop)
    finally:
        _worker_state.active = False


class ParallelScheduler:
    """
    Fork-join executor for independent index ranges.

    The range ``[0, count)`` is halved recursively until pieces are no longer
    than ``sequential_threshold``; the pieces then run on a thread pool and
    :meth:`run` returns once all of them have finished. Work that is small
    enough, or that is submitted from one of the scheduler's own worker
    threads, runs sequentially on the calling thread. Exceptions raised by a
    piece propagate to the caller of :meth:`run`.

    The results never depend on the scheduling: each piece writes only to
    its own disjoint output indices.

    Parameters
    ----------
    max_workers : int, optional
        Size of the thread pool. Defaults to the
        :class:`~concurrent.futures.ThreadPoolExecutor` default.
    sequential_threshold : int, optional
        Largest range processed without splitting. Default is 64.

    Examples
    --------
    >>> import numpy as np
    >>> from fastwavelets.numpy import ParallelScheduler
    >>> out = np.zeros(1000)
    >>> def square(start, stop):
    ...     out[start:stop] = np.arange(start, stop) ** 2
    >>> with ParallelScheduler(max_workers=4) as scheduler:
    ...     scheduler.run(square, out.size)
    >>> int(out[999])
    998001
    """

    def __init__(
        self, max_workers: int | None = None, sequential_threshold: int = 64
    ) -> None:
        if max_workers is not None and max_workers < 1:
            msg = f"max_workers must be positive, got {max_workers}"
            raise ConfigurationError(msg)
        if sequential_threshold < 1:
            msg = f"sequential_threshold must be positive, got {sequential_threshold}"
            raise ConfigurationError(msg)
        self.max_workers = max_workers
        self.sequential_threshold = sequential_threshold
        self._executor: ThreadPoolExecutor | None = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="fastwavelets"
        )

    def partition(self, start: int, stop: int) -> list[tuple[int, int]]:
        """
        Split ``[start, stop)`` by recursive halving.

        Examples
        --------
        >>> from fastwavelets.numpy import ParallelScheduler
        >>> with ParallelScheduler(sequential_threshold=3) as scheduler:
        ...     scheduler.partition(0, 10)
        [(0, 2), (2, 5), (5, 7), (7, 10)]
        """
        if stop - start <= self.sequential_threshold:
            return [(start, stop)] if stop > start else []
        mid = start + (stop - start) // 2
        return self.partition(start, mid) + self.partition(mid, stop)

    def run(self, work: Callable[[int, int], None], count: int) -> None:
        """
        Call ``work(start, stop)`` on disjoint ranges covering ``[0, count)``.

        Parameters
        ----------
        work : Callable[[int, int], None]
            Processes the indices ``start <= i < stop``.
        count : int
            Number of indices.

        Raises
        ------
        RuntimeError
            If the scheduler has been shut down.
        """
        if self._executor is None:
            msg = "Cannot run work on a scheduler that has been shut down"
            raise RuntimeError(msg)
        if count <= 0:
            return
        if count <= self.sequential_threshold or getattr(_worker_state, "active", False):
            work(0, count)
            return

        ranges = self.partition(0, count)
        logger.debug("Scheduling %d indices as %d tasks", count, len(ranges))
        futures = [
            self._executor.submit(_run_as_worker, work, start, stop)
            for start, stop in ranges
        ]
        for future in futures:
            future.result()

    def shutdown(self, wait: bool = True) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=wait)
            self._executor = None

    def __enter__(self) -> ParallelScheduler:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()
