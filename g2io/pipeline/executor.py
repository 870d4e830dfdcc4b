"""Fork-join execution of index-addressed tasks on a thread pool."""

import logging
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from typing import TypeVar

log = logging.getLogger(__name__)

T = TypeVar("T")


def run_indexed(
    task: Callable[[int], T], n_tasks: int, n_workers: int | None = None
) -> list[T]:
    """Run ``task(i)`` for every i in ``range(n_tasks)`` and join.

    Results land in a pre-sized list at their own index, so completion
    order never shows in the output. With ``n_workers == 1`` tasks run
    inline on the calling thread.

    On failure, tasks with a higher index than the failing one that have
    not started yet are cancelled, started ones are joined, and the
    exception of the lowest failing index is re-raised. The lowest failing
    index is never cancelled, so the reported error does not depend on
    scheduling.

    Args:
        task: Function of the task index.
        n_tasks: Number of tasks.
        n_workers: Pool size; None lets the executor choose.

    Returns:
        List of results in task-index order.
    """
    if n_workers is not None and n_workers < 1:
        raise ValueError(f"n_workers must be >= 1, got {n_workers}")
    if n_workers == 1 or n_tasks <= 1:
        return [task(i) for i in range(n_tasks)]

    results: list[T | None] = [None] * n_tasks
    failures: dict[int, BaseException] = {}
    with ThreadPoolExecutor(max_workers=n_workers, thread_name_prefix="g2io") as executor:
        futures: dict[Future[T], int] = {
            executor.submit(task, i): i for i in range(n_tasks)
        }
        for future in as_completed(futures):
            i = futures[future]
            if future.cancelled():
                continue
            error = future.exception()
            if error is None:
                results[i] = future.result()
                continue
            failures[i] = error
            log.debug("Task %d failed: %r", i, error)
            for other, j in futures.items():
                if j > i:
                    other.cancel()

    if failures:
        first = min(failures)
        log.debug("%d task(s) failed, reporting task %d", len(failures), first)
        raise failures[first]
    return results  # type: ignore[return-value]
