from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Any, Callable, List


def start_round(executor: ThreadPoolExecutor, calls: List[Callable[[], Any]]) -> List[Future]:
    """Submit every call and wait until all of them have resolved, successfully or not."""
    futures = [executor.submit(call) for call in calls]
    wait(futures)
    return futures


def round_results(futures: List[Future]) -> List[Any]:
    """Results in launch order, or the first failure in launch order raised unchanged."""
    for future in futures:
        ex = future.exception()
        if ex is not None:
            raise ex
    return [future.result() for future in futures]


def run_round(executor: ThreadPoolExecutor, calls: List[Callable[[], Any]]) -> List[Any]:
    """
    Run every call on the executor and wait for all of them.

    A round is never abandoned halfway: the first failure is raised only after
    every call has resolved.
    """
    return round_results(start_round(executor, calls))
