from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Dict, List, Optional

from sqsmove.facade.sqs import SQS
from sqsmove.timeout import compute_visibility_timeout
from sqsmove.transfer.rounds import run_round


class Drainer:
    """
    Pull every visible message off a queue.

    The queue reports only an approximate backlog, so the drain keeps issuing
    rounds of receive calls until it has seen at least that many messages.
    Messages are received with a visibility timeout long enough to keep them
    hidden for the whole drain and are never deleted.
    """

    def __init__(self, sqs: SQS, concurrency: int = 10, max_empty_rounds: int = 3,
                 log: Callable = print, progress: Optional[Callable[[int, int], None]] = None):
        if concurrency < 1:
            raise ValueError(f'Concurrency must be at least 1, got {concurrency}')
        self.sqs = sqs
        self.concurrency = concurrency
        self.max_empty_rounds = max_empty_rounds
        self._log = log
        self._progress = progress

    def drain(self, queue_url: str) -> List[Dict]:
        estimated = self.sqs.estimate_backlog(queue_url)
        visibility_timeout = compute_visibility_timeout(estimated)
        self._log(f'Total count: {estimated}')
        accumulated: List[Dict] = []
        if estimated == 0:
            return accumulated
        received = 0
        empty_rounds = 0
        with ThreadPoolExecutor(max_workers=self.concurrency) as executor:
            while received < estimated:
                messages = self._receive_round(executor, queue_url, visibility_timeout)
                accumulated.extend(messages)
                received += len(messages)
                if self._progress is not None:
                    self._progress(received, estimated)
                if len(messages) > 0:
                    empty_rounds = 0
                    continue
                empty_rounds += 1
                if 0 < self.max_empty_rounds <= empty_rounds:
                    self._log(f'Stopped after {empty_rounds} empty rounds, '
                              f'received {received} of {estimated} estimated messages')
                    break
        return accumulated

    def _receive_round(self, executor: ThreadPoolExecutor, queue_url: str, visibility_timeout: int) -> List[Dict]:
        calls = [
            lambda: self.sqs.receive_batch(queue_url, visibility_timeout)
            for _ in range(self.concurrency)
        ]
        return [message for batch in run_round(executor, calls) for message in batch]
