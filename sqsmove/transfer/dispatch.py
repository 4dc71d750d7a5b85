from collections import deque
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Deque, List, Optional

from sqsmove.facade.sqs import SQS
from sqsmove.transfer.rounds import round_results, start_round
from sqsmove.transfer.transform import serialize


class Dispatcher:
    """
    Send a batch of decoded messages, one send call per message, in bounded rounds.

    sent holds the number of confirmed sends, including those of a round that
    failed, so callers can report how far a broken dispatch got.
    """

    def __init__(self, sqs: SQS, concurrency: int = 10, log: Callable = print,
                 progress: Optional[Callable[[int, int], None]] = None):
        if concurrency < 1:
            raise ValueError(f'Concurrency must be at least 1, got {concurrency}')
        self.sqs = sqs
        self.concurrency = concurrency
        self.sent = 0
        self._log = log
        self._progress = progress

    def dispatch(self, queue_url: str, messages: List[Any]) -> int:
        total = len(messages)
        remaining: Deque[Any] = deque(messages)
        self.sent = 0
        self._log(f'Sending {total} messages to {queue_url}')
        with ThreadPoolExecutor(max_workers=self.concurrency) as executor:
            while len(remaining) > 0:
                popped = [remaining.popleft() for _ in range(min(self.concurrency, len(remaining)))]
                futures = start_round(executor, [self._sender(queue_url, message) for message in popped])
                self.sent += sum(1 for future in futures if future.exception() is None)
                if self._progress is not None:
                    self._progress(self.sent, total)
                round_results(futures)
        return self.sent

    def _sender(self, queue_url: str, message: Any) -> Callable:
        body = serialize(message)
        return lambda: self.sqs.send_message(queue_url, body)
