from typing import Callable, NamedTuple, Optional

from sqsmove.errors import MoveError, OperatorInputError
from sqsmove.facade.sqs import SQS
from sqsmove.progress import ProgressLine
from sqsmove.transfer.dispatch import Dispatcher
from sqsmove.transfer.drain import Drainer
from sqsmove.transfer.transform import apply_filter, decode


class TransferReport(NamedTuple):
    read: int
    passed: int
    sent: int


class Transfer:
    """
    Copy the messages of one queue into another.

    Drains the source, decodes every body as JSON, keeps the messages matching
    the optional filter and sends them to the destination. Source messages are
    not deleted; they become visible again when their visibility timeout lapses.
    """

    def __init__(self, sqs: SQS, concurrency: int = 10, message_filter: Optional[str] = None,
                 max_empty_rounds: int = 3, log: Callable = print,
                 progress: Optional[Callable[[str], ProgressLine]] = None):
        if concurrency < 1:
            raise OperatorInputError(f'Concurrency must be at least 1, got {concurrency}')
        self.sqs = sqs
        self.concurrency = concurrency
        self.message_filter = message_filter
        self.max_empty_rounds = max_empty_rounds
        self._log = log
        self._progress = progress if progress is not None else ProgressLine

    def run(self, source_url: str, destination_url: str) -> TransferReport:
        if source_url == destination_url:
            raise OperatorInputError('From and to queues must be different')

        reading = self._progress('Reading messages')
        drainer = Drainer(
            self.sqs, concurrency=self.concurrency, max_empty_rounds=self.max_empty_rounds,
            log=self._log, progress=reading
        )
        try:
            messages = drainer.drain(source_url)
        finally:
            reading.finish()
        self._log(f'Read {len(messages)} messages from queue')
        if len(messages) == 0:
            self._log('No messages to move!')
            return TransferReport(read=0, passed=0, sent=0)

        decoded = [decode(message) for message in messages]
        if self.message_filter:
            decoded, dropped = apply_filter(decoded, self.message_filter)
            self._log(f'Kept {len(decoded)} of {len(messages)} messages matching '
                      f"'{self.message_filter}' ({dropped} filtered out)")

        sending = self._progress('Messages sent')
        dispatcher = Dispatcher(self.sqs, concurrency=self.concurrency, log=self._log, progress=sending)
        try:
            sent = dispatcher.dispatch(destination_url, decoded)
        except MoveError:
            sending.finish()
            self._log(f'Sent {dispatcher.sent} of {len(decoded)} messages before failure')
            raise
        sending.finish()
        self._log('All messages sent!')
        return TransferReport(read=len(messages), passed=len(decoded), sent=sent)
