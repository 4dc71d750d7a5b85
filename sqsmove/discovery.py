import json
from typing import List, Optional, Tuple

from sqsmove.facade.sqs import SQS, QueueRef


def describe_choice(queue: QueueRef) -> str:
    tags = json.dumps(queue.tags) if queue.tags else 'none'
    return f'url: {queue.url}, tags: {tags}'


def discover_queues(sqs: SQS, queue_name_prefix: Optional[str] = None) -> List[Tuple[str, str]]:
    """Return (label, queue url) pairs for every queue visible to the caller."""
    return [(describe_choice(queue), queue.url) for queue in sqs.describe_queues(queue_name_prefix)]
