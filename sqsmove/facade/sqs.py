from typing import Dict, List, NamedTuple, Optional

from botocore.exceptions import BotoCoreError, ClientError

from sqsmove.errors import TransientServiceError

MAX_NUMBER_OF_MESSAGES = 10
MAX_VISIBILITY_TIMEOUT = 43200


class QueueRef(NamedTuple):
    url: str
    tags: Dict[str, str]


class SQS:
    def __init__(self, sqs_client):
        self.sqs = sqs_client

    def estimate_backlog(self, queue_url: str) -> int:
        try:
            response = self.sqs.get_queue_attributes(
                QueueUrl=queue_url, AttributeNames=['ApproximateNumberOfMessages']
            )
        except (ClientError, BotoCoreError) as ex:
            raise TransientServiceError(f'Cannot read attributes of {queue_url}: {ex}') from ex
        return int(response.get('Attributes', {}).get('ApproximateNumberOfMessages', 0))

    def receive_batch(self, queue_url: str, visibility_timeout: int) -> List[Dict]:
        try:
            response = self.sqs.receive_message(
                QueueUrl=queue_url,
                AttributeNames=['All'],
                MessageAttributeNames=['All'],
                MaxNumberOfMessages=MAX_NUMBER_OF_MESSAGES,
                WaitTimeSeconds=0,
                VisibilityTimeout=min(int(visibility_timeout), MAX_VISIBILITY_TIMEOUT)
            )
        except (ClientError, BotoCoreError) as ex:
            raise TransientServiceError(f'Cannot receive from {queue_url}: {ex}') from ex
        return response.get('Messages', [])

    def send_message(self, queue_url: str, body: str, delay=0) -> Dict:
        try:
            return self.sqs.send_message(QueueUrl=queue_url, MessageBody=body, DelaySeconds=delay)
        except (ClientError, BotoCoreError) as ex:
            raise TransientServiceError(f'Cannot send to {queue_url}: {ex}') from ex

    def list_queues(self, queue_name_prefix: Optional[str] = None) -> List[str]:
        kwargs = {'MaxResults': 1000}
        if queue_name_prefix:
            kwargs['QueueNamePrefix'] = queue_name_prefix
        urls = []
        try:
            result = self.sqs.list_queues(**kwargs)
            urls.extend(result.get('QueueUrls', []))
            while 'NextToken' in result and result['NextToken'] is not None:
                result = self.sqs.list_queues(NextToken=result['NextToken'], **kwargs)
                urls.extend(result.get('QueueUrls', []))
        except (ClientError, BotoCoreError) as ex:
            raise TransientServiceError(f'Cannot list queues: {ex}') from ex
        return urls

    def describe_tags(self, queue_url: str) -> Dict[str, str]:
        try:
            response = self.sqs.list_queue_tags(QueueUrl=queue_url)
        except (ClientError, BotoCoreError) as ex:
            raise TransientServiceError(f'Cannot read tags of {queue_url}: {ex}') from ex
        return response.get('Tags') or {}

    def describe_queues(self, queue_name_prefix: Optional[str] = None) -> List[QueueRef]:
        return [
            QueueRef(url=queue_url, tags=self.describe_tags(queue_url))
            for queue_url in self.list_queues(queue_name_prefix)
        ]
