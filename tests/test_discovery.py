from sqsmove.discovery import describe_choice, discover_queues
from sqsmove.facade.sqs import SQS, QueueRef
from tests.monkey.sqs import MonkeyPatchSQSClient, MySQS


class TestCase:

    def test_describe_choice_with_tags(self):
        queue = QueueRef(url='https://queue/orders', tags={'env': 'tst'})
        assert describe_choice(queue) == 'url: https://queue/orders, tags: {"env": "tst"}'

    def test_describe_choice_without_tags(self):
        assert describe_choice(QueueRef(url='https://queue/orders', tags={})) == 'url: https://queue/orders, tags: none'

    def test_discover_queues(self):
        mysqs = MySQS()
        mysqs.create_queue('orders', tags={'env': 'tst'})
        mysqs.create_queue('orders-dlq')
        mysqs.create_queue('payments')
        prefix = MonkeyPatchSQSClient.URL_PREFIX
        choices = discover_queues(SQS(MonkeyPatchSQSClient(mysqs)), 'orders')
        assert choices == [
            (f'url: {prefix}orders, tags: {{"env": "tst"}}', f'{prefix}orders'),
            (f'url: {prefix}orders-dlq, tags: none', f'{prefix}orders-dlq'),
        ]
