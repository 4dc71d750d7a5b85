import pytest

from sqsmove.errors import OperatorInputError
from sqsmove.prompt import QueuePrompt

CHOICES = [
    ('url: a, tags: none', 'a'),
    ('url: b, tags: none', 'b'),
    ('url: c, tags: none', 'c'),
]


def answers(*values):
    remaining = list(values)
    return lambda question: remaining.pop(0)


class TestCase:

    def test_select(self):
        logs = []
        prompt = QueuePrompt(ask=answers('3', '1'), log=logs.append)
        assert prompt.select(CHOICES) == ('c', 'a')
        assert 'Choose the queue you want to move messages from' in logs
        assert '  2) url: b, tags: none' in logs

    def test_reasks_on_invalid_answer(self):
        logs = []
        prompt = QueuePrompt(ask=answers('x', '0', '4', ' 2 ', '3'), log=logs.append)
        assert prompt.select(CHOICES) == ('b', 'c')
        assert logs.count('Please enter a number between 1 and 3') == 3

    def test_same_queue_rejected(self):
        prompt = QueuePrompt(ask=answers('2', '2'), log=lambda *args: None)
        with pytest.raises(OperatorInputError) as info:
            prompt.select(CHOICES)
        assert str(info.value) == 'From and to queues must be different'

    def test_no_queues(self):
        with pytest.raises(OperatorInputError):
            QueuePrompt(ask=answers(), log=lambda *args: None).select([])

    def test_only_destination_asked(self):
        logs = []
        prompt = QueuePrompt(ask=answers('2'), log=logs.append)
        assert prompt.select(CHOICES, source='a') == ('a', 'b')
        assert 'Choose the queue you want to move messages from' not in logs
        assert 'Choose the queue you want to move messages to' in logs

    def test_only_source_asked(self):
        prompt = QueuePrompt(ask=answers('3'), log=lambda *args: None)
        assert prompt.select(CHOICES, destination='a') == ('c', 'a')

    def test_given_queue_still_checked(self):
        prompt = QueuePrompt(ask=answers('1'), log=lambda *args: None)
        with pytest.raises(OperatorInputError):
            prompt.select(CHOICES, source='a')
