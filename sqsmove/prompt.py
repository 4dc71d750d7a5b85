from typing import Callable, List, Optional, Tuple

from sqsmove.errors import OperatorInputError


class QueuePrompt:
    """Numbered menu asking the operator for a source and a destination queue."""

    def __init__(self, ask: Callable[[str], str] = input, log: Callable = print):
        self._ask = ask
        self._log = log

    def select(self, choices: List[Tuple[str, str]], source: Optional[str] = None,
               destination: Optional[str] = None) -> Tuple[str, str]:
        """Ask for whichever of source and destination was not given."""
        if len(choices) == 0 and (source is None or destination is None):
            raise OperatorInputError('No queues found to choose from')
        if source is None:
            source = self.choose('Choose the queue you want to move messages from', choices)
        if destination is None:
            destination = self.choose('Choose the queue you want to move messages to', choices)
        if source == destination:
            raise OperatorInputError('From and to queues must be different')
        return source, destination

    def choose(self, question: str, choices: List[Tuple[str, str]]) -> str:
        self._log(question)
        for index, (label, _) in enumerate(choices, start=1):
            self._log(f'  {index}) {label}')
        while True:
            answer = self._ask(f'Answer [1-{len(choices)}]: ').strip()
            if answer.isdigit() and 1 <= int(answer) <= len(choices):
                return choices[int(answer) - 1][1]
            self._log(f'Please enter a number between 1 and {len(choices)}')
