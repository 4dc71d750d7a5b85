import sys


class ProgressLine:
    """Rewrite a single terminal line with a running count."""

    def __init__(self, label: str, stream=None):
        self.label = label
        self.stream = stream if stream is not None else sys.stdout
        self.done = 0
        self.total = 0

    def __call__(self, done: int, total: int):
        self.done = done
        self.total = total
        self.stream.write(f'\r{self.label}.. {done} / {total}')
        self.stream.flush()

    def finish(self):
        if self.total > 0:
            self.stream.write('\n')
            self.stream.flush()
