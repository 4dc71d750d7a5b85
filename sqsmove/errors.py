class MoveError(Exception):
    """Base class for failures that stop a transfer."""


class TransientServiceError(MoveError):
    """SQS rejected or failed a request (network, throttling, permission)."""


class MalformedPayloadError(MoveError):
    """A received message body is not a JSON document."""


class OperatorInputError(MoveError):
    """The operator asked for something the tool cannot do."""
