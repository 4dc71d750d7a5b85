MIN_VISIBILITY_TIMEOUT = 60
MESSAGES_PER_SECOND = 100


def compute_visibility_timeout(estimated_count: int) -> int:
    """
    Visibility timeout for a drain of estimated_count messages.

    Messages received early in the drain must stay hidden until the last round
    has finished, so the timeout grows with the backlog. SQS wants whole seconds.
    """
    if estimated_count < 0:
        raise ValueError(f'Estimated count must not be negative, got {estimated_count}')
    return max(MIN_VISIBILITY_TIMEOUT, estimated_count // MESSAGES_PER_SECOND)
