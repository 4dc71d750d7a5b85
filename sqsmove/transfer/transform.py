import json
from typing import Any, Dict, List, Tuple

from sqsmove.errors import MalformedPayloadError


def decode(message: Dict) -> Any:
    try:
        return json.loads(message['Body'])
    except json.JSONDecodeError as ex:
        message_id = message.get('MessageId', 'unknown')
        raise MalformedPayloadError(f'Message {message_id} does not hold a JSON body: {ex}') from ex


def serialize(decoded: Any) -> str:
    return json.dumps(decoded, separators=(',', ':'), ensure_ascii=False)


def matches_filter(decoded: Any, needle: str) -> bool:
    """Literal, case sensitive substring test against the compact JSON form."""
    return needle in serialize(decoded)


def apply_filter(messages: List[Any], needle: str) -> Tuple[List[Any], int]:
    kept = [message for message in messages if matches_filter(message, needle)]
    return kept, len(messages) - len(kept)
