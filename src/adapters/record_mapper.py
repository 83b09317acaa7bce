"""JSON-record-to-core message mapping adapter.

This keeps the on-disk record shape out of the core pipeline. Records look
like ``{"text": "...", "user": {"lang": "en"}}``; any other fields are
ignored.
"""

from __future__ import annotations

from typing import Any, List, Optional

from core.errors import MalformedBatchError
from core.models import Message, UserProfile


def _user_from_record(raw_user: Any) -> Optional[UserProfile]:
    # A missing or non-object user is treated as "no declared language".
    if not isinstance(raw_user, dict):
        return None
    lang = raw_user.get("lang")
    return UserProfile(lang=lang if isinstance(lang, str) else None)


def message_from_record(record: Any, batch_id: str = "<batch>") -> Message:
    """Build a core Message from one decoded JSON record."""

    if not isinstance(record, dict):
        raise MalformedBatchError(batch_id, f"expected a message object, got {type(record).__name__}")
    text = record.get("text")
    if not isinstance(text, str):
        raise MalformedBatchError(batch_id, "message is missing a string 'text' field")
    return Message(text=text, user=_user_from_record(record.get("user")))


def messages_from_payload(payload: Any, batch_id: str = "<batch>") -> List[Message]:
    """Map a decoded JSON array of records to core messages."""

    if not isinstance(payload, list):
        raise MalformedBatchError(batch_id, f"expected a JSON array, got {type(payload).__name__}")
    return [message_from_record(record, batch_id) for record in payload]
