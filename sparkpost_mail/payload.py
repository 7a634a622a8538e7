"""Serializer: Message -> transmissions API request body.

Pure aggregation.  Documented API limits (64-byte campaign id, 255-byte
attachment names, 20 MB content) are left to the API to enforce.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .resolver import resolve_copy_recipients

if TYPE_CHECKING:
    from .message import Message


def build_transmission_payload(message: Message) -> dict[str, Any]:
    """Resolve copy recipients on *message*, then assemble the request body."""
    resolve_copy_recipients(message.recipients)

    return {
        "options": message.options.model_dump(),
        "recipients": message.recipients.to_wire(),
        "campaign_id": message.campaign_id,
        "description": message.description,
        "metadata": dict(message.metadata),
        "substitutionData": {},
        "return_path": message.return_path,
        "content": _build_content(message),
    }


def _build_content(message: Message) -> dict[str, Any]:
    return {
        "template_id": "",
        "use_draft_template": False,
        "html": message.get_html_body() or "",
        "text": message.get_text_body() or "",
        "subject": message.get_subject() or "",
        "from": message.get_from() or "",
        "reply_to": message.get_reply_to() or "",
        "headers": message.get_headers(),
        "attachments": [record.to_wire() for record in message.attachments],
        "inline_images": [record.to_wire() for record in message.images],
    }
