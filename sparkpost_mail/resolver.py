"""Copy-recipient resolution.

Cc and Bcc entries are written with a placeholder routing value.  Right
before serialization the placeholder is rewritten to the email of the
main recipient, the first primary entry in insertion order.

The placeholder is written as ``%mainRecipient%`` but only
``%mainRecipient`` is replaced, so resolved values keep a trailing ``%``
(``main@x.com%``).  Existing integrations depend on that exact value;
do not "fix" one side without the other.
"""

from __future__ import annotations

import structlog

from .recipients import RecipientStore

logger = structlog.get_logger()

RESOLVE_TOKEN = "%mainRecipient"


def find_main_recipient(store: RecipientStore) -> str:
    """Email of the first primary recipient, or ``""`` when there is none."""
    for entry in store.entries:
        if not entry.is_copy:
            return entry.address.email
    return ""


def resolve_copy_recipients(store: RecipientStore) -> str:
    """Point every copy entry at the main recipient, in place.

    Safe to call repeatedly: once the token is gone there is nothing
    left to replace.  Returns the main recipient email.
    """
    main = find_main_recipient(store)
    copies = 0
    for entry in store.entries:
        if entry.header_to is not None:
            entry.header_to = entry.header_to.replace(RESOLVE_TOKEN, main)
            copies += 1

    if copies and not main:
        logger.warning("copy_recipients_without_main_recipient", copies=copies)
    logger.debug("copy_recipients_resolved", main_recipient=main, copies=copies)

    store.mark_resolved()
    return main
