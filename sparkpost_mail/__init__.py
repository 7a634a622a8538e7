"""SparkPost transmission message builder.

Public API re-exported here for convenience::

    from sparkpost_mail import Message, TransmissionClient
"""

from .address import Address, normalize_addresses, render_address, render_address_list
from .client import TransmissionClient
from .config import LoggingConfig, SparkPostAPIConfig, TransmissionOptions
from .content import AttachmentRecord, ImageRecord
from .errors import (
    AttachmentReadError,
    InvalidArgumentError,
    MessageError,
    UnsupportedOperationError,
)
from .logging import setup_logging
from .message import Message
from .payload import build_transmission_payload
from .recipients import RecipientEntry, RecipientStore, StoreState
from .resolver import find_main_recipient, resolve_copy_recipients

__all__ = [
    "Address",
    "AttachmentReadError",
    "AttachmentRecord",
    "ImageRecord",
    "InvalidArgumentError",
    "LoggingConfig",
    "Message",
    "MessageError",
    "RecipientEntry",
    "RecipientStore",
    "SparkPostAPIConfig",
    "StoreState",
    "TransmissionClient",
    "TransmissionOptions",
    "UnsupportedOperationError",
    "build_transmission_payload",
    "find_main_recipient",
    "normalize_addresses",
    "render_address",
    "render_address_list",
    "resolve_copy_recipients",
    "setup_logging",
]
