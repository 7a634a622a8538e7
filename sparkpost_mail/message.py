"""Message: the aggregate a caller builds before handing it to the client."""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import Any

import structlog

from .address import AddressInput, normalize_addresses, render_address_list
from .config import TransmissionOptions
from .content import AttachmentRecord, ImageRecord, basename, encode_base64, read_file
from .errors import InvalidArgumentError, UnsupportedOperationError
from .mime import MimeSniffer, sniff_mime_type
from .payload import build_transmission_payload
from .recipients import RecipientStore

logger = structlog.get_logger()

FileReader = Callable[[str | os.PathLike[str]], bytes]


class Message:
    """In-memory transmission message.

    Setters return ``self`` so calls can be chained::

        message = (
            Message()
            .set_from({"noreply@example.com": "Example"})
            .set_to("alice@example.com")
            .set_cc("bob@example.com")
            .set_subject("Hello")
        )
        payload = message.to_payload()

    Recipients live in a :class:`RecipientStore`; To/Cc/Bcc getters are
    views over it.  ``to_payload()`` resolves copy recipients in place,
    so it should be called once every recipient is set.
    """

    def __init__(
        self,
        *,
        options: TransmissionOptions | None = None,
        file_reader: FileReader = read_file,
        mime_sniffer: MimeSniffer = sniff_mime_type,
    ) -> None:
        self._recipients = RecipientStore()
        self._file_reader = file_reader
        self._mime_sniffer = mime_sniffer
        self._options = options or TransmissionOptions()
        self._from: str | None = None
        self._reply_to: str | None = None
        self._subject: str | None = None
        self._text: str | None = None
        self._html: str | None = None
        self._campaign_id: str = ""
        self._description: str = ""
        self._return_path: str = ""
        self._metadata: dict[str, Any] = {}
        self._attachments: list[AttachmentRecord] = []
        self._images: list[ImageRecord] = []

    # ------------------------------------------------------------------
    # Charset
    # ------------------------------------------------------------------

    def get_charset(self) -> None:
        return None

    def set_charset(self, charset: str) -> Message:
        raise UnsupportedOperationError("Charset is not supported by SparkPost.")

    # ------------------------------------------------------------------
    # Sender
    # ------------------------------------------------------------------

    def get_from(self) -> str | None:
        return self._from

    def set_from(self, value: AddressInput) -> Message:
        """Set the sender; several addresses are comma-joined."""
        self._from = render_address_list(normalize_addresses(value))
        return self

    def get_reply_to(self) -> str | None:
        return self._reply_to

    def set_reply_to(self, value: AddressInput) -> Message:
        self._reply_to = render_address_list(normalize_addresses(value))
        return self

    # ------------------------------------------------------------------
    # Recipients
    # ------------------------------------------------------------------

    @property
    def recipients(self) -> RecipientStore:
        return self._recipients

    def get_to(self) -> list[str | dict[str, str]]:
        """Primary recipients, or ``[list_id]`` when a stored list is used."""
        return self._recipients.to_view()

    def set_to(self, value: AddressInput) -> Message:
        self._recipients.add_to(value)
        return self

    def set_stored_recipients_list(self, list_id: str) -> Message:
        """Address the message to a stored recipient list instead of explicit recipients."""
        self._recipients.set_stored_list(list_id)
        return self

    def get_cc(self) -> list[str]:
        return self._recipients.cc_view()

    def set_cc(self, value: AddressInput) -> Message:
        """Add visible copy recipients and rewrite the ``Cc`` header to list them."""
        self._recipients.add_cc(value)
        return self

    def get_bcc(self) -> str:
        """Blind copy recipients as a ``", "``-joined string."""
        return self._recipients.bcc_view()

    def set_bcc(self, value: AddressInput) -> Message:
        self._recipients.add_bcc(value)
        return self

    def get_headers(self) -> dict[str, str]:
        return dict(self._recipients.headers)

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    def get_subject(self) -> str | None:
        return self._subject

    def set_subject(self, subject: str) -> Message:
        self._subject = subject
        return self

    def get_text_body(self) -> str | None:
        return self._text

    def set_text_body(self, text: str) -> Message:
        self._text = text
        return self

    def get_html_body(self) -> str | None:
        return self._html

    def set_html_body(self, html: str) -> Message:
        self._html = html
        return self

    # ------------------------------------------------------------------
    # Transmission fields
    # ------------------------------------------------------------------

    @property
    def options(self) -> TransmissionOptions:
        return self._options

    def set_options(self, options: TransmissionOptions) -> Message:
        self._options = options
        return self

    @property
    def campaign_id(self) -> str:
        return self._campaign_id

    def set_campaign_id(self, campaign_id: str) -> Message:
        self._campaign_id = campaign_id
        return self

    @property
    def description(self) -> str:
        return self._description

    def set_description(self, description: str) -> Message:
        self._description = description
        return self

    @property
    def return_path(self) -> str:
        return self._return_path

    def set_return_path(self, return_path: str) -> Message:
        self._return_path = return_path
        return self

    @property
    def metadata(self) -> dict[str, Any]:
        return self._metadata

    def set_metadata(self, metadata: dict[str, Any]) -> Message:
        self._metadata = dict(metadata)
        return self

    # ------------------------------------------------------------------
    # Attachments and inline images
    # ------------------------------------------------------------------

    @property
    def attachments(self) -> list[AttachmentRecord]:
        return list(self._attachments)

    @property
    def images(self) -> list[ImageRecord]:
        return list(self._images)

    def attach(
        self,
        path: str | os.PathLike[str],
        *,
        file_name: str | None = None,
        content_type: str | None = None,
    ) -> Message:
        """Attach a file from disk.

        The attachment name defaults to the file's basename and the type
        to the sniffed MIME type.  Raises :class:`AttachmentReadError` if
        the file cannot be read.
        """
        if not path:
            return self
        content = self._file_reader(path)
        return self.attach_content(
            content,
            file_name=file_name or basename(path),
            content_type=content_type,
        )

    def attach_content(
        self,
        content: bytes | str,
        *,
        file_name: str | None = None,
        content_type: str | None = None,
    ) -> Message:
        """Attach in-memory content.  Empty content is ignored."""
        if not content:
            return self
        raw = _to_bytes(content)
        record = AttachmentRecord(
            mime_type=content_type or self._mime_sniffer(raw),
            name=file_name or f"file_{len(self._attachments)}",
            base64_data=encode_base64(raw),
        )
        self._attachments.append(record)
        logger.debug("attachment_added", name=record.name, mime_type=record.mime_type)
        return self

    def embed(
        self,
        path: str | os.PathLike[str],
        *,
        file_name: str | None = None,
        content_type: str | None = None,
    ) -> str | None:
        """Embed a file from disk and return its content id."""
        if not path:
            return None
        content = self._file_reader(path)
        return self.embed_content(
            content,
            file_name=file_name or basename(path),
            content_type=content_type,
        )

    def embed_content(
        self,
        content: bytes | str,
        *,
        file_name: str | None = None,
        content_type: str | None = None,
    ) -> str | None:
        """Embed in-memory content and return its content id.

        The id is *file_name* when given, ``image<index>`` otherwise.
        Content sniffed as ``image/*`` is rejected with
        :class:`InvalidArgumentError`.  Empty content is ignored and
        ``None`` returned.
        """
        if not content:
            return None
        raw = _to_bytes(content)
        mime_type = self._mime_sniffer(raw)
        if mime_type.startswith("image"):
            raise InvalidArgumentError(f"Content of type {mime_type} cannot be embedded")

        cid = file_name or f"image{len(self._images)}"
        self._images.append(
            ImageRecord(
                mime_type=content_type or mime_type,
                name=cid,
                base64_data=encode_base64(raw),
            )
        )
        logger.debug("image_embedded", cid=cid, mime_type=mime_type)
        return cid

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def to_string(self) -> str:
        """Human-readable recipient summary."""
        to = "; ".join(_describe(item) for item in self.get_to())
        cc = "; ".join(self.get_cc())
        bcc = "; ".join(email for email in self.get_bcc().split(", ") if email)
        return f"{self._subject or ''} - Recipients: [TO] {to} [CC] {cc} [BCC] {bcc}"

    def __str__(self) -> str:
        return self.to_string()

    def to_payload(self) -> dict[str, Any]:
        """Resolve copy recipients and build the transmissions API request body."""
        return build_transmission_payload(self)

    to_array = to_payload


def _to_bytes(content: bytes | str) -> bytes:
    if isinstance(content, str):
        return content.encode("utf-8")
    return content


def _describe(item: str | dict[str, str]) -> str:
    if isinstance(item, str):
        return item
    return ", ".join(f"{name} <{email}>" for email, name in item.items())
