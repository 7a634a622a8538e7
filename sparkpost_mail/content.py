"""Attachment and inline image records plus the file helpers they need."""

from __future__ import annotations

import base64
import os
from dataclasses import dataclass
from pathlib import Path

from .errors import AttachmentReadError


@dataclass(frozen=True)
class AttachmentRecord:
    """A file attached to the transmission."""

    mime_type: str
    name: str
    base64_data: str

    def to_wire(self) -> dict[str, str]:
        return {"type": self.mime_type, "name": self.name, "data": self.base64_data}


@dataclass(frozen=True)
class ImageRecord(AttachmentRecord):
    """An inline image; ``name`` doubles as its content id."""


def read_file(path: str | os.PathLike[str]) -> bytes:
    """Read a whole file, raising :class:`AttachmentReadError` on failure."""
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise AttachmentReadError(f"Cannot read {os.fspath(path)}: {exc.strerror or exc}") from exc


def encode_base64(content: bytes) -> str:
    return base64.b64encode(content).decode("ascii")


def basename(path: str | os.PathLike[str]) -> str:
    return Path(path).name
