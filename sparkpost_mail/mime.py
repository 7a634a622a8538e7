"""MIME type detection from raw bytes."""

from __future__ import annotations

from collections.abc import Callable

MimeSniffer = Callable[[bytes], str]


def sniff_mime_type(content: bytes) -> str:
    """Detect the MIME type of *content* with libmagic."""
    import magic

    result: str = magic.from_buffer(content[:2048], mime=True)
    return result
