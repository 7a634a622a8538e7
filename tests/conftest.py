"""Shared test fixtures for the sparkpost_mail test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from sparkpost_mail.config import SparkPostAPIConfig, TransmissionOptions
from sparkpost_mail.message import Message

PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR fake png"
PDF_BYTES = b"%PDF-1.4 fake pdf content"


def fake_sniffer(content: bytes) -> str:
    """Deterministic stand-in for libmagic."""
    if content.startswith(b"\x89PNG"):
        return "image/png"
    if content.startswith(b"%PDF"):
        return "application/pdf"
    return "text/plain"


@pytest.fixture
def options() -> TransmissionOptions:
    return TransmissionOptions()


@pytest.fixture
def api_config() -> SparkPostAPIConfig:
    return SparkPostAPIConfig(
        base_url="http://test-sparkpost:8000",
        timeout_seconds=5.0,
        api_key="test-key",
    )


@pytest.fixture
def message(options: TransmissionOptions) -> Message:
    return Message(options=options, mime_sniffer=fake_sniffer)


@pytest.fixture
def addressed_message(message: Message) -> Message:
    """Message with one To, one Cc and one Bcc recipient."""
    return (
        message.set_from({"noreply@example.com": "Example"})
        .set_to("main@example.com")
        .set_cc("cc@example.com")
        .set_bcc("bcc@example.com")
        .set_subject("Quarterly report")
    )


@pytest.fixture
def pdf_file(tmp_path: Path) -> Path:
    path = tmp_path / "report.pdf"
    path.write_bytes(PDF_BYTES)
    return path


@pytest.fixture
def png_file(tmp_path: Path) -> Path:
    path = tmp_path / "logo.png"
    path.write_bytes(PNG_BYTES)
    return path
