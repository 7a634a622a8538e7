"""Async HTTP client for the SparkPost transmissions endpoint."""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from .config import SparkPostAPIConfig
from .message import Message

logger = structlog.get_logger()

TRANSMISSIONS_PATH = "/api/v1/transmissions"


class TransmissionClient:
    """Delivers :class:`Message` payloads to the transmissions API over HTTP."""

    def __init__(self, config: SparkPostAPIConfig) -> None:
        self._config = config
        self._client: httpx.AsyncClient | None = None

    async def start(self) -> None:
        headers = {"Content-Type": "application/json"}
        if self._config.api_key is not None:
            headers["Authorization"] = self._config.api_key.get_secret_value()

        self._client = httpx.AsyncClient(
            base_url=self._config.base_url,
            timeout=httpx.Timeout(self._config.timeout_seconds),
            headers=headers,
        )
        logger.info("transmission_client_started", base_url=self._config.base_url)

    async def stop(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            logger.info("transmission_client_stopped")

    async def send(self, message: Message) -> dict[str, Any]:
        """POST the message payload and return the ``results`` object.

        Raises :class:`httpx.HTTPStatusError` on non-2xx responses.
        """
        if self._client is None:
            raise AssertionError("Client not started")

        payload = message.to_payload()
        response = await self._client.post(TRANSMISSIONS_PATH, json=payload)
        response.raise_for_status()

        results: dict[str, Any] = response.json().get("results", {})
        logger.info(
            "transmission_sent",
            transmission_id=results.get("id"),
            accepted=results.get("total_accepted_recipients"),
            rejected=results.get("total_rejected_recipients"),
        )
        return results
