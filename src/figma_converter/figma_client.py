"""Minimal Figma REST client used to fetch design files."""
from __future__ import annotations

import logging
from typing import Any

import httpx

from figma_converter.errors import NetworkError, figma_error_from_status

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.figma.com/v1"


class FigmaClient:
    """Thin wrapper around :mod:`httpx` that maps failures to converter errors."""

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            headers={"X-Figma-Token": token, "Content-Type": "application/json"},
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    def get_file(self, file_id: str) -> dict[str, Any]:
        """Fetch a file document by id.

        Raises FigmaApiError on non-2xx responses and NetworkError when
        the API cannot be reached.
        """
        try:
            resp = self._client.get(f"/files/{file_id}")
        except httpx.TimeoutException as exc:
            raise NetworkError(f"Timed out fetching Figma file {file_id}", cause=exc) from exc
        except httpx.TransportError as exc:
            raise NetworkError(
                "Failed to connect to Figma API. Please check your internet connection.",
                cause=exc,
            ) from exc

        if resp.status_code >= 300:
            logger.warning("Figma API returned %d for file %s", resp.status_code, file_id)
            raise figma_error_from_status(resp.status_code, resp.text)
        return resp.json()

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> FigmaClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
