"""Async read client for the Tensor marketplace REST API."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from .models import AssetRecord, TensorApiError

logger = logging.getLogger(__name__)

API_KEY_HEADER = "x-tensor-api-key"


class TensorApiClient:
    """Thin wrapper around ``httpx.AsyncClient``.

    A client is opened per call and closed afterwards; connection pooling is
    left to httpx. No retries are attempted.
    """

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout
        self._transport = transport

    async def fetch_asset(self, item_id: str) -> Optional[AssetRecord]:
        data = await self.get_json("/api/v1/mint", {"mints": item_id})
        if not data:
            return None
        entry = data[0] if isinstance(data, list) else data
        if not isinstance(entry, Mapping):
            raise TensorApiError(f"Unexpected mint payload for {item_id}.")
        return AssetRecord.from_payload(entry)

    async def get_json(self, path: str, params: Mapping[str, Any]) -> Any:
        """GET ``path`` and decode JSON; a 404 decodes to ``None``."""
        async with self._client() as client:
            try:
                response = await client.get(path, params=dict(params))
            except httpx.HTTPError as exc:
                raise TensorApiError(f"Tensor API request to {path} failed.") from exc

        logger.debug("GET %s -> %s", path, response.status_code)
        if response.status_code == 404:
            return None
        if response.is_error:
            raise TensorApiError(
                f"Tensor API request to {path} returned {response.status_code}."
            )
        try:
            return response.json()
        except ValueError as exc:
            raise TensorApiError(f"Tensor API returned invalid JSON for {path}.") from exc

    def _client(self) -> httpx.AsyncClient:
        headers: Dict[str, str] = {"Accept": "application/json"}
        if self._api_key:
            headers[API_KEY_HEADER] = self._api_key
        return httpx.AsyncClient(
            base_url=self._base_url,
            headers=headers,
            timeout=self._timeout,
            transport=self._transport,
        )
