"""Minimal Solana JSON-RPC client used for transaction blockhashes."""

from __future__ import annotations

from typing import Any, Optional

import httpx


class SolanaRpcError(RuntimeError):
    """Raised when the Solana RPC node fails or returns an error object."""


class SolanaRpcClient:
    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        commitment: str = "confirmed",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._commitment = commitment
        self._transport = transport

    async def get_latest_blockhash(self) -> str:
        result = await self.call("getLatestBlockhash", [{"commitment": self._commitment}])
        try:
            return str(result["value"]["blockhash"])
        except (KeyError, TypeError) as exc:
            raise SolanaRpcError("getLatestBlockhash returned an unexpected result.") from exc

    async def call(self, method: str, params: list) -> Any:
        body = {"jsonrpc": "2.0", "id": 1, "method": method, "params": params}
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            try:
                response = await client.post(self._url, json=body)
                response.raise_for_status()
                payload = response.json()
            except (httpx.HTTPError, ValueError) as exc:
                raise SolanaRpcError(f"RPC call {method} failed.") from exc

        if not isinstance(payload, dict):
            raise SolanaRpcError(f"RPC call {method} returned a non-object response.")
        if payload.get("error"):
            raise SolanaRpcError(f"RPC call {method} returned an error: {payload['error']}")
        return payload.get("result")
