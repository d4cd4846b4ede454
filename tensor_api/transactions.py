"""Build unsigned buy and bid transactions through the Tensor API."""

from __future__ import annotations

import base64
from typing import Any, Optional

from nft_actions.units import sol_to_lamports

from .client import TensorApiClient
from .rpc import SolanaRpcClient

_TX_KEYS = ("txV0", "tx")


class TensorTransactionBuilder:
    """Returns base64 serialized transactions, or ``None`` when Tensor has none."""

    def __init__(self, api: TensorApiClient, rpc: SolanaRpcClient) -> None:
        self._api = api
        self._rpc = rpc

    async def build_buy_transaction(self, mint: str, account: str) -> Optional[str]:
        blockhash = await self._rpc.get_latest_blockhash()
        data = await self._api.get_json(
            "/api/v1/tx/buy",
            {"buyer": account, "mint": mint, "blockhash": blockhash},
        )
        return first_transaction(data)

    async def build_offer_transaction(
        self, mint: str, account: str, amount: float
    ) -> Optional[str]:
        price = sol_to_lamports(amount)
        if price <= 0:
            return None

        blockhash = await self._rpc.get_latest_blockhash()
        data = await self._api.get_json(
            "/api/v1/tx/bid",
            {
                "owner": account,
                "mint": mint,
                "price": str(price),
                "blockhash": blockhash,
            },
        )
        return first_transaction(data)


def first_transaction(data: Any) -> Optional[str]:
    if not isinstance(data, dict):
        return None
    for entry in data.get("txs") or ():
        if not isinstance(entry, dict):
            continue
        for key in _TX_KEYS:
            encoded = _encode(entry.get(key))
            if encoded:
                return encoded
    return None


def _encode(raw: Any) -> Optional[str]:
    # Node Buffers serialize as {"type": "Buffer", "data": [...]}.
    if isinstance(raw, dict):
        raw = raw.get("data")
    if isinstance(raw, str):
        return raw or None
    if isinstance(raw, list) and raw:
        return base64.b64encode(bytes(raw)).decode("ascii")
    return None
