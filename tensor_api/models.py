"""Records returned by the Tensor marketplace API."""

from dataclasses import dataclass
from typing import Any, Mapping, Optional


class TensorApiError(RuntimeError):
    """Raised when the Tensor API cannot be reached or answers unexpectedly."""


@dataclass(frozen=True)
class AssetRecord:
    mint: str
    name: str
    description: str
    image_uri: str
    price: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "AssetRecord":
        mint = payload.get("mint")
        if not mint:
            raise TensorApiError("Mint payload is missing the mint address.")

        listing = payload.get("listing") or {}
        price = payload.get("price", listing.get("price"))
        return cls(
            mint=str(mint),
            name=str(payload.get("name") or ""),
            description=str(payload.get("description") or ""),
            image_uri=str(payload.get("imageUri") or ""),
            price=str(price) if price not in (None, "") else None,
        )
