"""Resolve item identifiers into fresh marketplace snapshots."""

import logging
from typing import Optional, Protocol

from .models import AssetState

logger = logging.getLogger(__name__)


class AssetResolutionError(RuntimeError):
    """Raised when the marketplace data source fails to answer a lookup."""


class AssetRecordLike(Protocol):
    mint: str
    name: str
    description: str
    image_uri: str
    price: Optional[str]


class AssetSource(Protocol):
    async def fetch_asset(self, item_id: str) -> Optional[AssetRecordLike]:
        ...


class AssetResolver:
    """Looks an item up on every call; results are never cached."""

    def __init__(self, source: AssetSource) -> None:
        self._source = source

    async def resolve(self, item_id: str) -> Optional[AssetState]:
        if not item_id:
            raise ValueError("Item id must be a non-empty string.")

        logger.debug("Resolving item %s", item_id)
        try:
            record = await self._source.fetch_asset(item_id)
            if record is None:
                return None
            return to_asset_state(record)
        except Exception as exc:
            raise AssetResolutionError(f"Lookup failed for item {item_id}.") from exc


def to_asset_state(record: AssetRecordLike) -> AssetState:
    return AssetState(
        mint=record.mint,
        name=record.name,
        description=record.description,
        image_uri=record.image_uri,
        price_lamports=_parse_price(record.price),
    )


def _parse_price(price: Optional[str]) -> Optional[int]:
    if price is None or str(price).strip() == "":
        return None
    return int(str(price).strip())
