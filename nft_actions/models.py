"""Domain models for NFT action descriptors and transaction preparation."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union


@dataclass(frozen=True)
class AssetState:
    mint: str
    name: str
    description: str
    image_uri: str
    price_lamports: Optional[int] = None

    @property
    def listed(self) -> bool:
        return self.price_lamports is not None


@dataclass(frozen=True)
class BuyAction:
    label: str
    price: str


@dataclass(frozen=True)
class MakeOfferAction:
    label: str


@dataclass(frozen=True)
class ActionDescriptor:
    icon: str
    label: str
    title: str
    description: str
    buy: Optional[BuyAction]
    make_offer: MakeOfferAction

    def to_dict(self) -> dict:
        return {
            "icon": self.icon,
            "label": self.label,
            "title": self.title,
            "description": self.description,
            "actions": {
                "buy": (
                    {"label": self.buy.label, "price": self.buy.price}
                    if self.buy is not None
                    else None
                ),
                "makeOffer": {"label": self.make_offer.label},
            },
        }


@dataclass(frozen=True)
class BuyIntent:
    account: str


@dataclass(frozen=True)
class OfferIntent:
    account: str
    offer_amount: float


TransactionIntent = Union[BuyIntent, OfferIntent]


@dataclass(frozen=True)
class UnsignedTransaction:
    """Serialized, unsigned transaction forwarded to the wallet untouched."""

    transaction: str

    def to_dict(self) -> dict:
        return {"transaction": self.transaction}


class FailureKind(Enum):
    NOT_FOUND = "NOT_FOUND"
    NOT_LISTED = "NOT_LISTED"
    SCHEMA_INVALID = "SCHEMA_INVALID"
    CONSTRUCTION_FAILED = "CONSTRUCTION_FAILED"


_STATUS_BY_KIND: Dict[FailureKind, int] = {
    FailureKind.NOT_FOUND: 422,
    FailureKind.NOT_LISTED: 422,
    FailureKind.SCHEMA_INVALID: 422,
    FailureKind.CONSTRUCTION_FAILED: 500,
}

GENERIC_FAILURE_MESSAGE = "Failed to prepare transaction"


@dataclass(frozen=True)
class ActionFailure:
    kind: FailureKind
    message: str

    @property
    def status_code(self) -> int:
        return _STATUS_BY_KIND[self.kind]

    def to_dict(self) -> dict:
        return {"message": self.message}

    @classmethod
    def not_found(cls, item_id: str) -> "ActionFailure":
        return cls(kind=FailureKind.NOT_FOUND, message=f"Item {item_id} not found")

    @classmethod
    def not_listed(cls, item_id: str) -> "ActionFailure":
        return cls(
            kind=FailureKind.NOT_LISTED,
            message=f"Item {item_id} is not listed for sale",
        )

    @classmethod
    def schema_invalid(cls, detail: str) -> "ActionFailure":
        return cls(kind=FailureKind.SCHEMA_INVALID, message=f"Invalid request: {detail}")

    @classmethod
    def construction_failed(cls) -> "ActionFailure":
        return cls(kind=FailureKind.CONSTRUCTION_FAILED, message=GENERIC_FAILURE_MESSAGE)


PrepareResult = Union[UnsignedTransaction, ActionFailure]
