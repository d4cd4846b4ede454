from .descriptor import build_descriptor
from .models import (
    ActionDescriptor,
    ActionFailure,
    AssetState,
    BuyAction,
    BuyIntent,
    FailureKind,
    MakeOfferAction,
    OfferIntent,
    TransactionIntent,
    UnsignedTransaction,
)
from .orchestrator import TransactionBuilder, TransactionOrchestrator
from .resolver import AssetResolutionError, AssetResolver, AssetSource

__all__ = [
    "ActionDescriptor",
    "ActionFailure",
    "AssetResolutionError",
    "AssetResolver",
    "AssetSource",
    "AssetState",
    "BuyAction",
    "BuyIntent",
    "FailureKind",
    "MakeOfferAction",
    "OfferIntent",
    "TransactionBuilder",
    "TransactionIntent",
    "TransactionOrchestrator",
    "UnsignedTransaction",
    "build_descriptor",
]
