"""Turn buy/offer intents into unsigned transactions or typed failures."""

import logging
from typing import Optional, Protocol

from .models import (
    ActionFailure,
    AssetState,
    BuyIntent,
    OfferIntent,
    PrepareResult,
    TransactionIntent,
    UnsignedTransaction,
)
from .resolver import AssetResolver

logger = logging.getLogger(__name__)


class TransactionBuilder(Protocol):
    async def build_buy_transaction(self, mint: str, account: str) -> Optional[str]:
        ...

    async def build_offer_transaction(
        self, mint: str, account: str, amount: float
    ) -> Optional[str]:
        ...


class TransactionOrchestrator:
    """Prepares unsigned transactions; never signs or submits them.

    Every call resolves the item again so the transaction reflects the
    marketplace state at preparation time. Failures raised by collaborators
    are logged here and reported to callers only as a generic
    ``CONSTRUCTION_FAILED`` result.
    """

    def __init__(self, resolver: AssetResolver, builder: TransactionBuilder) -> None:
        self._resolver = resolver
        self._builder = builder

    async def prepare(self, item_id: str, intent: TransactionIntent) -> PrepareResult:
        action = _intent_name(intent)
        try:
            state = await self._resolver.resolve(item_id)
            if state is None:
                return ActionFailure.not_found(item_id)

            if isinstance(intent, BuyIntent) and not state.listed:
                return ActionFailure.not_listed(item_id)

            transaction = await self._build(state, intent)
        except Exception:
            logger.exception("Failed to prepare %s transaction for %s", action, item_id)
            return ActionFailure.construction_failed()

        if not transaction:
            logger.error(
                "Transaction builder returned no %s transaction for %s (mint %s)",
                action,
                item_id,
                state.mint,
            )
            return ActionFailure.construction_failed()

        return UnsignedTransaction(transaction=transaction)

    async def _build(self, state: AssetState, intent: TransactionIntent) -> Optional[str]:
        if isinstance(intent, BuyIntent):
            return await self._builder.build_buy_transaction(state.mint, intent.account)
        if isinstance(intent, OfferIntent):
            return await self._builder.build_offer_transaction(
                state.mint, intent.account, intent.offer_amount
            )
        raise TypeError(f"Unsupported intent: {type(intent).__name__}")


def _intent_name(intent: TransactionIntent) -> str:
    if isinstance(intent, OfferIntent):
        return "offer"
    return "buy"
