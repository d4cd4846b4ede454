"""Map a resolved asset onto the action protocol's descriptor."""

from .models import ActionDescriptor, AssetState, BuyAction, MakeOfferAction
from .units import format_sol_price

BUY_LABEL = "BUY"
MAKE_OFFER_LABEL = "MAKE OFFER"
UNLISTED_LABEL = "Make an Offer"


def build_descriptor(state: AssetState) -> ActionDescriptor:
    buy = None
    label = UNLISTED_LABEL
    if state.price_lamports is not None:
        price = format_sol_price(state.price_lamports)
        buy = BuyAction(label=BUY_LABEL, price=price)
        label = price

    return ActionDescriptor(
        icon=state.image_uri,
        label=label,
        title=state.name,
        description=state.description,
        buy=buy,
        make_offer=MakeOfferAction(label=MAKE_OFFER_LABEL),
    )
