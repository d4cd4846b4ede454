"""FastAPI surface for Tensor NFT buy/offer actions."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Annotated, Any, Callable, Dict, Optional, Tuple

from fastapi import FastAPI, Path, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from nft_actions.descriptor import build_descriptor
from nft_actions.models import ActionFailure, BuyIntent, OfferIntent, PrepareResult
from nft_actions.orchestrator import TransactionBuilder, TransactionOrchestrator
from nft_actions.resolver import AssetResolutionError, AssetResolver, AssetSource
from tensor_api.client import TensorApiClient
from tensor_api.rpc import SolanaRpcClient
from tensor_api.transactions import TensorTransactionBuilder
from web.config import Settings

logger = logging.getLogger(__name__)

ACTIONS_TAG = "Tensor NFT Actions"
EXAMPLE_ITEM_ID = "7DVeeik8cDUvHgqrTetG6fcDUHHZ8rW7dFHp1SsohKML"
ACTIONS_CORS_HEADERS = ["Content-Type", "Authorization", "Content-Encoding", "Accept-Encoding"]
RESOLUTION_FAILURE_MESSAGE = "Failed to resolve item"

ItemId = Annotated[
    str, Path(description="Tensor item (mint) address", examples=[EXAMPLE_ITEM_ID])
]


class ActionPostRequest(BaseModel):
    account: str = Field(
        ...,
        description="The Solana account paying for the transaction",
        examples=["YourSolanaAccountHere"],
    )


class OfferPostRequest(ActionPostRequest):
    offer_amount: float = Field(
        ...,
        alias="offerAmount",
        gt=0,
        strict=True,
        allow_inf_nan=False,
        description="The amount of the offer in SOL",
        examples=[1.5],
    )


class ActionError(BaseModel):
    message: str


class BuyActionModel(BaseModel):
    label: str
    price: str


class MakeOfferActionModel(BaseModel):
    label: str


class ActionsModel(BaseModel):
    buy: Optional[BuyActionModel] = None
    makeOffer: MakeOfferActionModel


class ActionGetResponse(BaseModel):
    icon: str
    label: str
    title: str
    description: str
    actions: ActionsModel


class ActionPostResponse(BaseModel):
    transaction: str


@dataclass(frozen=True)
class ActionServices:
    resolver: AssetResolver
    orchestrator: TransactionOrchestrator


@dataclass(frozen=True)
class ActionRoute:
    method: str
    path: str
    endpoint: Callable[..., Any]
    summary: str
    response_model: type


async def get_item(item_id: ItemId, request: Request) -> JSONResponse:
    services = _services(request)
    state = await services.resolver.resolve(item_id)
    if state is None:
        return _failure_response(ActionFailure.not_found(item_id))
    return JSONResponse(build_descriptor(state).to_dict())


async def post_buy(
    item_id: ItemId, payload: ActionPostRequest, request: Request
) -> JSONResponse:
    result = await _services(request).orchestrator.prepare(
        item_id, BuyIntent(account=payload.account)
    )
    return _result_response(result)


async def post_offer(
    item_id: ItemId, payload: OfferPostRequest, request: Request
) -> JSONResponse:
    intent = OfferIntent(account=payload.account, offer_amount=payload.offer_amount)
    result = await _services(request).orchestrator.prepare(item_id, intent)
    return _result_response(result)


ROUTES: Tuple[ActionRoute, ...] = (
    ActionRoute("GET", "/item/{item_id}", get_item, "Describe item actions", ActionGetResponse),
    ActionRoute("POST", "/item/{item_id}/buy", post_buy, "Prepare a buy-now transaction", ActionPostResponse),
    ActionRoute("POST", "/item/{item_id}/offer", post_offer, "Prepare an offer transaction", ActionPostResponse),
)

_ERROR_RESPONSES: Dict[int, Dict[str, Any]] = {
    422: {"model": ActionError, "description": "Item not found, not listed, or invalid request"},
    500: {"model": ActionError, "description": "Transaction preparation failed"},
}


def create_app(
    settings: Optional[Settings] = None,
    asset_source: Optional[AssetSource] = None,
    transaction_builder: Optional[TransactionBuilder] = None,
) -> FastAPI:
    settings = settings or Settings.from_env()
    if asset_source is None or transaction_builder is None:
        api = TensorApiClient(
            settings.tensor_api_url,
            api_key=settings.tensor_api_key,
            timeout=settings.http_timeout_s,
        )
        asset_source = asset_source or api
        transaction_builder = transaction_builder or TensorTransactionBuilder(
            api, SolanaRpcClient(settings.solana_rpc_url, timeout=settings.http_timeout_s)
        )

    resolver = AssetResolver(asset_source)
    app = FastAPI(title="NFT Actions", description="Solana actions for Tensor NFT listings")
    app.state.services = ActionServices(
        resolver=resolver,
        orchestrator=TransactionOrchestrator(resolver, transaction_builder),
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allow_origins),
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=ACTIONS_CORS_HEADERS,
    )

    for route in ROUTES:
        app.add_api_route(
            route.path,
            route.endpoint,
            methods=[route.method],
            tags=[ACTIONS_TAG],
            summary=route.summary,
            responses={200: {"model": route.response_model}, **_ERROR_RESPONSES},
        )

    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(AssetResolutionError, _handle_resolution_error)
    return app


async def _handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _failure_response(ActionFailure.schema_invalid(_describe_validation(exc)))


async def _handle_resolution_error(request: Request, exc: AssetResolutionError) -> JSONResponse:
    logger.error("Item resolution failed for %s", request.url.path, exc_info=exc)
    return JSONResponse({"message": RESOLUTION_FAILURE_MESSAGE}, status_code=500)


def _services(request: Request) -> ActionServices:
    return request.app.state.services


def _result_response(result: PrepareResult) -> JSONResponse:
    if isinstance(result, ActionFailure):
        return _failure_response(result)
    return JSONResponse(result.to_dict())


def _failure_response(failure: ActionFailure) -> JSONResponse:
    return JSONResponse(failure.to_dict(), status_code=failure.status_code)


def _describe_validation(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "malformed request"
