"""Tensor API client and transaction builder tests against mock transports."""

import base64
import json
import unittest

import httpx

from tensor_api.client import TensorApiClient
from tensor_api.models import AssetRecord, TensorApiError
from tensor_api.rpc import SolanaRpcClient, SolanaRpcError
from tensor_api.transactions import TensorTransactionBuilder, first_transaction

_BASE_URL = "https://tensor.test"
_RPC_URL = "https://rpc.test"

_MINT_PAYLOAD = {
    "mint": "MintABC",
    "name": "Mad Lad #1",
    "description": "A mad lad.",
    "imageUri": "https://example.test/1.png",
    "listing": {"price": "1500000000"},
}


def _api(handler, api_key=None) -> TensorApiClient:
    return TensorApiClient(_BASE_URL, api_key=api_key, transport=httpx.MockTransport(handler))


def _rpc(blockhash="Blockhash111") -> SolanaRpcClient:
    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        assert body["method"] == "getLatestBlockhash"
        return httpx.Response(
            200,
            json={"jsonrpc": "2.0", "id": 1, "result": {"value": {"blockhash": blockhash}}},
        )

    return SolanaRpcClient(_RPC_URL, transport=httpx.MockTransport(handler))


class TensorApiClientTests(unittest.IsolatedAsyncioTestCase):
    async def test_fetch_asset_parses_record(self) -> None:
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["mints"] = request.url.params.get("mints")
            seen["key"] = request.headers.get("x-tensor-api-key")
            return httpx.Response(200, json=[_MINT_PAYLOAD])

        record = await _api(handler, api_key="k-123").fetch_asset("ABC123")

        self.assertEqual(
            record,
            AssetRecord(
                mint="MintABC",
                name="Mad Lad #1",
                description="A mad lad.",
                image_uri="https://example.test/1.png",
                price="1500000000",
            ),
        )
        self.assertEqual(seen, {"path": "/api/v1/mint", "mints": "ABC123", "key": "k-123"})

    async def test_unlisted_record_has_no_price(self) -> None:
        payload = {key: value for key, value in _MINT_PAYLOAD.items() if key != "listing"}
        record = await _api(lambda request: httpx.Response(200, json=[payload])).fetch_asset("X")
        self.assertIsNone(record.price)

    async def test_missing_asset_is_none(self) -> None:
        self.assertIsNone(await _api(lambda request: httpx.Response(200, json=[])).fetch_asset("X"))
        self.assertIsNone(await _api(lambda request: httpx.Response(404)).fetch_asset("X"))

    async def test_server_error_raises(self) -> None:
        with self.assertRaises(TensorApiError):
            await _api(lambda request: httpx.Response(503, text="busy")).fetch_asset("X")

    async def test_invalid_json_raises(self) -> None:
        with self.assertRaises(TensorApiError):
            await _api(lambda request: httpx.Response(200, text="<html>")).fetch_asset("X")

    async def test_transport_error_raises(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with self.assertRaises(TensorApiError):
            await _api(handler).fetch_asset("X")

    async def test_payload_without_mint_raises(self) -> None:
        with self.assertRaises(TensorApiError):
            await _api(lambda request: httpx.Response(200, json=[{"name": "x"}])).fetch_asset("X")


class SolanaRpcClientTests(unittest.IsolatedAsyncioTestCase):
    async def test_latest_blockhash(self) -> None:
        self.assertEqual(await _rpc("Hash999").get_latest_blockhash(), "Hash999")

    async def test_rpc_error_object_raises(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"jsonrpc": "2.0", "id": 1, "error": {"code": -32000}})

        client = SolanaRpcClient(_RPC_URL, transport=httpx.MockTransport(handler))
        with self.assertRaises(SolanaRpcError):
            await client.get_latest_blockhash()

    async def test_non_object_response_raises(self) -> None:
        for body in ([1, 2], "ok", 7):
            client = SolanaRpcClient(
                _RPC_URL,
                transport=httpx.MockTransport(lambda request, body=body: httpx.Response(200, json=body)),
            )
            with self.assertRaises(SolanaRpcError):
                await client.get_latest_blockhash()


class TensorTransactionBuilderTests(unittest.IsolatedAsyncioTestCase):
    async def test_buy_transaction_from_buffer(self) -> None:
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["params"] = dict(request.url.params)
            return httpx.Response(
                200, json={"txs": [{"tx": {"type": "Buffer", "data": [1, 2, 3]}, "txV0": None}]}
            )

        builder = TensorTransactionBuilder(_api(handler), _rpc("Hash1"))
        encoded = await builder.build_buy_transaction("MintABC", "W1")

        self.assertEqual(encoded, base64.b64encode(bytes([1, 2, 3])).decode("ascii"))
        self.assertEqual(seen["path"], "/api/v1/tx/buy")
        self.assertEqual(
            seen["params"], {"buyer": "W1", "mint": "MintABC", "blockhash": "Hash1"}
        )

    async def test_offer_transaction_prices_in_lamports(self) -> None:
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["params"] = dict(request.url.params)
            return httpx.Response(200, json={"txs": [{"txV0": "AQID"}]})

        builder = TensorTransactionBuilder(_api(handler), _rpc("Hash2"))
        encoded = await builder.build_offer_transaction("MintABC", "W1", 2.0)

        self.assertEqual(encoded, "AQID")
        self.assertEqual(seen["path"], "/api/v1/tx/bid")
        self.assertEqual(seen["params"]["owner"], "W1")
        self.assertEqual(seen["params"]["price"], "2000000000")
        self.assertEqual(seen["params"]["blockhash"], "Hash2")

    async def test_sub_lamport_offer_is_not_sent(self) -> None:
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"txs": [{"txV0": "AQID"}]})

        builder = TensorTransactionBuilder(_api(handler), _rpc())

        self.assertIsNone(await builder.build_offer_transaction("MintABC", "W1", 1e-12))
        self.assertEqual(requests, [])

    async def test_no_transactions_returns_none(self) -> None:
        builder = TensorTransactionBuilder(
            _api(lambda request: httpx.Response(200, json={"txs": []})), _rpc()
        )
        self.assertIsNone(await builder.build_buy_transaction("MintABC", "W1"))

    def test_first_transaction_prefers_versioned(self) -> None:
        data = {"txs": [{"txV0": {"type": "Buffer", "data": [9]}, "tx": "legacy"}]}
        self.assertEqual(first_transaction(data), base64.b64encode(b"\x09").decode("ascii"))
        self.assertIsNone(first_transaction(None))
        self.assertIsNone(first_transaction({"txs": [{"tx": {"type": "Buffer", "data": []}}]}))


if __name__ == "__main__":
    unittest.main()
