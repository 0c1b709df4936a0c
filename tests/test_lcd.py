"""Tests for the LCD smart-query client against a mocked HTTP transport."""

import base64
import json

import httpx
import pytest

from nft_market.contracts.base import ContractError
from nft_market.contracts.lcd import LcdClient

LCD_URL = "https://lcd.test"


def make_client(handler) -> LcdClient:
    return LcdClient(LCD_URL, timeout=5.0, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_smart_query_path_and_result():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        return httpx.Response(200, json={"data": {"owner": "terra1owner"}})

    client = make_client(handler)
    try:
        result = await client.query_contract("terra1market", {"config": {}})
    finally:
        await client.close()

    assert result == {"owner": "terra1owner"}
    prefix = "/cosmwasm/wasm/v1/contract/terra1market/smart/"
    assert seen["path"].startswith(prefix)
    encoded = seen["path"][len(prefix):]
    assert json.loads(base64.urlsafe_b64decode(encoded)) == {"config": {}}


@pytest.mark.asyncio
async def test_query_segment_is_url_safe():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        return httpx.Response(200, json={"data": []})

    client = make_client(handler)
    await client.query_contract("terra1market", {"orders": {"seller_address": "??>>~~~"}})
    await client.close()

    encoded = seen["path"].rsplit("/", 1)[1]
    raw = json.dumps({"orders": {"seller_address": "??>>~~~"}}, separators=(",", ":")).encode()
    assert encoded == base64.b64encode(raw).decode().replace("+", "-").replace("/", "_")
    assert "+" not in encoded and "/" not in encoded
    assert json.loads(base64.urlsafe_b64decode(encoded)) == {"orders": {"seller_address": "??>>~~~"}}


@pytest.mark.asyncio
async def test_rate_limit_raises_contract_error():
    client = make_client(lambda request: httpx.Response(429))
    with pytest.raises(ContractError) as exc_info:
        await client.query_contract("terra1market", {"config": {}})
    await client.close()
    assert exc_info.value.code == "429"


@pytest.mark.asyncio
async def test_http_failure_propagates():
    client = make_client(lambda request: httpx.Response(500, json={"message": "order not found"}))
    with pytest.raises(httpx.HTTPStatusError):
        await client.query_contract("terra1market", {"order": {"order_id": 404}})
    await client.close()
