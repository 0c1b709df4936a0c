"""CosmWasm LCD smart-query client."""

import logging
from typing import Any, Optional

import httpx

from nft_market.contracts.base import ContractError, ContractQuerier
from nft_market.services.envelope import encode_msg

logger = logging.getLogger(__name__)


def _make_url_safe(payload: str) -> str:
    """Base64 inside a URL path segment must not contain + or /."""
    return payload.replace("+", "-").replace("/", "_")


class LcdClient(ContractQuerier):
    def __init__(self, base_url: str, timeout: float = 30.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._base_url = base_url
        self._timeout = timeout
        self._transport = transport
        self._http: Optional[httpx.AsyncClient] = None

    async def initialize(self) -> None:
        self._http = httpx.AsyncClient(
            base_url=self._base_url, timeout=self._timeout,
            headers={"Accept": "application/json"}, transport=self._transport,
        )

    async def close(self) -> None:
        if self._http:
            await self._http.aclose()
            self._http = None

    async def _request(self, method: str, endpoint: str, **kwargs) -> Any:
        if self._http is None:
            await self.initialize()
        resp = await self._http.request(method, endpoint, **kwargs)
        if resp.status_code == 429:
            raise ContractError("Rate limit exceeded", self._base_url, "429")
        resp.raise_for_status()
        return resp.json()

    async def query_contract(self, contract_address: str, query_msg: dict) -> Any:
        encoded = _make_url_safe(encode_msg(query_msg))
        data = await self._request("GET", f"/cosmwasm/wasm/v1/contract/{contract_address}/smart/{encoded}")
        logger.debug(f"Smart query {next(iter(query_msg))} on {contract_address} answered")
        return data.get("data")
