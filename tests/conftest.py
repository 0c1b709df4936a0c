"""Shared fixtures: an in-memory querier standing in for the LCD."""

from typing import Any, Optional

import pytest

from nft_market.contracts.base import ContractQuerier
from nft_market.contracts.nft_market import NftMarketContract

MARKET_ADDRESS = "terra1market"
SENDER_ADDRESS = "terra1sender"
ADMIN_ADDRESS = "terra1admin"


class FakeQuerier(ContractQuerier):
    """Answers smart queries from a dict keyed by query name and records every call."""

    def __init__(self, responses: Optional[dict] = None, error: Optional[Exception] = None):
        self.responses = responses or {}
        self.error = error
        self.calls: list[tuple[str, dict]] = []

    async def query_contract(self, contract_address: str, query_msg: dict) -> Any:
        self.calls.append((contract_address, query_msg))
        if self.error is not None:
            raise self.error
        return self.responses[next(iter(query_msg))]


def order_data(order_id: int, price: dict, **extra) -> dict:
    data = {
        "order_id": order_id,
        "order_type": "fixed_price",
        "seller_address": "terra1seller",
        "nft_address": "terra1nft",
        "token_id": "1",
        "price": price,
        "expiration": {"never": {}},
    }
    data.update(extra)
    return data


@pytest.fixture
def querier() -> FakeQuerier:
    return FakeQuerier()


@pytest.fixture
def market(querier: FakeQuerier) -> NftMarketContract:
    return NftMarketContract(
        querier, MARKET_ADDRESS, SENDER_ADDRESS, code_id=7, label="nft-market", admin=ADMIN_ADDRESS,
    )
