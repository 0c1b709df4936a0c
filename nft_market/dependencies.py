from fastapi import Depends, Header, Request

from nft_market.config import settings
from nft_market.contracts.base import ContractQuerier
from nft_market.contracts.nft_market import NftMarketContract


def get_querier(request: Request) -> ContractQuerier:
    return request.app.state.lcd_client


def build_market(querier: ContractQuerier, sender: str) -> NftMarketContract:
    return NftMarketContract(
        querier,
        settings.market_contract_address,
        sender,
        code_id=settings.market_code_id or None,
        label=settings.market_label,
        admin=settings.market_admin,
    )


def get_market(querier: ContractQuerier = Depends(get_querier)) -> NftMarketContract:
    return build_market(querier, sender="")


def get_sender_market(
    x_sender_address: str = Header(..., alias="X-Sender-Address"),
    querier: ContractQuerier = Depends(get_querier),
) -> NftMarketContract:
    return build_market(querier, sender=x_sender_address)
