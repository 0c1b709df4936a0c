from pydantic import BaseModel

from nft_market.schemas.asset import Asset, AssetInfo
from nft_market.schemas.market import Expiration, InstantiateMsg, Royalty


class InitRequest(InstantiateMsg):
    pass


class AddCollectionRequest(BaseModel):
    nft_address: str
    support_assets: list[AssetInfo]
    royalties: list[Royalty] = []


class UpdateCollectionRequest(BaseModel):
    support_assets: list[AssetInfo] | None = None
    royalties: list[Royalty] | None = None


class FixedPriceOrderRequest(BaseModel):
    nft_address: str
    token_id: str
    price: Asset


class AuctionOrderRequest(BaseModel):
    nft_address: str
    token_id: str
    start_price: Asset
    expiration: Expiration
    fixed_price: Asset | None = None


class BidRequest(BaseModel):
    bid_price: Asset


class CoinData(BaseModel):
    denom: str
    amount: str


class MessageData(BaseModel):
    type_url: str
    sender: str
    contract: str | None = None
    code_id: str | None = None
    msg: dict
    funds: list[CoinData]
    description: str


class PrepareResponse(BaseModel):
    message: MessageData
