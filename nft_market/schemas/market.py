"""Marketplace entities as returned by the contract's query endpoints, plus admin payloads."""

from decimal import Decimal
from enum import Enum
from typing import Annotated, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_serializer

from nft_market.schemas.asset import Asset, AssetInfo

# cosmwasm Decimal only parses plain positional notation, never "1E-7"
DecimalStr = Annotated[Decimal, PlainSerializer(lambda v: f"{v:f}", return_type=str, when_used="json")]
Rate = Annotated[DecimalStr, Field(ge=0)]


class ExpiresAtHeight(BaseModel):
    model_config = ConfigDict(extra="forbid")

    at_height: int = Field(ge=0)


class ExpiresAtTime(BaseModel):
    model_config = ConfigDict(extra="forbid")

    at_time: int = Field(ge=0)  # unix nanoseconds

    @field_serializer("at_time")
    def _nanos_as_uint64(self, at_time: int) -> str:
        return str(at_time)


class NeverExpires(BaseModel):
    model_config = ConfigDict(extra="forbid")

    never: dict


Expiration = Union[ExpiresAtHeight, ExpiresAtTime, NeverExpires]


class Royalty(BaseModel):
    address: str
    royalty_rate: Rate


class CollectionInfo(BaseModel):
    nft_address: str
    support_assets: list[AssetInfo]
    royalties: list[Royalty]


class OrderType(str, Enum):
    FIXED_PRICE = "fixed_price"
    AUCTION = "auction"


class Order(BaseModel):
    model_config = ConfigDict(extra="allow")

    order_id: int
    order_type: OrderType | None = None
    seller_address: str
    nft_address: str
    token_id: str
    price: Asset
    start_price: Asset | None = None
    fixed_price: Asset | None = None
    expiration: Expiration | None = None
    highest_bidder: str | None = None


class ConfigResponse(BaseModel):
    owner: str
    min_increase: DecimalStr
    max_auction_duration_block: int
    max_auction_duration_second: int
    auction_cancel_fee_rate: DecimalStr


class InstantiateMsg(BaseModel):
    owner: str
    min_increase: Rate
    max_auction_duration_block: int = Field(ge=0)
    max_auction_duration_second: int = Field(ge=0)
    auction_cancel_fee_rate: Rate


class UpdateConfig(BaseModel):
    owner: str | None = None
    min_increase: Optional[Rate] = None
    max_auction_duration_block: int | None = None
    max_auction_duration_second: int | None = None
    auction_cancel_fee_rate: Optional[Rate] = None


class UpdateCollection(BaseModel):
    nft_address: str
    support_assets: list[AssetInfo] | None = None
    royalties: list[Royalty] | None = None
