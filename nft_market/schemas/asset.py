"""
Asset model shared by every marketplace message.
An asset is either a native coin or a cw20 token, never both.
"""

from enum import Enum
from typing import Annotated, Any, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_serializer

ASSET_INFO_TAGS = ("native_token", "token")


class InvalidAssetError(ValueError):
    """Raised when an AssetInfo carries neither or both variant tags."""


class AssetKind(str, Enum):
    NATIVE = "native"
    TOKEN = "token"


class NativeToken(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    denom: str


class Token(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    contract_addr: str


class NativeTokenInfo(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    native_token: NativeToken


class TokenInfo(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    token: Token


def _check_asset_info_shape(value: Any) -> Any:
    if isinstance(value, dict):
        tags = [tag for tag in ASSET_INFO_TAGS if tag in value]
        if len(tags) != 1:
            raise InvalidAssetError(
                f"AssetInfo must carry exactly one of {', '.join(ASSET_INFO_TAGS)}, got {sorted(value)}"
            )
    return value


AssetInfo = Annotated[Union[NativeTokenInfo, TokenInfo], BeforeValidator(_check_asset_info_shape)]


class Asset(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    info: AssetInfo
    amount: int = Field(ge=0)

    @field_serializer("amount")
    def _amount_as_uint128(self, amount: int) -> str:
        return str(amount)

    @classmethod
    def native(cls, denom: str, amount: int) -> "Asset":
        return cls(info=NativeTokenInfo(native_token=NativeToken(denom=denom)), amount=amount)

    @classmethod
    def token(cls, contract_addr: str, amount: int) -> "Asset":
        return cls(info=TokenInfo(token=Token(contract_addr=contract_addr)), amount=amount)


def native_info(denom: str) -> NativeTokenInfo:
    return NativeTokenInfo(native_token=NativeToken(denom=denom))


def token_info(contract_addr: str) -> TokenInfo:
    return TokenInfo(token=Token(contract_addr=contract_addr))


def asset_kind(asset: Asset) -> AssetKind:
    """Classify an asset by its info tag alone; the amount is never inspected."""
    info = asset.info
    if isinstance(info, NativeTokenInfo):
        return AssetKind.NATIVE
    if isinstance(info, TokenInfo):
        return AssetKind.TOKEN
    raise InvalidAssetError(f"Unrecognised asset info: {info!r}")


def is_native(asset: Asset) -> bool:
    return asset_kind(asset) is AssetKind.NATIVE
