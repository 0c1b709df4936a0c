"""Tests for the asset model and its variant classification."""

import pytest
from pydantic import ValidationError

from nft_market.schemas.asset import (
    Asset,
    AssetKind,
    InvalidAssetError,
    NativeTokenInfo,
    TokenInfo,
    asset_kind,
    is_native,
    native_info,
    token_info,
)


class TestAssetKind:
    def test_native_asset(self):
        asset = Asset.native("uusd", 100)
        assert asset_kind(asset) is AssetKind.NATIVE
        assert is_native(asset)

    def test_token_asset(self):
        asset = Asset.token("terra1token", 100)
        assert asset_kind(asset) is AssetKind.TOKEN
        assert not is_native(asset)

    def test_classification_ignores_amount(self):
        assert is_native(Asset.native("uluna", 0))
        assert not is_native(Asset.token("terra1token", 0))

    def test_unrecognised_info_fails_fast(self):
        broken = Asset.model_construct(info={"native_token": {"denom": "uusd"}}, amount=1)
        with pytest.raises(InvalidAssetError):
            asset_kind(broken)


class TestAssetParsing:
    def test_parses_native_wire_format(self):
        asset = Asset.model_validate({"info": {"native_token": {"denom": "uusd"}}, "amount": "2500"})
        assert isinstance(asset.info, NativeTokenInfo)
        assert asset.info.native_token.denom == "uusd"
        assert asset.amount == 2500

    def test_parses_token_wire_format(self):
        asset = Asset.model_validate({"info": {"token": {"contract_addr": "terra1token"}}, "amount": "7"})
        assert isinstance(asset.info, TokenInfo)
        assert asset.info.token.contract_addr == "terra1token"

    def test_both_tags_rejected(self):
        with pytest.raises(ValidationError, match="exactly one of"):
            Asset.model_validate({
                "info": {"native_token": {"denom": "uusd"}, "token": {"contract_addr": "terra1token"}},
                "amount": "1",
            })

    def test_no_tag_rejected(self):
        with pytest.raises(ValidationError, match="exactly one of"):
            Asset.model_validate({"info": {}, "amount": "1"})

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError):
            Asset.native("uusd", -1)

    def test_amount_serialised_as_string(self):
        dumped = Asset.token("terra1token", 1000).model_dump(mode="json")
        assert dumped == {"info": {"token": {"contract_addr": "terra1token"}}, "amount": "1000"}

    def test_info_helpers(self):
        assert native_info("uusd").model_dump() == {"native_token": {"denom": "uusd"}}
        assert token_info("terra1token").model_dump() == {"token": {"contract_addr": "terra1token"}}
