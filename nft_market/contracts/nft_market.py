"""
NFT marketplace contract client.
Every method returns an unsigned message; nothing is signed or broadcast here.
"""

import logging
from decimal import Decimal
from typing import Optional

from pydantic import TypeAdapter

from nft_market.contracts.base import BaseContract, ExecuteCall, InstantiateCall
from nft_market.schemas.asset import Asset, AssetInfo, asset_kind, is_native
from nft_market.schemas.market import (
    CollectionInfo,
    ConfigResponse,
    Expiration,
    InstantiateMsg,
    Order,
    Royalty,
    UpdateCollection,
    UpdateConfig,
)
from nft_market.services.transfer_router import route_nft, route_payment

logger = logging.getLogger(__name__)

_asset_infos = TypeAdapter(list[AssetInfo])
_royalties = TypeAdapter(list[Royalty])
_collection_infos = TypeAdapter(list[CollectionInfo])
_orders = TypeAdapter(list[Order])


def _dump(value) -> dict:
    return value.model_dump(mode="json", exclude_none=True)


class NftMarketContract(BaseContract):
    def init(
        self,
        owner: str,
        min_increase: Decimal,
        max_auction_duration_block: int,
        max_auction_duration_second: int,
        auction_cancel_fee_rate: Decimal,
    ) -> InstantiateCall:
        init_msg = InstantiateMsg(
            owner=owner,
            min_increase=min_increase,
            max_auction_duration_block=max_auction_duration_block,
            max_auction_duration_second=max_auction_duration_second,
            auction_cancel_fee_rate=auction_cancel_fee_rate,
        )
        return self.create_instantiate_msg(_dump(init_msg))

    # Execute messages

    def update_config(self, update_config: UpdateConfig) -> ExecuteCall:
        return self.create_execute_msg({"update_config": _dump(update_config)})

    # requires sender == owner
    def add_collection(self, nft_address: str, support_assets: list[AssetInfo], royalties: list[Royalty]) -> ExecuteCall:
        add_collection = {
            "nft_address": nft_address,
            "support_assets": _asset_infos.dump_python(_asset_infos.validate_python(support_assets), mode="json"),
            "royalties": _royalties.dump_python(_royalties.validate_python(royalties), mode="json"),
        }
        return self.create_execute_msg({"add_collection": add_collection})

    # requires sender == owner
    def update_collection(self, update_collection: UpdateCollection) -> ExecuteCall:
        return self.create_execute_msg({"update_collection": _dump(update_collection)})

    def delist_collection(self, nft_address: str) -> ExecuteCall:
        """
        Stop accepting new orders for a collection.

        Collections are never removed outright: orders already made against
        them keep a valid reference, so delisting empties the accepted assets.
        """
        return self.update_collection(UpdateCollection(nft_address=nft_address, support_assets=[]))

    def make_fixed_price_order(self, nft_address: str, token_id: str, price: Asset) -> ExecuteCall:
        asset_kind(price)
        make_fixed_price_order = {"price": _dump(price)}
        return route_nft(self, nft_address, token_id, {"make_fixed_price_order": make_fixed_price_order})

    def make_auction_order(
        self,
        nft_address: str,
        token_id: str,
        start_price: Asset,
        expiration: Expiration,
        fixed_price: Optional[Asset] = None,
    ) -> ExecuteCall:
        asset_kind(start_price)
        make_auction_order = {"start_price": _dump(start_price), "expiration": _dump(expiration)}
        if fixed_price is not None:
            asset_kind(fixed_price)
            make_auction_order["fixed_price"] = _dump(fixed_price)
        return route_nft(self, nft_address, token_id, {"make_auction_order": make_auction_order})

    # buy an NFT at its listed fixed price
    async def execute_order(self, order_id: int) -> ExecuteCall:
        order = await self.order_query(order_id)
        return route_payment(self, order.price, {"execute_order": {"order_id": order_id}})

    def bid(self, order_id: int, bid_price: Asset) -> ExecuteCall:
        if is_native(bid_price):
            bid = {"order_id": order_id, "bid_price": _dump(bid_price)}
        else:
            # the cw20 receive hook already carries sender and amount
            bid = {"order_id": order_id}
        return route_payment(self, bid_price, {"bid": bid})

    # settle an expired auction; anyone may call this
    def execute_auction(self, order_id: int) -> ExecuteCall:
        return self.create_execute_msg({"execute_auction": {"order_id": order_id}})

    # requires sender == seller
    async def cancel_order(self, order_id: int) -> ExecuteCall:
        fee = await self.cancel_fee_query(order_id)
        return route_payment(self, fee, {"cancel_order": {"order_id": order_id}})

    # Query messages

    async def config_query(self) -> ConfigResponse:
        return ConfigResponse.model_validate(await self.query({"config": {}}))

    async def collection_info_query(self, nft_address: str) -> CollectionInfo:
        data = await self.query({"collection_info": {"nft_address": nft_address}})
        return CollectionInfo.model_validate(data)

    async def collection_infos_query(
        self, start_after: Optional[str] = None, limit: Optional[int] = None
    ) -> list[CollectionInfo]:
        collection_infos = {"start_after": start_after, "limit": limit}
        data = await self.query({"collection_infos": {k: v for k, v in collection_infos.items() if v is not None}})
        return _collection_infos.validate_python(data)

    async def order_query(self, order_id: int) -> Order:
        return Order.model_validate(await self.query({"order": {"order_id": order_id}}))

    async def orders_query(
        self,
        seller_address: Optional[str] = None,
        start_after: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> list[Order]:
        orders = {"seller_address": seller_address, "start_after": start_after, "limit": limit}
        data = await self.query({"orders": {k: v for k, v in orders.items() if v is not None}})
        return _orders.validate_python(data)

    async def cancel_fee_query(self, order_id: int) -> Asset:
        return Asset.model_validate(await self.query({"cancel_fee": {"order_id": order_id}}))
