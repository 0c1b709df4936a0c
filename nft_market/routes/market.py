import httpx
from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import ValidationError

from nft_market.contracts.base import ContractError, ExecuteCall, InstantiateCall
from nft_market.contracts.nft_market import NftMarketContract
from nft_market.dependencies import get_market, get_sender_market
from nft_market.schemas.asset import Asset
from nft_market.schemas.market import CollectionInfo, ConfigResponse, Order, UpdateCollection, UpdateConfig
from nft_market.schemas.messages import (
    AddCollectionRequest,
    AuctionOrderRequest,
    BidRequest,
    CoinData,
    FixedPriceOrderRequest,
    InitRequest,
    MessageData,
    PrepareResponse,
    UpdateCollectionRequest,
)

router = APIRouter()


def _prepared(call: ExecuteCall | InstantiateCall) -> PrepareResponse:
    data = call.to_dict()
    return PrepareResponse(
        message=MessageData(
            type_url=data["@type"],
            sender=data["sender"],
            contract=data.get("contract"),
            code_id=data.get("code_id"),
            msg=data["msg"],
            funds=[CoinData(**c) for c in data["funds"]],
            description=call.description,
        )
    )


def _http_error(e: Exception) -> HTTPException:
    # request bodies are validated before the handler runs, so this is a bad contract response
    if isinstance(e, ValidationError):
        return HTTPException(status_code=502, detail=f"Malformed contract response: {e}")
    if isinstance(e, ValueError):
        return HTTPException(status_code=422, detail=str(e))
    if isinstance(e, ContractError):
        return HTTPException(status_code=429 if e.code == "429" else 400, detail=str(e))
    return HTTPException(status_code=502, detail=f"Upstream query failed: {e}")


# Prepared messages


@router.post("/instantiate", response_model=PrepareResponse)
async def prepare_init(req: InitRequest, market: NftMarketContract = Depends(get_sender_market)):
    try:
        call = market.init(
            req.owner, req.min_increase, req.max_auction_duration_block,
            req.max_auction_duration_second, req.auction_cancel_fee_rate,
        )
    except ContractError as e:
        raise _http_error(e)
    return _prepared(call)


@router.post("/config", response_model=PrepareResponse)
async def prepare_update_config(req: UpdateConfig, market: NftMarketContract = Depends(get_sender_market)):
    return _prepared(market.update_config(req))


@router.post("/collections", response_model=PrepareResponse)
async def prepare_add_collection(req: AddCollectionRequest, market: NftMarketContract = Depends(get_sender_market)):
    return _prepared(market.add_collection(req.nft_address, req.support_assets, req.royalties))


@router.put("/collections/{nft_address}", response_model=PrepareResponse)
async def prepare_update_collection(
    nft_address: str,
    req: UpdateCollectionRequest,
    market: NftMarketContract = Depends(get_sender_market),
):
    update = UpdateCollection(nft_address=nft_address, support_assets=req.support_assets, royalties=req.royalties)
    return _prepared(market.update_collection(update))


@router.delete("/collections/{nft_address}", response_model=PrepareResponse)
async def prepare_delist_collection(nft_address: str, market: NftMarketContract = Depends(get_sender_market)):
    return _prepared(market.delist_collection(nft_address))


@router.post("/orders/fixed-price", response_model=PrepareResponse)
async def prepare_fixed_price_order(req: FixedPriceOrderRequest, market: NftMarketContract = Depends(get_sender_market)):
    return _prepared(market.make_fixed_price_order(req.nft_address, req.token_id, req.price))


@router.post("/orders/auction", response_model=PrepareResponse)
async def prepare_auction_order(req: AuctionOrderRequest, market: NftMarketContract = Depends(get_sender_market)):
    call = market.make_auction_order(req.nft_address, req.token_id, req.start_price, req.expiration, req.fixed_price)
    return _prepared(call)


@router.post("/orders/{order_id}/execute", response_model=PrepareResponse)
async def prepare_execute_order(order_id: int, market: NftMarketContract = Depends(get_sender_market)):
    try:
        call = await market.execute_order(order_id)
    except (ValueError, ContractError, httpx.HTTPError) as e:
        raise _http_error(e)
    return _prepared(call)


@router.post("/orders/{order_id}/bid", response_model=PrepareResponse)
async def prepare_bid(order_id: int, req: BidRequest, market: NftMarketContract = Depends(get_sender_market)):
    return _prepared(market.bid(order_id, req.bid_price))


@router.post("/orders/{order_id}/execute-auction", response_model=PrepareResponse)
async def prepare_execute_auction(order_id: int, market: NftMarketContract = Depends(get_sender_market)):
    return _prepared(market.execute_auction(order_id))


@router.post("/orders/{order_id}/cancel", response_model=PrepareResponse)
async def prepare_cancel_order(order_id: int, market: NftMarketContract = Depends(get_sender_market)):
    try:
        call = await market.cancel_order(order_id)
    except (ValueError, ContractError, httpx.HTTPError) as e:
        raise _http_error(e)
    return _prepared(call)


# Queries


@router.get("/config", response_model=ConfigResponse)
async def get_config(market: NftMarketContract = Depends(get_market)):
    try:
        return await market.config_query()
    except (ValueError, ContractError, httpx.HTTPError) as e:
        raise _http_error(e)


@router.get("/collections", response_model=list[CollectionInfo])
async def list_collections(
    start_after: str | None = None,
    limit: int | None = Query(default=None, ge=1, le=100),
    market: NftMarketContract = Depends(get_market),
):
    try:
        return await market.collection_infos_query(start_after, limit)
    except (ValueError, ContractError, httpx.HTTPError) as e:
        raise _http_error(e)


@router.get("/collections/{nft_address}", response_model=CollectionInfo)
async def get_collection(nft_address: str, market: NftMarketContract = Depends(get_market)):
    try:
        return await market.collection_info_query(nft_address)
    except (ValueError, ContractError, httpx.HTTPError) as e:
        raise _http_error(e)


@router.get("/orders", response_model=list[Order])
async def list_orders(
    seller_address: str | None = None,
    start_after: int | None = None,
    limit: int | None = Query(default=None, ge=1, le=100),
    market: NftMarketContract = Depends(get_market),
):
    try:
        return await market.orders_query(seller_address, start_after, limit)
    except (ValueError, ContractError, httpx.HTTPError) as e:
        raise _http_error(e)


@router.get("/orders/{order_id}", response_model=Order)
async def get_order(order_id: int, market: NftMarketContract = Depends(get_market)):
    try:
        return await market.order_query(order_id)
    except (ValueError, ContractError, httpx.HTTPError) as e:
        raise _http_error(e)


@router.get("/orders/{order_id}/cancel-fee", response_model=Asset)
async def get_cancel_fee(order_id: int, market: NftMarketContract = Depends(get_market)):
    try:
        return await market.cancel_fee_query(order_id)
    except (ValueError, ContractError, httpx.HTTPError) as e:
        raise _http_error(e)
