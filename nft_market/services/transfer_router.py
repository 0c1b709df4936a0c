"""
Transfer routing for value-bearing marketplace instructions.

Custody of a resource starts at the resource's own ledger, so any transfer
is initiated as a call into that ledger:
- native coins ride along as funds on a direct marketplace call
- cw20 tokens move via `send` on the token contract, carrying the instruction
- NFTs move via `send_nft` on the collection contract, carrying the instruction
"""

import logging

from nft_market.contracts.base import BaseContract, Coin, ExecuteCall
from nft_market.schemas.asset import Asset, AssetKind, asset_kind
from nft_market.services.envelope import encode_msg

logger = logging.getLogger(__name__)


def route_payment(contract: BaseContract, asset: Asset, instruction: dict) -> ExecuteCall:
    kind = asset_kind(asset)
    action = next(iter(instruction))

    if asset.amount == 0:
        logger.debug(f"{action}: zero amount, sending plain call")
        return contract.create_execute_msg(instruction, description=f"{action} (no payment)")

    if kind is AssetKind.NATIVE:
        denom = asset.info.native_token.denom
        logger.debug(f"{action}: attaching {asset.amount}{denom}")
        return contract.create_execute_msg(
            instruction,
            funds=[Coin(denom=denom, amount=asset.amount)],
            description=f"{action} paying {asset.amount}{denom}",
        )

    token_addr = asset.info.token.contract_addr
    logger.debug(f"{action}: routing {asset.amount} through token {token_addr}")
    send_msg = {
        "send": {
            "amount": str(asset.amount),
            "contract": contract.contract_address,
            "msg": encode_msg(instruction),
        }
    }
    return ExecuteCall(
        sender=contract.sender, contract=token_addr, msg=send_msg,
        description=f"{action} paying {asset.amount} of {token_addr}",
    )


def route_nft(contract: BaseContract, nft_address: str, token_id: str, instruction: dict) -> ExecuteCall:
    action = next(iter(instruction))
    logger.debug(f"{action}: sending NFT {nft_address}#{token_id} to {contract.contract_address}")
    send_nft_msg = {
        "send_nft": {
            "contract": contract.contract_address,
            "token_id": token_id,
            "msg": encode_msg(instruction),
        }
    }
    return ExecuteCall(
        sender=contract.sender, contract=nft_address, msg=send_nft_msg,
        description=f"{action} listing {nft_address}#{token_id}",
    )
