"""
Contract abstraction layer.
Builds unsigned CosmWasm messages and delegates queries to a ContractQuerier.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

logger = logging.getLogger(__name__)

MSG_EXECUTE_CONTRACT = "/cosmwasm.wasm.v1.MsgExecuteContract"
MSG_INSTANTIATE_CONTRACT = "/cosmwasm.wasm.v1.MsgInstantiateContract"


@dataclass(frozen=True)
class Coin:
    denom: str
    amount: int

    def to_dict(self) -> dict:
        return {"denom": self.denom, "amount": str(self.amount)}


@dataclass
class ExecuteCall:
    sender: str
    contract: str
    msg: dict
    funds: list[Coin] = field(default_factory=list)
    description: str = ""

    def to_dict(self) -> dict:
        return {
            "@type": MSG_EXECUTE_CONTRACT,
            "sender": self.sender,
            "contract": self.contract,
            "msg": self.msg,
            "funds": [c.to_dict() for c in self.funds],
        }


@dataclass
class InstantiateCall:
    sender: str
    admin: str
    code_id: int
    label: str
    init_msg: dict
    funds: list[Coin] = field(default_factory=list)
    description: str = ""

    def to_dict(self) -> dict:
        return {
            "@type": MSG_INSTANTIATE_CONTRACT,
            "sender": self.sender,
            "admin": self.admin,
            "code_id": str(self.code_id),
            "label": self.label,
            "msg": self.init_msg,
            "funds": [c.to_dict() for c in self.funds],
        }


class ContractError(Exception):
    def __init__(self, message: str, contract: Optional[str] = None, code: Optional[str] = None):
        self.message = message
        self.contract = contract
        self.code = code
        super().__init__(f"[{contract}] {message}" if contract else message)


class ContractQuerier(ABC):
    """Read side of the chain transport: smart queries against a contract."""

    @abstractmethod
    async def query_contract(self, contract_address: str, query_msg: dict) -> Any:
        pass


class BaseContract:
    def __init__(
        self,
        querier: ContractQuerier,
        contract_address: str,
        sender: str,
        code_id: Optional[int] = None,
        label: str = "",
        admin: str = "",
    ):
        self.querier = querier
        self.contract_address = contract_address
        self.sender = sender
        self.code_id = code_id
        self.label = label
        self.admin = admin

    def create_instantiate_msg(self, init_msg: dict, funds: Optional[list[Coin]] = None) -> InstantiateCall:
        if self.code_id is None:
            raise ContractError("No code id configured for instantiation", self.label or None)
        return InstantiateCall(
            sender=self.sender, admin=self.admin, code_id=self.code_id,
            label=self.label, init_msg=init_msg, funds=list(funds or []),
            description=f"Instantiate code {self.code_id}",
        )

    def create_execute_msg(self, msg: dict, funds: Optional[list[Coin]] = None, description: str = "") -> ExecuteCall:
        return ExecuteCall(
            sender=self.sender, contract=self.contract_address, msg=msg,
            funds=list(funds or []), description=description or f"Execute {next(iter(msg))}",
        )

    async def query(self, query_msg: dict) -> Any:
        logger.debug(f"Querying {self.contract_address}: {query_msg}")
        return await self.querier.query_contract(self.contract_address, query_msg)
