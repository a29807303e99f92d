from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..transactions.models import Receipt


@dataclass(frozen=True)
class BlockTransaction:
    id: str
    raw_payload: str

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "BlockTransaction":
        return cls(id=payload["id"], raw_payload=payload["rawPayload"])

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "rawPayload": self.raw_payload}


@dataclass(frozen=True)
class Block:
    id: str
    height: Any
    producer: str
    transactions: list[BlockTransaction] = field(default_factory=list)
    time: Any = None

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "Block":
        return cls(
            id=payload["id"],
            height=payload["height"],
            producer=payload["producer"],
            transactions=[
                BlockTransaction.from_dict(tx) for tx in payload.get("transactions") or []
            ],
            time=payload.get("time"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "height": self.height,
            "producer": self.producer,
            "transactions": [tx.to_dict() for tx in self.transactions],
            "time": self.time,
        }


@dataclass(frozen=True)
class Coin:
    id: str
    owner: str
    amount: Any
    color: str
    maturity: Any
    status: str
    block_created: Any

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "Coin":
        return cls(
            id=payload["id"],
            owner=payload["owner"],
            amount=payload["amount"],
            color=payload["color"],
            maturity=payload["maturity"],
            status=payload["status"],
            block_created=payload["blockCreated"],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "owner": self.owner,
            "amount": self.amount,
            "color": self.color,
            "maturity": self.maturity,
            "status": self.status,
            "blockCreated": self.block_created,
        }


@dataclass(frozen=True)
class TransactionResponse:
    receipts: list[Receipt]
