"""
Transaction Request - caller-facing description of a transaction.

``transaction_from_request`` is the pure builder the provider uses before
``call`` / ``send_transaction``; it never touches the network.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from ..utils import arrayify
from .models import ZERO_BYTES32, Transaction, TransactionType

BytesLike = Union[bytes, str]


@dataclass
class TransactionRequest:
    script: BytesLike = b""
    script_data: BytesLike = b""
    gas_price: int = 0
    gas_limit: int = 1_000_000
    maturity: int = 0
    type: TransactionType = TransactionType.SCRIPT
    receipts_root: Optional[BytesLike] = None
    witnesses: list[BytesLike] = field(default_factory=list)


def transaction_from_request(request: TransactionRequest) -> Transaction:
    """
    Build a canonical Transaction from a request.

    Hex strings are accepted wherever bytes are.

    Raises:
        ValueError: If a numeric field is negative or a hex field is malformed
    """
    for name in ("gas_price", "gas_limit", "maturity"):
        if getattr(request, name) < 0:
            raise ValueError(f"{name} must be non-negative")

    receipts_root = ZERO_BYTES32
    if request.receipts_root is not None:
        receipts_root = arrayify(request.receipts_root)
        if len(receipts_root) != 32:
            raise ValueError("receipts_root must be 32 bytes")

    return Transaction(
        type=TransactionType(request.type),
        gas_price=request.gas_price,
        gas_limit=request.gas_limit,
        maturity=request.maturity,
        receipts_root=receipts_root,
        script=arrayify(request.script),
        script_data=arrayify(request.script_data),
        witnesses=tuple(arrayify(w) for w in request.witnesses),
    )
