"""
Transaction and receipt structures exchanged with the node.

Both are immutable; the node only ever sees their canonical encoding
(see coder.py), never these objects.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

ZERO_BYTES32 = b"\x00" * 32


class TransactionType(IntEnum):
    SCRIPT = 0
    CREATE = 1


class ReceiptType(IntEnum):
    CALL = 0
    RETURN = 1
    RETURN_DATA = 2
    PANIC = 3
    REVERT = 4
    LOG = 5
    LOG_DATA = 6
    TRANSFER = 7
    TRANSFER_OUT = 8
    SCRIPT_RESULT = 9


@dataclass(frozen=True)
class Transaction:
    type: TransactionType = TransactionType.SCRIPT
    gas_price: int = 0
    gas_limit: int = 1_000_000
    maturity: int = 0
    receipts_root: bytes = ZERO_BYTES32
    script: bytes = b""
    script_data: bytes = b""
    witnesses: tuple[bytes, ...] = ()


@dataclass(frozen=True)
class Receipt:
    type: ReceiptType
    id: bytes = ZERO_BYTES32
    val: int = 0
    pc: int = 0
    is_: int = 0
    data: bytes = b""
