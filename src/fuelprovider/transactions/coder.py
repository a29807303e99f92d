"""
Transaction / Receipt Coders - canonical binary encoding.

Each value is ABI-encoded as a single tuple with eth-abi. The encoding is
deterministic, so the number of bytes a decode consumed is the length of
the value's re-encoding; this lets callers decode from an offset without
an external length hint.
"""

from __future__ import annotations

from typing import Any, Generic, Protocol, TypeVar

from eth_abi import decode, encode
from eth_abi.exceptions import DecodingError, EncodingError

from .models import Receipt, ReceiptType, Transaction, TransactionType

T = TypeVar("T")


class Coder(Protocol[T]):
    def encode(self, value: T) -> bytes:
        ...

    def decode(self, data: bytes, offset: int = 0) -> tuple[T, int]:
        ...


class DecodeError(ValueError):
    exit_code: int = 3


class _TupleCoder(Generic[T]):
    name: str = "value"
    types: tuple[str, ...] = ()

    def to_values(self, value: T) -> tuple[Any, ...]:
        raise NotImplementedError

    def from_values(self, values: tuple[Any, ...]) -> T:
        raise NotImplementedError

    def encode(self, value: T) -> bytes:
        try:
            return encode([f"({','.join(self.types)})"], [self.to_values(value)])
        except (EncodingError, TypeError, ValueError) as exc:
            raise ValueError(f"Cannot encode {self.name}: {exc}") from exc

    def decode(self, data: bytes, offset: int = 0) -> tuple[T, int]:
        """
        Decode one value starting at ``offset``.

        Returns:
            Tuple of (value, bytes_consumed)

        Raises:
            DecodeError: If the payload is truncated or malformed
        """
        payload = bytes(data[offset:])
        try:
            (values,) = decode([f"({','.join(self.types)})"], payload)
            value = self.from_values(values)
        except (DecodingError, ValueError, OverflowError) as exc:
            raise DecodeError(f"Invalid {self.name} payload: {exc}") from exc
        return value, len(self.encode(value))


class TransactionCoder(_TupleCoder[Transaction]):
    name = "transaction"
    types = ("uint8", "uint64", "uint64", "uint32", "bytes32", "bytes", "bytes", "bytes[]")

    def to_values(self, value: Transaction) -> tuple[Any, ...]:
        return (
            int(value.type),
            value.gas_price,
            value.gas_limit,
            value.maturity,
            value.receipts_root,
            value.script,
            value.script_data,
            list(value.witnesses),
        )

    def from_values(self, values: tuple[Any, ...]) -> Transaction:
        tx_type, gas_price, gas_limit, maturity, root, script, script_data, witnesses = values
        return Transaction(
            type=TransactionType(tx_type),
            gas_price=gas_price,
            gas_limit=gas_limit,
            maturity=maturity,
            receipts_root=bytes(root),
            script=bytes(script),
            script_data=bytes(script_data),
            witnesses=tuple(bytes(w) for w in witnesses),
        )


class ReceiptCoder(_TupleCoder[Receipt]):
    name = "receipt"
    types = ("uint8", "bytes32", "uint64", "uint64", "uint64", "bytes")

    def to_values(self, value: Receipt) -> tuple[Any, ...]:
        return (int(value.type), value.id, value.val, value.pc, value.is_, value.data)

    def from_values(self, values: tuple[Any, ...]) -> Receipt:
        receipt_type, receipt_id, val, pc, is_, data = values
        return Receipt(
            type=ReceiptType(receipt_type),
            id=bytes(receipt_id),
            val=val,
            pc=pc,
            is_=is_,
            data=bytes(data),
        )
