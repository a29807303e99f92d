from __future__ import annotations

from typing import Any, Optional

from unittest.mock import patch

import pytest

from fuelprovider.transactions import (
    Receipt,
    ReceiptCoder,
    ReceiptType,
    Transaction,
    TransactionCoder,
)
from fuelprovider.utils import hexlify

NODE_URL = "http://node.test/graphql"


class FakeTransport:
    """Transport double: replays queued ``data`` objects and records every call."""

    def __init__(self, *responses: Any) -> None:
        self.responses = list(responses)
        self.calls: list[tuple[str, str, Optional[dict[str, Any]]]] = []

    def __call__(
        self,
        url: str,
        document: str,
        variables: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        self.calls.append((url, document, variables))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def variables(self) -> list[Optional[dict[str, Any]]]:
        return [call[2] for call in self.calls]


@pytest.fixture()
def sample_transaction() -> Transaction:
    return Transaction(
        gas_price=1,
        gas_limit=1_000_000,
        maturity=0,
        script=bytes.fromhex("504000ca24000000"),
        script_data=b"\x01\x02",
        witnesses=(b"\xaa" * 64,),
    )


@pytest.fixture()
def sample_receipts() -> list[Receipt]:
    return [
        Receipt(type=ReceiptType.RETURN, id=b"\x11" * 32, val=202, pc=10376, is_=10368),
        Receipt(type=ReceiptType.LOG_DATA, id=b"\x11" * 32, val=0, pc=10380, data=b"hello"),
        Receipt(type=ReceiptType.SCRIPT_RESULT, val=1),
    ]


@pytest.fixture()
def tx_hex():
    """Encode a transaction the way the node stores it."""
    return lambda tx: hexlify(TransactionCoder().encode(tx))


@pytest.fixture()
def receipt_hex():
    return lambda receipt: hexlify(ReceiptCoder().encode(receipt))


@pytest.fixture()
def make_provider():
    """Build a Provider over a FakeTransport replaying the given responses."""
    from fuelprovider.provider import Provider

    def _make(*responses: Any, **kwargs: Any) -> tuple[Provider, FakeTransport]:
        transport = FakeTransport(*responses)
        return Provider(NODE_URL, transport=transport, **kwargs), transport

    return _make


@pytest.fixture()
def fake_node():
    """Replace the default httpx transport with a FakeTransport for the test."""
    transport = FakeTransport()
    with patch("fuelprovider.provider.provider.graphql_fetch", transport):
        yield transport
