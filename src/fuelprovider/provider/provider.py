"""
Provider - typed client for a node's GraphQL API.

Each public method is one request/response round trip against the endpoint
(``send_transaction`` composes two). The provider keeps no state besides the
URL; debug sessions live entirely on the node and are addressed by id.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from ..transactions.coder import Coder, DecodeError, ReceiptCoder, TransactionCoder
from ..transactions.models import Receipt, Transaction
from ..transactions.request import TransactionRequest, transaction_from_request
from ..utils import arrayify, hexlify
from . import operations
from .graphql import Transport, TransportError, graphql_fetch
from .models import Block, Coin, TransactionResponse

logger = logging.getLogger(__name__)


class ProviderError(RuntimeError):
    exit_code: int = 1


class TransactionNotFoundError(ProviderError):
    """The node accepted a submission but does not report the transaction."""

    exit_code = 4

    def __init__(self, transaction_id: str):
        super().__init__(f"Transaction not found: {transaction_id}")
        self.transaction_id = transaction_id


def _raw_payload(node: Any, field_name: str) -> str:
    if not isinstance(node, dict) or node.get("rawPayload") is None:
        raise TransportError(f"Response for {field_name} has an entry without rawPayload")
    return node["rawPayload"]


def _decode_payload(coder: Coder[Any], raw_payload: str) -> Any:
    try:
        data = arrayify(raw_payload)
    except ValueError as exc:
        raise DecodeError(str(exc)) from exc
    return coder.decode(data, 0)[0]


def _unwrap_edges(connection: Any, field_name: str) -> list[dict[str, Any]]:
    """Flatten ``{edges: [{node: ...}]}`` into a list of nodes, keeping order."""
    if not isinstance(connection, dict) or connection.get("edges") is None:
        raise TransportError(f"Response for {field_name} has no edges")
    nodes = []
    for edge in connection["edges"]:
        if not isinstance(edge, dict) or edge.get("node") is None:
            raise TransportError(f"Response for {field_name} has an edge without a node")
        nodes.append(edge["node"])
    return nodes


def _pagination(
    after: Optional[str],
    before: Optional[str],
    first: Optional[int],
    last: Optional[int],
) -> dict[str, Any]:
    return {"after": after, "before": before, "first": first, "last": last}


class Provider:
    """Client for a single node endpoint."""

    def __init__(
        self,
        url: str,
        transport: Optional[Transport] = None,
        build_transaction: Callable[[TransactionRequest], Transaction] = transaction_from_request,
        transaction_coder: Optional[Coder[Transaction]] = None,
        receipt_coder: Optional[Coder[Receipt]] = None,
    ):
        self._url = url
        self._transport = transport or graphql_fetch
        self._build_transaction = build_transaction
        self._transaction_coder = transaction_coder or TransactionCoder()
        self._receipt_coder = receipt_coder or ReceiptCoder()

    @property
    def url(self) -> str:
        return self._url

    def __repr__(self) -> str:
        return f"Provider({self._url!r})"

    def _fetch(
        self,
        operation: str,
        document: str,
        variables: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        logger.debug("%s -> %s variables=%s", operation, self._url, variables)
        return self._transport(self._url, document, variables)

    def _decode_transaction(self, raw_payload: str) -> Transaction:
        return _decode_payload(self._transaction_coder, raw_payload)

    def _decode_receipt(self, raw_payload: str) -> Receipt:
        return _decode_payload(self._receipt_coder, raw_payload)

    def _encode_transaction(self, transaction: Transaction) -> str:
        return hexlify(self._transaction_coder.encode(transaction))

    @staticmethod
    def _field(data: dict[str, Any], name: str) -> Any:
        if name not in data:
            raise TransportError(f"Response is missing field {name!r}")
        return data[name]

    # ============ Queries ============

    def get_version(self) -> str:
        data = self._fetch("getVersion", operations.GET_VERSION)
        return self._field(data, "version")

    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        """
        Fetch a transaction by id.

        Returns:
            The decoded transaction, or None if the node does not know the id

        Raises:
            DecodeError: If the stored payload is malformed
        """
        data = self._fetch(
            "getTransaction",
            operations.GET_TRANSACTION,
            {"transactionId": transaction_id},
        )
        transaction = self._field(data, "transaction")
        if not transaction:
            return None
        return self._decode_transaction(_raw_payload(transaction, "transaction"))

    def get_transactions(
        self,
        *,
        after: Optional[str] = None,
        before: Optional[str] = None,
        first: Optional[int] = None,
        last: Optional[int] = None,
    ) -> list[Transaction]:
        data = self._fetch(
            "getTransactions",
            operations.GET_TRANSACTIONS,
            _pagination(after, before, first, last),
        )
        nodes = _unwrap_edges(self._field(data, "transactions"), "transactions")
        return [self._decode_transaction(_raw_payload(node, "transactions")) for node in nodes]

    def get_block(self, block_id: str) -> Optional[Block]:
        data = self._fetch("getBlock", operations.GET_BLOCK, {"blockId": block_id})
        block = self._field(data, "block")
        if not block:
            return None
        return self._build(Block, block)

    def get_blocks(
        self,
        *,
        after: Optional[str] = None,
        before: Optional[str] = None,
        first: Optional[int] = None,
        last: Optional[int] = None,
    ) -> list[Block]:
        data = self._fetch(
            "getBlocks",
            operations.GET_BLOCKS,
            _pagination(after, before, first, last),
        )
        nodes = _unwrap_edges(self._field(data, "blocks"), "blocks")
        return [self._build(Block, node) for node in nodes]

    def get_coin(self, coin_id: str) -> Optional[Coin]:
        data = self._fetch("getCoin", operations.GET_COIN, {"coinId": coin_id})
        coin = self._field(data, "coin")
        if not coin:
            return None
        return self._build(Coin, coin)

    @staticmethod
    def _build(model: Any, payload: Any) -> Any:
        try:
            return model.from_dict(payload)
        except (KeyError, TypeError) as exc:
            raise TransportError(f"Malformed {model.__name__} in response: {exc}") from exc

    # ============ Execution ============

    def call(self, transaction_request: TransactionRequest) -> TransactionResponse:
        """Build a transaction from the request and dry-run it."""
        transaction = self._build_transaction(transaction_request)
        return TransactionResponse(receipts=self.dry_run(transaction))

    def send_transaction(self, transaction_request: TransactionRequest) -> Transaction:
        """
        Build, submit, and read back a transaction.

        The read-back is a single lookup; the node is expected to report the
        transaction as soon as ``submit`` returns.

        Raises:
            TransactionNotFoundError: If the node does not report the
                submitted transaction
        """
        transaction = self._build_transaction(transaction_request)
        transaction_id = self.submit(transaction)

        received = self.get_transaction(transaction_id)
        if received is None:
            logger.warning("Submitted transaction %s not found on node", transaction_id)
            raise TransactionNotFoundError(transaction_id)
        return received

    def dry_run(self, transaction: Transaction) -> list[Receipt]:
        """
        Execute a transaction without persisting it.

        Returns:
            Receipts in execution order
        """
        encoded_transaction = self._encode_transaction(transaction)
        data = self._fetch(
            "dryRun",
            operations.DRY_RUN,
            {"encodedTransaction": encoded_transaction},
        )
        client_receipts = self._field(data, "dryRun")
        if client_receipts is None:
            raise TransportError("Response for dryRun has no receipts")
        return [
            self._decode_receipt(_raw_payload(receipt, "dryRun")) for receipt in client_receipts
        ]

    def submit(self, transaction: Transaction) -> str:
        """
        Submit a transaction for inclusion.

        Not safe to retry: a resubmission may be accepted as a new transaction.

        Returns:
            Transaction id assigned by the node (0x-prefixed hex)
        """
        encoded_transaction = self._encode_transaction(transaction)
        data = self._fetch(
            "submit",
            operations.SUBMIT,
            {"encodedTransaction": encoded_transaction},
        )
        return self._field(data, "submit")

    # ============ Debug sessions ============

    def start_session(self) -> str:
        data = self._fetch("startSession", operations.START_SESSION)
        return self._field(data, "startSession")

    def end_session(self, session_id: str) -> bool:
        data = self._fetch("endSession", operations.END_SESSION, {"sessionId": session_id})
        return self._field(data, "endSession")

    def execute(self, session_id: str, op: str) -> bool:
        data = self._fetch(
            "execute",
            operations.EXECUTE,
            {"sessionId": session_id, "op": op},
        )
        return self._field(data, "execute")

    def reset(self, session_id: str) -> bool:
        data = self._fetch("reset", operations.RESET, {"sessionId": session_id})
        return self._field(data, "reset")
