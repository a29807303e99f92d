__all__ = [
    # Provider
    "Provider",
    "Block",
    "BlockTransaction",
    "Coin",
    "TransactionResponse",
    # Provider errors
    "ProviderError",
    "TransactionNotFoundError",
    "TransportError",
    # Transport
    "Transport",
    "graphql_fetch",
    # Transactions
    "Transaction",
    "TransactionType",
    "TransactionRequest",
    "transaction_from_request",
    "Receipt",
    "ReceiptType",
    # Coders
    "Coder",
    "TransactionCoder",
    "ReceiptCoder",
    "DecodeError",
    # Hex
    "arrayify",
    "hexlify",
    # Config
    "DEFAULT_NODE_URL",
    "get_node_url",
    "load_env",
]

from .config import DEFAULT_NODE_URL, get_node_url, load_env
from .provider import (
    Block,
    BlockTransaction,
    Coin,
    Provider,
    ProviderError,
    TransactionNotFoundError,
    TransactionResponse,
    Transport,
    TransportError,
    graphql_fetch,
)
from .transactions import (
    Coder,
    DecodeError,
    Receipt,
    ReceiptCoder,
    ReceiptType,
    Transaction,
    TransactionCoder,
    TransactionRequest,
    TransactionType,
    transaction_from_request,
)
from .utils import arrayify, hexlify
