"""
Provider - GraphQL access layer for a ledger node.

Uses httpx for transport; binary payloads go through the coders in
``fuelprovider.transactions``.
"""

from .graphql import Transport, TransportError, graphql_fetch
from .models import Block, BlockTransaction, Coin, TransactionResponse
from .provider import Provider, ProviderError, TransactionNotFoundError

__all__ = [
    "Block",
    "BlockTransaction",
    "Coin",
    "Provider",
    "ProviderError",
    "TransactionNotFoundError",
    "TransactionResponse",
    "Transport",
    "TransportError",
    "graphql_fetch",
]
