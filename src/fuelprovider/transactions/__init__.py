"""
Transactions - domain structures and their canonical binary coders.
"""

from .coder import Coder, DecodeError, ReceiptCoder, TransactionCoder
from .models import Receipt, ReceiptType, Transaction, TransactionType
from .request import TransactionRequest, transaction_from_request

__all__ = [
    "Coder",
    "DecodeError",
    "Receipt",
    "ReceiptCoder",
    "ReceiptType",
    "Transaction",
    "TransactionCoder",
    "TransactionRequest",
    "TransactionType",
    "transaction_from_request",
]
