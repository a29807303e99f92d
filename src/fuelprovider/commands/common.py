from __future__ import annotations

import json
import sys
from contextlib import contextmanager
from typing import Any, Callable, Iterator, TypeVar

import click

from ..provider import ProviderError, TransportError
from ..transactions import DecodeError, Receipt, Transaction
from ..utils import hexlify

F = TypeVar("F", bound=Callable[..., object])


@contextmanager
def node_errors() -> Iterator[None]:
    """Print provider failures and exit with the error's exit code."""
    try:
        yield
    except (TransportError, DecodeError, ProviderError) as exc:
        click.secho(f"ERROR: {exc}", fg="red", err=True)
        sys.exit(exc.exit_code)


def not_found(kind: str, ident: str) -> None:
    click.secho(f"{kind} not found: {ident}", fg="yellow", err=True)
    sys.exit(1)


def transaction_to_dict(tx: Transaction) -> dict[str, Any]:
    return {
        "type": tx.type.name,
        "gasPrice": tx.gas_price,
        "gasLimit": tx.gas_limit,
        "maturity": tx.maturity,
        "receiptsRoot": hexlify(tx.receipts_root),
        "script": hexlify(tx.script),
        "scriptData": hexlify(tx.script_data),
        "witnesses": [hexlify(w) for w in tx.witnesses],
    }


def receipt_to_dict(receipt: Receipt) -> dict[str, Any]:
    return {
        "type": receipt.type.name,
        "id": hexlify(receipt.id),
        "val": receipt.val,
        "pc": receipt.pc,
        "is": receipt.is_,
        "data": hexlify(receipt.data),
    }


def echo_json(value: Any) -> None:
    click.echo(json.dumps(value, indent=2))


def pagination_options(func: F) -> F:
    for option in reversed(
        [
            click.option("--first", type=int, default=None, help="Return the first N items"),
            click.option("--last", type=int, default=None, help="Return the last N items"),
            click.option("--after", default=None, help="Cursor to start after"),
            click.option("--before", default=None, help="Cursor to end before"),
        ]
    ):
        func = option(func)
    return func
