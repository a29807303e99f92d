"""
Dry-run and submission.

``call`` and ``send`` build the transaction from options; ``dry-run`` and
``submit`` take an already encoded transaction as hex.
"""

from __future__ import annotations

import click

from ..provider import Provider
from ..transactions import (
    DecodeError,
    Transaction,
    TransactionCoder,
    TransactionRequest,
    transaction_from_request,
)
from ..utils import arrayify
from .common import F, echo_json, node_errors, receipt_to_dict, transaction_to_dict


def request_options(func: F) -> F:
    for option in reversed(
        [
            click.option("--script", default="0x", help="Script bytecode (hex)"),
            click.option("--script-data", default="0x", help="Script data (hex)"),
            click.option("--gas-price", default=0, type=int, help="Gas price"),
            click.option("--gas-limit", default=1_000_000, type=int, help="Gas limit"),
            click.option("--maturity", default=0, type=int, help="Block height maturity"),
        ]
    ):
        func = option(func)
    return func


def _request(
    script: str,
    script_data: str,
    gas_price: int,
    gas_limit: int,
    maturity: int,
) -> TransactionRequest:
    request = TransactionRequest(
        script=script,
        script_data=script_data,
        gas_price=gas_price,
        gas_limit=gas_limit,
        maturity=maturity,
    )
    try:
        transaction_from_request(request)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc
    return request


@click.command()
@request_options
@click.pass_obj
def call(
    provider: Provider,
    script: str,
    script_data: str,
    gas_price: int,
    gas_limit: int,
    maturity: int,
) -> None:
    """Dry-run a transaction and print its receipts."""
    request = _request(script, script_data, gas_price, gas_limit, maturity)
    with node_errors():
        response = provider.call(request)
    echo_json([receipt_to_dict(r) for r in response.receipts])


@click.command()
@request_options
@click.pass_obj
def send(
    provider: Provider,
    script: str,
    script_data: str,
    gas_price: int,
    gas_limit: int,
    maturity: int,
) -> None:
    """Submit a transaction and print it as stored by the node."""
    request = _request(script, script_data, gas_price, gas_limit, maturity)
    with node_errors():
        tx = provider.send_transaction(request)
    echo_json(transaction_to_dict(tx))


def _decode_argument(tx_hex: str) -> Transaction:
    with node_errors():
        try:
            data = arrayify(tx_hex)
        except ValueError as exc:
            raise DecodeError(str(exc)) from exc
        return TransactionCoder().decode(data, 0)[0]


@click.command("dry-run")
@click.argument("tx_hex")
@click.pass_obj
def dry_run(provider: Provider, tx_hex: str) -> None:
    """Dry-run an encoded transaction."""
    tx = _decode_argument(tx_hex)
    with node_errors():
        receipts = provider.dry_run(tx)
    echo_json([receipt_to_dict(r) for r in receipts])


@click.command()
@click.argument("tx_hex")
@click.pass_obj
def submit(provider: Provider, tx_hex: str) -> None:
    """Submit an encoded transaction and print its id."""
    tx = _decode_argument(tx_hex)
    with node_errors():
        transaction_id = provider.submit(tx)
    click.echo(transaction_id)
