"""
Read-only node lookups.
"""

from __future__ import annotations

from typing import Optional

import click

from ..provider import Provider
from .common import echo_json, node_errors, not_found, pagination_options, transaction_to_dict


@click.command()
@click.pass_obj
def version(provider: Provider) -> None:
    """Show the node version."""
    with node_errors():
        click.echo(provider.get_version())


@click.command()
@click.argument("transaction_id")
@click.pass_obj
def transaction(provider: Provider, transaction_id: str) -> None:
    """Fetch and decode a transaction."""
    with node_errors():
        tx = provider.get_transaction(transaction_id)
    if tx is None:
        not_found("Transaction", transaction_id)
    echo_json(transaction_to_dict(tx))


@click.command()
@pagination_options
@click.pass_obj
def transactions(
    provider: Provider,
    first: Optional[int],
    last: Optional[int],
    after: Optional[str],
    before: Optional[str],
) -> None:
    """List transactions."""
    with node_errors():
        txs = provider.get_transactions(after=after, before=before, first=first, last=last)
    echo_json([transaction_to_dict(tx) for tx in txs])


@click.command()
@click.argument("block_id")
@click.pass_obj
def block(provider: Provider, block_id: str) -> None:
    """Fetch a block."""
    with node_errors():
        result = provider.get_block(block_id)
    if result is None:
        not_found("Block", block_id)
    echo_json(result.to_dict())


@click.command()
@pagination_options
@click.pass_obj
def blocks(
    provider: Provider,
    first: Optional[int],
    last: Optional[int],
    after: Optional[str],
    before: Optional[str],
) -> None:
    """List blocks."""
    with node_errors():
        result = provider.get_blocks(after=after, before=before, first=first, last=last)
    echo_json([b.to_dict() for b in result])


@click.command()
@click.argument("coin_id")
@click.pass_obj
def coin(provider: Provider, coin_id: str) -> None:
    """Fetch a coin."""
    with node_errors():
        result = provider.get_coin(coin_id)
    if result is None:
        not_found("Coin", coin_id)
    echo_json(result.to_dict())
