"""
fuelprovider CLI

Command-line access to a node's GraphQL API.

Commands:
  version       - Show the node version
  transaction   - Fetch a transaction by id
  transactions  - List transactions
  block         - Fetch a block by id
  blocks        - List blocks
  coin          - Fetch a coin by id
  call          - Dry-run a transaction built from options
  send          - Submit a transaction built from options and read it back
  dry-run       - Dry-run an encoded transaction
  submit        - Submit an encoded transaction
  session       - Manage interactive execution sessions
"""

from __future__ import annotations

import logging
import sys

import click

from .config import get_node_url, load_env
from .provider import Provider

VERSION = "0.1.0"


@click.group()
@click.version_option(version=VERSION, prog_name="fuelprovider")
@click.option(
    "--url",
    envvar="FUEL_NODE_URL",
    default=None,
    help="Node GraphQL URL",
)
@click.option("--verbose", "-v", is_flag=True, help="Log GraphQL traffic")
@click.pass_context
def cli(ctx: click.Context, url: str | None, verbose: bool) -> None:
    """fuelprovider: client for a ledger node's GraphQL API."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )
    ctx.obj = Provider(url or get_node_url())


# ============ Commands ============

from .commands.query import block, blocks, coin, transaction, transactions, version
from .commands.execution import call, dry_run, send, submit
from .commands.session import session

cli.add_command(version)
cli.add_command(transaction)
cli.add_command(transactions)
cli.add_command(block)
cli.add_command(blocks)
cli.add_command(coin)
cli.add_command(call)
cli.add_command(send)
cli.add_command(dry_run)
cli.add_command(submit)
cli.add_command(session)


# ============ Entry Points ============


def main() -> None:
    """fuelprovider CLI entry point."""
    load_env()
    if sys.platform == "win32":
        try:
            sys.stdout.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
            sys.stderr.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
        except (AttributeError, OSError):
            pass
    cli()


if __name__ == "__main__":
    main()
