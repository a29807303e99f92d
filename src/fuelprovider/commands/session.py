"""
Interactive execution sessions.

The session lives on the node; these commands only forward the id. Nothing
stops a caller from using an id after ``session end``, the node rejects it.
"""

from __future__ import annotations

import sys

import click

from ..provider import Provider
from .common import node_errors


def _report(ok: bool, action: str) -> None:
    if ok:
        click.secho(f"{action}: ok", fg="green")
    else:
        click.secho(f"{action}: rejected by node", fg="red")
        sys.exit(1)


@click.group()
def session() -> None:
    """Manage interactive execution sessions."""
    pass


@session.command("start")
@click.pass_obj
def session_start(provider: Provider) -> None:
    """Start a session and print its id."""
    with node_errors():
        session_id = provider.start_session()
    click.echo(session_id)


@session.command("execute")
@click.argument("session_id")
@click.argument("op")
@click.pass_obj
def session_execute(provider: Provider, session_id: str, op: str) -> None:
    """Execute an operation in a session."""
    with node_errors():
        ok = provider.execute(session_id, op)
    _report(ok, "execute")


@session.command("reset")
@click.argument("session_id")
@click.pass_obj
def session_reset(provider: Provider, session_id: str) -> None:
    """Reset a session's VM state."""
    with node_errors():
        ok = provider.reset(session_id)
    _report(ok, "reset")


@session.command("end")
@click.argument("session_id")
@click.pass_obj
def session_end(provider: Provider, session_id: str) -> None:
    """End a session."""
    with node_errors():
        ok = provider.end_session(session_id)
    _report(ok, "end")
