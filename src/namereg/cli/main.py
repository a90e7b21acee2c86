"""namereg CLI -- name registration from the command line.

Thin wrapper around the Python SDK using click.
Registration goes through the sync wrapper (register_name_sync).
"""

from __future__ import annotations

import json
import logging
import os

import click

from namereg.protocol import (
    Keypair,
    NameRegError,
    generate_keypair,
    make_profile_zone_file,
)
from namereg.sdk.config import ApiConfig
from namereg.sdk.identity import Identity, LocalIdentities
from namereg.sdk.notifications import Notification, NotificationLog
from namereg.sdk.registration import before_register, register_name_sync


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _error(msg: str) -> None:
    """Print an error message to stderr and exit 1."""
    click.echo(msg, err=True)
    raise SystemExit(1)


def _echo_notification(notification: Notification) -> None:
    if notification.error is not None:
        click.echo(f"{notification.type.value}: {notification.error}", err=True)
    else:
        click.echo(notification.type.value)


def _configure_logging(verbose: bool) -> None:
    level_name = "DEBUG" if verbose else os.getenv("NAMEREG_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="namereg")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """namereg -- register names with a decentralized naming service."""
    ctx.ensure_object(dict)
    _configure_logging(verbose)


# ---------------------------------------------------------------------------
# namereg register
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("name")
@click.option("--owner-address", "-a", required=True, help="Address that will own the name.")
@click.option(
    "--owner-key",
    envvar="NAMEREG_OWNER_KEY",
    required=True,
    help="Hex Ed25519 seed of the owner keypair (or NAMEREG_OWNER_KEY).",
)
@click.option(
    "--payment-key",
    envvar="NAMEREG_PAYMENT_KEY",
    default=None,
    help="Hex payment key, required for top-level names (or NAMEREG_PAYMENT_KEY).",
)
def register(name: str, owner_address: str, owner_key: str, payment_key: str | None) -> None:
    """Upload a default profile for NAME and submit its registration."""
    try:
        api = ApiConfig()
        keypair = Keypair.from_private_key(owner_key)
    except (NameRegError, ValueError) as exc:
        _error(f"Error: {exc}")

    identity = Identity(owner_address=owner_address)
    identities = LocalIdentities([identity])
    log = NotificationLog(forward=_echo_notification)

    before_register(log)
    terminal = register_name_sync(
        api,
        name,
        identity,
        0,
        owner_address,
        keypair,
        payment_key,
        dispatch=log,
        identities=identities,
    )
    if terminal.is_error:
        raise SystemExit(1)
    click.echo(f"Registration submitted for {name}")


# ---------------------------------------------------------------------------
# namereg zonefile
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("name")
@click.argument("profile_url")
def zonefile(name: str, profile_url: str) -> None:
    """Print the zone file pointing NAME at PROFILE_URL."""
    try:
        click.echo(make_profile_zone_file(name, profile_url), nl=False)
    except NameRegError as exc:
        _error(f"Error: {exc}")


# ---------------------------------------------------------------------------
# namereg keygen
# ---------------------------------------------------------------------------


@cli.command()
def keygen() -> None:
    """Generate a fresh owner keypair and print it as JSON (not stored)."""
    keypair = generate_keypair()
    click.echo(json.dumps(
        {"private_key": keypair.private_key, "public_key": keypair.public_key},
        indent=2,
    ))


# ---------------------------------------------------------------------------
# namereg config
# ---------------------------------------------------------------------------


@cli.command("config")
def show_config() -> None:
    """Print the resolved API configuration (secrets masked)."""
    try:
        api = ApiConfig()
    except ValueError as exc:
        _error(f"Error: {exc}")
    click.echo(json.dumps(api.to_dict(), indent=2))
