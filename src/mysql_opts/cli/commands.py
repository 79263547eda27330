"""
CLI commands for inspecting MySQL connection options.

Uses click for command-line argument parsing.
"""

import json
import logging
import sys

import click

from ..exceptions import UrlError
from ..opts import Opts


def _load(url: str) -> Opts:
    """Parse ``url`` or exit with status 1."""
    try:
        return Opts.from_url(url)
    except UrlError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """MySQL connection options inspector."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@cli.command()
@click.argument("url", envvar="DATABASE_URL")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--show-password", is_flag=True, help="Do not mask the password")
def inspect(url: str, as_json: bool, show_password: bool) -> None:
    """Show the options URL resolves to."""
    opts = _load(url)
    summary = opts.to_dict(mask_password=not show_password)

    if as_json:
        click.echo(json.dumps(summary, indent=2))
        return

    width = max(len(key) for key in summary)
    for key, value in summary.items():
        if isinstance(value, list):
            value = ", ".join(value) if value else "-"
        elif value is None:
            value = "-"
        click.echo(f"{key.ljust(width)}  {value}")


@cli.command()
@click.argument("url", envvar="DATABASE_URL")
def capabilities(url: str) -> None:
    """List the capability flags offered for URL."""
    opts = _load(url)
    flags = opts.capabilities
    for name in flags.names():
        click.echo(name)
    click.echo(f"0x{int(flags):08x}")


@cli.command()
@click.argument("url", envvar="DATABASE_URL")
def resolve(url: str) -> None:
    """Resolve the server address of URL."""
    opts = _load(url)
    try:
        addrs = opts.to_socket_addrs()
    except OSError as e:
        click.echo(f"Error: cannot resolve {opts.ip_or_hostname}: {e}", err=True)
        sys.exit(1)

    for sockaddr in addrs:
        host, port = sockaddr[0], sockaddr[1]
        if ":" in host:
            click.echo(f"[{host}]:{port}")
        else:
            click.echo(f"{host}:{port}")
