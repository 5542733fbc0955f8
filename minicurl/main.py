"""CLI entry point for minicurl."""

from __future__ import annotations

import logging
import sys
from typing import NoReturn

import click
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.markup import escape

from minicurl.config import Settings
from minicurl.console import err_console, setup_logging
from minicurl.dispatch import dispatch
from minicurl.errors import MinicurlError
from minicurl.headers import build_header_map, parse_header_spec

logger = logging.getLogger(__name__)


@click.command()
@click.version_option(version="0.1.0", prog_name="minicurl")
@click.argument("url")
@click.option(
    "-H",
    "--headers",
    default="",
    help='Headers to send, e.g. "Accept: text/plain, X-Token: abc123"',
)
def cli(url: str, headers: str) -> None:
    """Fetch URL with a single GET request and print the response body."""
    load_dotenv()
    try:
        settings = Settings.from_env()
    except ValidationError as e:
        _fail(f"invalid configuration: {e.errors()[0]['msg']}", 2)
    setup_logging(settings.log_level)

    logger.info("Fetching %s with headers: %s", url, headers or "(none)")
    try:
        header_map = build_header_map(parse_header_spec(headers))
        body = dispatch(url, header_map)
    except MinicurlError as e:
        _fail(str(e), e.exit_code)

    click.echo(body, nl=not body.endswith("\n"))


def _fail(message: str, exit_code: int) -> NoReturn:
    err_console.print(f"[red]Error: {escape(message)}[/red]")
    sys.exit(exit_code)


if __name__ == "__main__":
    cli()
