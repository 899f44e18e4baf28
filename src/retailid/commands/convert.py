"""Command: re-encode a scanned retail ID."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from retailid.commands._base import ENCODING_CHOICE, RetailIdCommand, base64_flag

if TYPE_CHECKING:
    from retailid.commands._context import AppContext


@click.command(
    cls=RetailIdCommand,
    examples="""\
  retailid convert https://1a4.com/GkBgMAAgCBAAAGYJAQ
  retailid convert HTTPS://1A4.COM/5LN8CBN1UB33DON9CHKX --encoding base64
  retailid convert 5LN8CBN1UB33DON9CHKX --strict --domain example.com""",
)
@click.argument("text")
@click.option("--strict", is_flag=True, help="Fall back to mongo timestamp validation only.")
@click.option("--domain", default=None, help="Domain for the new URL (default from config).")
@click.option("--encoding", type=ENCODING_CHOICE, default=None, help="Target encoding.")
@click.pass_obj
def convert(
    app: AppContext,
    text: str,
    strict: bool,
    domain: str | None,
    encoding: str | None,
) -> None:
    """Resolve a scanned retail ID and print it as a short URL.

    Pass ``-`` as TEXT to read the scan from stdin.
    """
    from retailid.services.resolve import ResolveService

    service = ResolveService(app.settings)
    app.emit(
        service.convert(
            app.read_scanned(text),
            strict=strict,
            domain=domain,
            base64=base64_flag(encoding),
        )
    )
