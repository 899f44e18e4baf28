"""Command: resolve a scanned retail ID."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from retailid.commands._base import RetailIdCommand

if TYPE_CHECKING:
    from retailid.commands._context import AppContext


@click.command(
    cls=RetailIdCommand,
    examples="""\
  retailid resolve HTTPS://1A4.COM/5LN8CBN1UB33DON9CHKX
  retailid resolve https://1a4.com/GkBgMAAgCBAAAGYJAQ
  retailid resolve 5LN8CBN1UB33DON9CHKX --strict-only
  retailid --json resolve "https://example.com/path/CODE?ref=qr" --fallback mongo
  echo 5LN8CBN1UB33DON9CHKX | retailid -q resolve -""",
)
@click.argument("text")
@click.option(
    "--fallback",
    type=click.Choice(["mongo", "any"]),
    default=None,
    help="Validation used when no known prefix matches (default from config).",
)
@click.option("--strict-only", is_flag=True, help="Only accept identifiers with a known prefix.")
@click.pass_obj
def resolve(app: AppContext, text: str, fallback: str | None, strict_only: bool) -> None:
    """Resolve a scanned URL or short code to its batch ID and index.

    Pass ``-`` as TEXT to read the scan from stdin.
    """
    from retailid.domain.types import ValidationMode
    from retailid.services.resolve import ResolveService

    service = ResolveService(app.settings)
    app.emit(
        service.resolve(
            app.read_scanned(text),
            validation_fallback=ValidationMode(fallback) if fallback else None,
            strict_prefixes_only=True if strict_only else None,
        )
    )
