"""Command: mint new random batch IDs."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from retailid.commands._base import ENCODING_CHOICE, RetailIdCommand, base64_flag

if TYPE_CHECKING:
    from retailid.commands._context import AppContext


@click.command(
    cls=RetailIdCommand,
    examples="""\
  retailid generate
  retailid generate --count 5 --index 1
  retailid --json generate --encoding base64""",
)
@click.option("-n", "--count", type=click.IntRange(min=1), default=1, help="How many IDs to mint.")
@click.option("--index", type=click.IntRange(min=0), default=0, help="Index for every new ID.")
@click.option("--domain", default=None, help="URL domain (default from config).")
@click.option("--encoding", type=ENCODING_CHOICE, default=None, help="Output encoding.")
@click.pass_obj
def generate(
    app: AppContext,
    count: int,
    index: int,
    domain: str | None,
    encoding: str | None,
) -> None:
    """Generate random batch IDs and their short URLs."""
    from retailid.services.encode import EncodeService

    service = EncodeService(app.settings)
    app.emit(
        service.generate(count=count, index=index, domain=domain, base64=base64_flag(encoding))
    )
