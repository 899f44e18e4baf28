"""Command: encode a batch ID and index as a short URL."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from retailid.commands._base import ENCODING_CHOICE, RetailIdCommand, base64_flag

if TYPE_CHECKING:
    from retailid.commands._context import AppContext


@click.command(
    cls=RetailIdCommand,
    examples="""\
  retailid encode 1a4060300020081000006609 1
  retailid encode 1a4060300020081000006609 1 --encoding base64
  retailid -q encode 1a4060300020081000006609 42 --domain example.com""",
)
@click.argument("batch_id")
@click.argument("index", type=click.IntRange(min=0))
@click.option("--domain", default=None, help="URL domain (default from config).")
@click.option("--encoding", type=ENCODING_CHOICE, default=None, help="Output encoding.")
@click.pass_obj
def encode(
    app: AppContext,
    batch_id: str,
    index: int,
    domain: str | None,
    encoding: str | None,
) -> None:
    """Encode a 24-char hex BATCH_ID and INDEX as a short URL."""
    from retailid.services.encode import EncodeService

    service = EncodeService(app.settings)
    app.emit(service.encode(batch_id, index, domain=domain, base64=base64_flag(encoding)))
