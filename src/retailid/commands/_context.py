"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Configures logging, reads scanned input, and
centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from retailid.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from retailid.config.settings import RetailIdSettings
    from retailid.services.result import ServiceResult

STDIN_MARKER = "-"


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.
    """

    def __init__(self, settings: RetailIdSettings, *, command: str | None = None) -> None:
        self.settings = settings

        from retailid.config.logging import bind_log_context, configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if command:
            bind_log_context(command=command)

    @staticmethod
    def read_scanned(text: str) -> str:
        """Return *text*, or the first non-blank stdin line when it is ``-``.

        Lets barcode scanners and shell pipelines feed the CLI directly.
        An empty stream yields ``""``, which the resolver reports as empty input.
        """
        if text != STDIN_MARKER:
            return text
        for line in click.get_text_stream("stdin"):
            if line.strip():
                return line.strip()
        return ""

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          In quiet mode warnings go to stderr so piped output stays clean.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if not result.ok:
            click.echo(output, err=True)
            raise SystemExit(1)

        click.echo(output)
        if settings.quiet and not settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
