"""Root CLI group for retailid with global flags and command registration."""

from __future__ import annotations

import click

from retailid import __version__
from retailid.commands import register_commands
from retailid.commands._context import AppContext
from retailid.config.settings import RetailIdSettings

_EPILOG = """\
Configuration is read from retailid.toml, or the [tool.retailid] table of
pyproject.toml, found by walking up from the working directory.
RETAILID_* environment variables override it; flags override both."""


@click.group(
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog=_EPILOG,
)
@click.version_option(version=__version__, prog_name="retailid")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output (URLs or 'batch_id index').")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with resolver debug logs.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Use this config file instead of discovering one.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """retailid — resolve and encode retail ID short URLs."""
    settings = RetailIdSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings, command=ctx.invoked_subcommand)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
