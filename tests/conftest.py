"""Shared pytest fixtures for retailid tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from retailid.config.settings import RetailIdSettings
from retailid.domain.ids import ObjectIdentifier
from samples import SAMPLE_HEX


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def sample_id() -> ObjectIdentifier:
    return ObjectIdentifier.from_hex(SAMPLE_HEX)


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> RetailIdSettings:
    """Default settings isolated from any retailid.toml on the host."""
    monkeypatch.delenv("RETAILID_CONFIG", raising=False)
    return RetailIdSettings.from_cli(start=tmp_path)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI from an empty temp directory so no config is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes.
    """
    monkeypatch.delenv("RETAILID_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
