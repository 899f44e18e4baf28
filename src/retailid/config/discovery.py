"""Config file discovery and loading.

Settings live in a dedicated ``retailid.toml`` or in the ``[tool.retailid]``
table of a ``pyproject.toml``.  The finder walks up from the working
directory (like git finding ``.git/``); at each level the dedicated file
wins.  ``RETAILID_CONFIG`` short-circuits the walk.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from retailid.config.models import RetailIdConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "retailid.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "RETAILID_CONFIG"


def _tool_table(data: dict[str, Any]) -> dict[str, Any] | None:
    tool = data.get("tool")
    if not isinstance(tool, dict):
        return None
    table = tool.get("retailid")
    return table if isinstance(table, dict) else None


def _pyproject_has_table(path: Path) -> bool:
    """True when *path* parses and carries a ``[tool.retailid]`` table.

    A broken pyproject belongs to someone else's tooling, so it is skipped
    rather than reported.
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.debug("Skipping unreadable %s: %s", path, exc)
        return False
    return _tool_table(data) is not None


def read_config_table(path: Path) -> dict[str, Any]:
    """Parse *path* and return the retailid settings table it holds.

    Raises:
        tomllib.TOMLDecodeError: If *path* is not valid TOML.
    """
    data = tomllib.loads(path.read_text(encoding="utf-8"))
    if path.name == PYPROJECT_FILENAME:
        return _tool_table(data) or {}
    return data


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for retailid settings.

    Returns the first ``retailid.toml``, or ``pyproject.toml`` with a
    ``[tool.retailid]`` table, found on the way to the filesystem root.
    Checks RETAILID_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        pyproject = directory / PYPROJECT_FILENAME
        if pyproject.is_file() and _pyproject_has_table(pyproject):
            return pyproject
    return None


def load_config(path: Path | None = None, cwd: Path | None = None) -> RetailIdConfig:
    """Load and validate config from *path*, or discover it from *cwd*.

    Returns default RetailIdConfig if nothing is found.
    """
    if path is None:
        path = find_config(cwd)
    if path is None:
        return RetailIdConfig()
    return RetailIdConfig.model_validate(read_config_table(path))
