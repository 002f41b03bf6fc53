"""Executables the source NUTs run against, toggled by environment variables."""

import logging
import os
import shutil
from collections.abc import Mapping
from pathlib import Path

from sourcenuts.test_matrix.models.executable import Executable

logger = logging.getLogger(__name__)

SFDX_TOGGLE = "PLUGIN_SOURCE_TEST_SFDX"
BIN_RUN_TOGGLE = "PLUGIN_SOURCE_TEST_BIN_RUN"

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


def env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    """Read a boolean toggle, falling back to ``default`` when unset or malformed."""
    raw = env.get(name)
    if raw is None:
        return default

    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False

    logger.warning(f"Ignoring invalid boolean {name}={raw!r}, using {default}")
    return default


def get_executables(
    env: Mapping[str, str] | None = None, cwd: Path | None = None
) -> list[Executable]:
    """Return the globally installed sfdx and the plugin's local bin/run.

    Args:
        env: Environment to read the toggles from (default: ``os.environ``)
        cwd: Plugin root containing ``bin/run`` (default: current directory)

    Returns:
        The sfdx executable followed by the bin/run executable

    """
    env = os.environ if env is None else env
    cwd = cwd or Path.cwd()

    return [
        Executable(
            path=shutil.which("sfdx"),
            skip=not env_bool(env, SFDX_TOGGLE, True),
        ),
        Executable(
            path=str(cwd / "bin" / "run"),
            skip=not env_bool(env, BIN_RUN_TOGGLE, False),
        ),
    ]
