"""Locate ``chainctl.toml``.

Lookup order: ``CHAINCTL_CONFIG`` when set, otherwise the start directory
and each of its parents, then the per-user ``~/.chainctl/chainctl.toml``.
The ``--config`` flag bypasses discovery entirely (see settings).
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "chainctl.toml"
CONFIG_ENV_VAR = "CHAINCTL_CONFIG"
USER_CONFIG_DIRNAME = ".chainctl"

logger = logging.getLogger(__name__)


def user_config_path() -> Path:
    return Path.home() / USER_CONFIG_DIRNAME / CONFIG_FILENAME


def candidate_paths(start: Path | None = None) -> Iterator[Path]:
    """Yield every location ``find_config`` checks, nearest first."""
    directory = (start or Path.cwd()).resolve()
    for folder in (directory, *directory.parents):
        yield folder / CONFIG_FILENAME
    yield user_config_path()


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), or None.

    An explicit ``CHAINCTL_CONFIG`` pointing at a missing file disables
    discovery rather than falling back to another file.
    """
    explicit = os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        path = Path(explicit).expanduser()
        if path.is_file():
            return path
        logger.warning("%s points to %s, which does not exist", CONFIG_ENV_VAR, path)
        return None

    return next((path for path in candidate_paths(start) if path.is_file()), None)
