"""Locating and reading ``grouporder.toml``.

The file declares ordering kinds (``[kinds.<Name>]``), named orderings of
those kinds (``[orderings.<name>]``) and the default record field for
``grouporder sort``. It is looked up from the working directory towards
the filesystem root, so one file at a project root serves every
subdirectory. ``GROUPORDER_CONFIG`` names a file directly and disables the
walk.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

from grouporder.config.models import GroupOrderConfig

CONFIG_FILENAME = "grouporder.toml"
CONFIG_ENV_VAR = "GROUPORDER_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file governing *start* (default: cwd), if any.

    An env var naming a missing file yields None without walking.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path | None = None, cwd: Path | None = None) -> GroupOrderConfig:
    """Parse kinds and orderings from *path*, or from the discovered file.

    Without any file the config is empty: no kinds, no orderings.

    Raises:
        tomllib.TOMLDecodeError: If the file is not valid TOML.
        pydantic.ValidationError: If a section has the wrong shape.
    """
    path = path or find_config(cwd)
    if path is None:
        return GroupOrderConfig()
    with path.open("rb") as handle:
        return GroupOrderConfig.model_validate(tomllib.load(handle))
