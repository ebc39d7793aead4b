"""Config file and data root discovery.

Walk-up finders locate cardflow.toml and an existing ``.cardflow/`` board
store, similar to how git finds .git/.  Supports the CARDFLOW_CONFIG env
var and the --config CLI flag.
"""

from __future__ import annotations

import os
from pathlib import Path

from cardflow.infrastructure.database.engine import DATA_DIRNAME, DB_FILENAME

CONFIG_FILENAME = "cardflow.toml"
CONFIG_ENV_VAR = "CARDFLOW_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for cardflow.toml.

    Returns the path to the config file, or None if not found.
    Checks CARDFLOW_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def find_data_root(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) to the nearest board store.

    Returns the directory holding ``.cardflow/cardflow.db``, so commands run
    from a subdirectory keep using the same boards.  None if there is none.
    """
    current = (start or Path.cwd()).resolve()
    for candidate in (current, *current.parents):
        if (candidate / DATA_DIRNAME / DB_FILENAME).is_file():
            return candidate
    return None
