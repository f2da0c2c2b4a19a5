"""Locating ``selectorctl.toml``.

A project keeps its selector defaults (``[render]``, ``[output]``) in a
``selectorctl.toml`` at or above the directory the CLI runs in.
``SELECTORCTL_CONFIG`` pins a file for the whole environment; the
``--config`` flag bypasses discovery entirely (see
:meth:`SelectorSettings.from_cli`).
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "selectorctl.toml"
CONFIG_ENV_VAR = "SELECTORCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest ``selectorctl.toml`` at or above *start* (default: cwd).

    A set ``SELECTORCTL_CONFIG`` wins over the walk; when it names a missing
    file no config is used. Returns None when nothing is found.
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
