# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Locating and reading shell.conf.

The first source that is set wins, and it must point at an existing file:
``--config`` first, then ``$DATSHELL_CONFIG_FILE``, then
``~/.datshell/shell.conf``. A set source that does not exist is not skipped
in favour of the next one.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

DEFAULT_CONFIG_DIR = Path.home() / ".datshell"

DATSHELL_CONFIG_ENV = "DATSHELL_CONFIG_FILE"

DEFAULT_SHELL_CONF = "shell.conf"


def resolve_config_path(
    explicit_path: Optional[str],
    env_var: str,
    default_filename: str,
) -> Optional[Path]:
    """Return the config file to load, or None when there is none.

    Args:
        explicit_path: Path given on the command line
        env_var: Environment variable that may hold a path
        default_filename: File name looked up under ``DEFAULT_CONFIG_DIR``
    """
    chosen = explicit_path or os.environ.get(env_var)
    candidate = Path(chosen).expanduser() if chosen else DEFAULT_CONFIG_DIR / default_filename
    return candidate if candidate.is_file() else None


def load_json_config(path: Path) -> Dict[str, Any]:
    """Read a JSON config file whose top level is an object.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid JSON or not a JSON object.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        raise FileNotFoundError(f"Config file does not exist: {path}")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must hold a JSON object")
    return data
