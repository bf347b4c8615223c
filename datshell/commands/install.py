# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
INSTALL and WHICH commands - command management.

Installed commands are recorded in the shell storage under ``cmd/<name>``.
"""

from typing import Any, Dict, Mapping, Optional

from datshell.commands import get_builtin, register_command
from datshell.commands.base import require
from datshell.context import ShellEnv
from datshell.exceptions import CommandNotFoundError, InvalidArgumentError, PathTypeError
from datshell.utils.logger import get_logger
from datshell.utils.url import resolve_url

logger = get_logger(__name__)

COMMAND_KEY_PREFIX = "cmd/"
COMMAND_EXTENSION = ".py"


def installed_commands(env: ShellEnv) -> Dict[str, str]:
    """Installed command names mapped to their source urls, by name."""
    return {
        key[len(COMMAND_KEY_PREFIX) :]: env.storage.get_item(key)
        for key in sorted(env.storage.keys())
        if key.startswith(COMMAND_KEY_PREFIX)
    }


@register_command("install", description="Install a command from an archive")
async def cmd_install(
    env: ShellEnv,
    opts: Mapping[str, Any],
    cmd: Optional[str] = None,
    url: Optional[str] = None,
    *_,
) -> None:
    """
    Usage: install <cmd> [url]

    The url defaults to ``<cmd>.py`` in the current directory.
    """
    cmd = require(cmd, "cmd")
    if not url:
        if env.cwd.key is None:
            raise InvalidArgumentError("url is required outside an archive")
        url = f"{env.cwd.url}/{cmd}{COMMAND_EXTENSION}"

    target = resolve_url(url, env.cwd, env.library)
    info = await target.archive.stat(target.path)
    if info.is_dir:
        raise PathTypeError(target.url, expected="file")

    env.storage.set_item(f"{COMMAND_KEY_PREFIX}{cmd}", target.url)
    logger.info(f"[install] {cmd} -> {target.url}")


@register_command("which", description="Show where a command comes from")
async def cmd_which(env: ShellEnv, opts: Mapping[str, Any], cmd: Optional[str] = None, *_) -> str:
    cmd = require(cmd, "cmd")
    installed = env.storage.get_item(f"{COMMAND_KEY_PREFIX}{cmd}")
    if installed:
        return installed
    if get_builtin(cmd) is not None:
        return f"builtin:{cmd}"
    raise CommandNotFoundError(cmd)
