# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Command registry for datshell builtin commands.

Each command lives in its own module under this package and registers itself
with ``@register_command``. A command is called as
``func(env, opts, *args)`` where ``opts`` maps option names (without dashes)
to ``True`` or a string value. It is either a coroutine function returning a
result, or an async generator streaming results.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, FrozenSet, List, Optional

from datshell.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CommandSpec:
    """A registered builtin."""

    name: str
    func: Callable
    description: str = ""
    value_options: FrozenSet[str] = field(default_factory=frozenset)


# Global command registry
_COMMANDS: Dict[str, CommandSpec] = {}


def register_command(*names: str, description: str = "", value_options=()):
    """
    Decorator to register a command function.

    Args:
        *names: One or more command names
        description: One-line description shown by help
        value_options: Long options that take the next argument as their value

    Example:
        @register_command("echo", description="Output the arguments", value_options={"to"})
        async def cmd_echo(env, opts, *args):
            ...
    """

    def decorator(func: Callable):
        for name in names:
            _COMMANDS[name] = CommandSpec(
                name=name,
                func=func,
                description=description,
                value_options=frozenset(value_options),
            )
        return func

    return decorator


def get_builtin(command: str) -> Optional[CommandSpec]:
    """Get a built-in command by name, or None if not found."""
    return _COMMANDS.get(command)


def all_commands() -> List[CommandSpec]:
    """All registered builtins sorted by name."""
    return sorted(_COMMANDS.values(), key=lambda builtin: builtin.name)


def load_all_commands():
    """
    Import all command modules to populate the registry.

    Importing a module runs its @register_command decorators.
    """
    import importlib
    import os
    import pkgutil

    package_dir = os.path.dirname(__file__)

    for _, module_name, _ in pkgutil.iter_modules([package_dir]):
        if module_name != "base":
            try:
                importlib.import_module(f".{module_name}", package=__name__)
            except Exception as e:
                logger.warning(f"Failed to load command module {module_name}: {e}")


__all__ = ["CommandSpec", "register_command", "get_builtin", "all_commands", "load_all_commands"]
