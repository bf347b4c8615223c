# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Base utilities for command implementations.
"""

from typing import Any, Dict, Iterable, List, Optional, Tuple

from datshell.exceptions import InvalidArgumentError


def parse_command_args(
    args: List[str], value_options: Optional[Iterable[str]] = None
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Split command arguments into options and positional arguments.

    - ``--name`` sets ``name`` to True, ``--name=value`` to ``value``
    - ``--name value`` takes the next argument when ``name`` is a value option
    - ``-abc`` sets ``a``, ``b`` and ``c`` to True
    - ``--`` stops option parsing; a lone ``-`` is positional

    Returns:
        Tuple of (opts, positional)

    Example:
        >>> parse_command_args(["-r", "--to", "out.txt", "a"], {"to"})
        ({'r': True, 'to': 'out.txt'}, ['a'])
    """
    value_options = set(value_options or ())
    opts: Dict[str, Any] = {}
    positional: List[str] = []
    i = 0

    while i < len(args):
        arg = args[i]

        if arg == "--":
            positional.extend(args[i + 1 :])
            break

        if arg.startswith("--"):
            name, sep, value = arg[2:].partition("=")
            if sep:
                opts[name] = value
            elif name in value_options and i + 1 < len(args):
                opts[name] = args[i + 1]
                i += 1
            else:
                opts[name] = True
        elif arg.startswith("-") and len(arg) > 1:
            for flag in arg[1:]:
                opts[flag] = True
        else:
            positional.append(arg)
        i += 1

    return opts, positional


def has_flag(opts: Dict[str, Any], *names: str) -> bool:
    """
    Check if any of the given options is set.

    Example:
        >>> has_flag({'r': True}, 'r', 'recursive')
        True
    """
    return any(opts.get(name) for name in names)


def require(value: Optional[str], name: str) -> str:
    """Return ``value`` or raise ``InvalidArgumentError('<name> is required')``."""
    if not value:
        raise InvalidArgumentError(f"{name} is required")
    return str(value)


__all__ = ["parse_command_args", "has_flag", "require"]
