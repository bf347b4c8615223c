# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Logging utilities for datshell.

Every module logs through a child of the ``datshell`` logger. Only that parent
carries a handler, so ``configure_logging`` can re-apply level, format and
output at any time (e.g. once ``--config`` has been loaded) and every module
logger follows, including the ones created at import time.
"""

import logging
import sys
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from datshell.utils.config import ShellConfig

ROOT_LOGGER_NAME = "datshell"


def _make_handler(output: str) -> logging.Handler:
    if output == "stdout":
        return logging.StreamHandler(sys.stdout)
    if output == "stderr":
        return logging.StreamHandler(sys.stderr)
    return logging.FileHandler(output, encoding="utf-8")


def configure_logging(config: Optional["ShellConfig"] = None) -> logging.Logger:
    """
    Apply the log settings of ``config`` to the datshell logger tree.

    Args:
        config: Settings to apply; the active shell config when omitted

    Returns:
        The ``datshell`` parent logger
    """
    from datshell.utils.config import ShellConfig, get_shell_config

    if config is None:
        try:
            config = get_shell_config()
        except (OSError, ValueError):
            config = ShellConfig()

    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    handler = _make_handler(config.log_output)
    handler.setFormatter(logging.Formatter(config.log_format))
    root.addHandler(handler)
    root.setLevel(getattr(logging, config.log_level.upper(), logging.WARNING))
    root.propagate = False
    return root


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    Get a datshell logger.

    The first call configures the parent from the active shell config.
    ``name`` should be a module name under ``datshell`` so records reach the
    parent's handler.
    """
    if not logging.getLogger(ROOT_LOGGER_NAME).handlers:
        configure_logging()
    return logging.getLogger(name)
