# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
from .config_loader import (
    DATSHELL_CONFIG_ENV,
    DEFAULT_CONFIG_DIR,
    DEFAULT_SHELL_CONF,
    load_json_config,
    resolve_config_path,
)
from .shell_config import (
    ArchiveConfig,
    GatewayConfig,
    ShellConfig,
    ShellConfigSingleton,
    get_shell_config,
    set_shell_config,
)

__all__ = [
    "ArchiveConfig",
    "DATSHELL_CONFIG_ENV",
    "DEFAULT_CONFIG_DIR",
    "DEFAULT_SHELL_CONF",
    "GatewayConfig",
    "ShellConfig",
    "ShellConfigSingleton",
    "get_shell_config",
    "load_json_config",
    "resolve_config_path",
    "set_shell_config",
]
