# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
from threading import Lock
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, model_validator

from .config_loader import (
    DATSHELL_CONFIG_ENV,
    DEFAULT_SHELL_CONF,
    load_json_config,
    resolve_config_path,
)


class ArchiveConfig(BaseModel):
    """One archive known to the library."""

    backend: str = Field(default="local", description="Archive provider: 'local' | 'http'")

    path: Optional[str] = Field(
        default=None, description="Directory holding the archive files (local backend)"
    )

    url: Optional[str] = Field(
        default=None, description="Gateway base URL serving this archive (http backend)"
    )

    title: str = Field(default="", description="Human readable title shown by ls at ~")

    model_config = {"extra": "forbid"}

    @model_validator(mode="after")
    def validate_config(self):
        if self.backend not in ["local", "http"]:
            raise ValueError(
                f"Invalid archive backend: '{self.backend}'. Must be one of: 'local', 'http'"
            )
        if self.backend == "local" and not self.path:
            raise ValueError("Local archive requires 'path' to be set")
        if self.backend == "http" and not self.url:
            raise ValueError("HTTP archive requires 'url' to be set")
        return self


class GatewayConfig(BaseModel):
    """Fallback gateway used to load archives that are not configured explicitly."""

    url: Optional[str] = Field(
        default=None, description="Gateway base URL; archives are served under /<key>"
    )

    timeout: int = Field(default=30, description="Gateway request timeout (seconds)")

    model_config = {"extra": "forbid"}


class ShellConfig(BaseModel):
    """Top-level datshell configuration (shell.conf)."""

    ls_after_cd: bool = Field(default=True, description="Run ls after a successful cd")

    state_path: str = Field(
        default="~/.datshell/state.json",
        description="File persisting the working directory and installed commands",
    )

    archives: Dict[str, ArchiveConfig] = Field(
        default_factory=dict, description="Archives by key"
    )

    gateway: GatewayConfig = Field(default_factory=lambda: GatewayConfig())

    output: str = Field(default="table", description="Default CLI output format: table, json or html")

    log_level: str = Field(default="WARNING", description="Log level")

    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s", description="Log format"
    )

    log_output: str = Field(
        default="stderr", description="Log output: 'stdout', 'stderr' or a file path"
    )

    model_config = {"extra": "forbid"}

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "ShellConfig":
        return cls.model_validate(config)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


class ShellConfigSingleton:
    """Global singleton for ShellConfig.

    Resolution chain for shell.conf:
      1. Explicit path passed to initialize()
      2. DATSHELL_CONFIG_FILE environment variable
      3. ~/.datshell/shell.conf
      4. Built-in defaults
    """

    _instance: Optional[ShellConfig] = None
    _lock: Lock = Lock()

    @classmethod
    def get_instance(cls) -> ShellConfig:
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls._load(None)
        return cls._instance

    @classmethod
    def initialize(
        cls,
        config_dict: Optional[Dict[str, Any]] = None,
        config_path: Optional[str] = None,
    ) -> ShellConfig:
        """Initialize the global singleton.

        Args:
            config_dict: Direct config dictionary (highest priority).
            config_path: Explicit path to shell.conf.

        Raises:
            FileNotFoundError: If ``config_path`` is given but does not exist.
        """
        with cls._lock:
            if config_dict is not None:
                cls._instance = ShellConfig.from_dict(config_dict)
            else:
                if config_path and resolve_config_path(
                    config_path, DATSHELL_CONFIG_ENV, DEFAULT_SHELL_CONF
                ) is None:
                    raise FileNotFoundError(f"Config file does not exist: {config_path}")
                cls._instance = cls._load(config_path)
        return cls._instance

    @classmethod
    def _load(cls, config_path: Optional[str]) -> ShellConfig:
        path = resolve_config_path(config_path, DATSHELL_CONFIG_ENV, DEFAULT_SHELL_CONF)
        if path is None:
            return ShellConfig()
        return ShellConfig.from_dict(load_json_config(path))

    @classmethod
    def reset_instance(cls) -> None:
        """Reset the singleton instance (mainly for testing)."""
        with cls._lock:
            cls._instance = None


def get_shell_config() -> ShellConfig:
    """Get the global ShellConfig instance."""
    return ShellConfigSingleton.get_instance()


def set_shell_config(config: ShellConfig) -> None:
    """Set the global ShellConfig instance."""
    ShellConfigSingleton.initialize(config_dict=config.to_dict())
