# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Shell environment: the explicit context every command receives."""

from dataclasses import dataclass, field
from typing import Optional

from datshell.archive import SCHEME, Archive, ArchiveLibrary
from datshell.exceptions import PathTypeError, ResolutionError
from datshell.store import LocalStorage
from datshell.utils.config import ShellConfig
from datshell.utils.logger import get_logger
from datshell.utils.url import join_path, parse_location

logger = get_logger(__name__)

CWD_STORAGE_KEY = "cwd"


@dataclass(frozen=True)
class CWD:
    """Current working directory; ``key=None`` is the library root (``~``)."""

    key: Optional[str] = None
    path: str = "/"

    @property
    def location(self) -> str:
        if self.key is None:
            return "/"
        return join_path(f"/{self.key}", self.path.lstrip("/"))

    @property
    def url(self) -> str:
        if self.key is None:
            return ""
        return f"{SCHEME}://{self.key}{self.path if self.path != '/' else ''}"

    @classmethod
    def from_location(cls, location: str) -> "CWD":
        key, path = parse_location("~" + (location or "/"), cls())
        return cls(key=key, path=path)


@dataclass
class ShellEnv:
    """Library, working directory, config and storage shared by all commands."""

    library: ArchiveLibrary
    config: ShellConfig = field(default_factory=ShellConfig)
    storage: LocalStorage = field(default_factory=LocalStorage)
    cwd: CWD = field(default_factory=CWD)

    @classmethod
    def from_config(cls, config: ShellConfig) -> "ShellEnv":
        storage = LocalStorage(config.state_path)
        cwd = CWD.from_location(storage.get_item(CWD_STORAGE_KEY) or "/")
        return cls(
            library=ArchiveLibrary.from_config(config),
            config=config,
            storage=storage,
            cwd=cwd,
        )

    def get_cwd_archive(self) -> Archive:
        """Archive of the working directory.

        Raises:
            ResolutionError: At the library root.
        """
        if self.cwd.key is None:
            raise ResolutionError("~", "not inside an archive")
        return self.library.load(self.cwd.key)

    async def set_cwd(self, location: str) -> CWD:
        """Change directory to ``location`` after checking it is a directory."""
        key, path = parse_location(location, self.cwd)
        cwd = CWD(key=key, path=path)
        if key is not None:
            info = await self.library.load(key).stat(path)
            if not info.is_dir:
                raise PathTypeError(cwd.location, expected="directory")
        self.cwd = cwd
        self.storage.set_item(CWD_STORAGE_KEY, cwd.location)
        logger.debug(f"[ShellEnv] cwd -> {cwd.location}")
        return cwd

    async def close(self) -> None:
        await self.library.close()
