# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""The archive library: every archive the shell can address by key."""

import re
from typing import Dict, List, Optional

from datshell.archive.base import SCHEME, Archive
from datshell.archive.http import HTTPArchive
from datshell.archive.local import LocalArchive
from datshell.exceptions import ResolutionError
from datshell.utils.config import ShellConfig
from datshell.utils.logger import get_logger

logger = get_logger(__name__)

# 64-hex public keys, DNS names and plain local names
ARCHIVE_KEY_RE = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9._-]*[A-Za-z0-9])?$")


def is_archive_key(key: str) -> bool:
    return bool(key) and ARCHIVE_KEY_RE.match(key) is not None


class ArchiveLibrary:
    """Maps archive keys to archive handles.

    Archives listed in the config are registered up front. Any other
    well-formed key is loaded from the gateway when one is configured.
    """

    def __init__(
        self,
        archives: Optional[List[Archive]] = None,
        gateway_url: Optional[str] = None,
        gateway_timeout: float = 30.0,
    ):
        self._archives: Dict[str, Archive] = {}
        self._saved: List[str] = []
        self.gateway_url = gateway_url
        self.gateway_timeout = gateway_timeout
        for archive in archives or []:
            self.add(archive)

    @classmethod
    def from_config(cls, config: ShellConfig) -> "ArchiveLibrary":
        archives: List[Archive] = []
        for key, archive_config in config.archives.items():
            if archive_config.backend == "local":
                archives.append(LocalArchive(key, archive_config.path, title=archive_config.title))
            else:
                archives.append(
                    HTTPArchive(
                        key,
                        url=archive_config.url,
                        title=archive_config.title,
                        timeout=config.gateway.timeout,
                    )
                )
        return cls(archives, gateway_url=config.gateway.url, gateway_timeout=config.gateway.timeout)

    def add(self, archive: Archive) -> None:
        """Register an archive and list it in the library."""
        self._archives[archive.key] = archive
        if archive.key not in self._saved:
            self._saved.append(archive.key)

    def load(self, key: str) -> Archive:
        """Return the archive for ``key``.

        Raises:
            ResolutionError: If the key is malformed or no provider knows it.
        """
        location = f"{SCHEME}://{key}"
        if not is_archive_key(key):
            raise ResolutionError(location, "malformed archive key")
        if key in self._archives:
            return self._archives[key]
        if not self.gateway_url:
            raise ResolutionError(location, "unknown archive")

        logger.info(f"[ArchiveLibrary] Loading {location} from {self.gateway_url}")
        archive = HTTPArchive(key, url=self.gateway_url, timeout=self.gateway_timeout)
        self._archives[key] = archive
        return archive

    def list(self) -> List[Archive]:
        """Archives saved to the library, in registration order."""
        return [self._archives[key] for key in self._saved]

    async def close(self) -> None:
        for archive in self._archives.values():
            await archive.close()
