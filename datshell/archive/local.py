# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Archive backed by a directory on the local disk."""

import errno
import os
import shutil
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Union

from datshell.archive.base import Archive, DirEntry, Stat, normalize_path
from datshell.exceptions import (
    AlreadyExistsError,
    DirectoryNotEmptyError,
    NotFoundError,
    PathTypeError,
    PermissionDeniedError,
)
from datshell.utils.logger import get_logger

logger = get_logger(__name__)


@contextmanager
def _os_errors(path: str):
    """Translate OSError subclasses into datshell errors for ``path``."""
    try:
        yield
    except FileNotFoundError:
        raise NotFoundError(path)
    except FileExistsError:
        raise AlreadyExistsError(path)
    except NotADirectoryError:
        raise PathTypeError(path, expected="directory")
    except IsADirectoryError:
        raise PathTypeError(path, expected="file")
    except PermissionError:
        raise PermissionDeniedError(resource=path)
    except OSError as e:
        if e.errno == errno.ENOTEMPTY:
            raise DirectoryNotEmptyError(path)
        raise


class LocalArchive(Archive):
    """Archive whose checkout lives under ``root`` on the local filesystem."""

    def __init__(self, key: str, root: Union[str, Path], title: str = ""):
        super().__init__(key, title)
        self.root = Path(root).expanduser().resolve()
        logger.debug(f"[LocalArchive] {self.url} -> {self.root}")

    def _local(self, path: str) -> Path:
        return self.root / normalize_path(path).lstrip("/")

    @staticmethod
    def _stat_of(local: Path) -> Stat:
        st = local.stat()
        return Stat(
            is_dir=local.is_dir(),
            size=0 if local.is_dir() else st.st_size,
            mtime=datetime.fromtimestamp(st.st_mtime, tz=timezone.utc),
        )

    async def readdir(self, path: str, stat: bool = False) -> List[DirEntry]:
        local = self._local(path)
        with _os_errors(path):
            names = sorted(os.listdir(local))
            if not stat:
                return [DirEntry(name) for name in names]
            return [DirEntry(name, self._stat_of(local / name)) for name in names]

    async def stat(self, path: str) -> Stat:
        with _os_errors(path):
            return self._stat_of(self._local(path))

    async def mkdir(self, path: str) -> None:
        with _os_errors(path):
            self._local(path).mkdir()

    async def rmdir(self, path: str, recursive: bool = False) -> None:
        if normalize_path(path) == "/":
            raise PermissionDeniedError("Cannot remove the archive root", resource=path)
        local = self._local(path)
        with _os_errors(path):
            if not local.is_dir():
                if not local.exists():
                    raise FileNotFoundError(path)
                raise NotADirectoryError(path)
            if recursive:
                shutil.rmtree(local)
            else:
                local.rmdir()
        logger.debug(f"[LocalArchive] rmdir {self.url}{path} recursive={recursive}")

    async def read_file(self, path: str, encoding: Optional[str] = None) -> Union[bytes, str]:
        with _os_errors(path):
            data = self._local(path).read_bytes()
        return data.decode(encoding) if encoding else data

    async def write_file(self, path: str, data: Union[bytes, str]) -> None:
        if isinstance(data, str):
            data = data.encode("utf-8")
        with _os_errors(path):
            self._local(path).write_bytes(data)

    async def unlink(self, path: str) -> None:
        with _os_errors(path):
            self._local(path).unlink()

    async def rename(self, src: str, dst: str) -> None:
        dst_local = self._local(dst)
        if dst_local.exists():
            raise AlreadyExistsError(dst)
        with _os_errors(src):
            self._local(src).rename(dst_local)
