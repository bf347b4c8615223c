# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Archive served by a remote gateway over HTTP.

The gateway speaks the AGFS file API (``/api/v1/directories``, ``/files``,
``/stat``, ``/rename``); each archive lives under its own root on the
gateway, ``/<key>`` by default.
"""

import posixpath
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

import httpx

from datshell.archive.base import Archive, DirEntry, Stat, normalize_path
from datshell.exceptions import (
    AlreadyExistsError,
    DatShellError,
    DirectoryNotEmptyError,
    NotFoundError,
    PathTypeError,
    PermissionDeniedError,
    UnavailableError,
)
from datshell.utils.logger import get_logger

logger = get_logger(__name__)

API_PREFIX = "/api/v1"


def _parse_stat(data: Dict[str, Any]) -> Stat:
    mtime = None
    mod_time = data.get("modTime")
    if mod_time:
        try:
            mtime = datetime.fromisoformat(mod_time.replace("Z", "+00:00"))
        except ValueError:
            mtime = None
    return Stat(
        is_dir=bool(data.get("isDir", False)),
        size=int(data.get("size", 0) or 0),
        mtime=mtime,
    )


class HTTPArchive(Archive):
    """Archive accessed through an HTTP gateway.

    Examples:
        archive = HTTPArchive("blog.example.com", url="http://localhost:8080")
        await archive.readdir("/posts")
        await archive.close()
    """

    def __init__(
        self,
        key: str,
        url: str,
        root: Optional[str] = None,
        title: str = "",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(key, title)
        self._url = url.rstrip("/")
        self._root = normalize_path(root if root is not None else f"/{key}")
        self._timeout = timeout
        self._transport = transport
        self._http: Optional[httpx.AsyncClient] = None

    # ============= Lifecycle =============

    def _client(self) -> httpx.AsyncClient:
        if self._http is None:
            self._http = httpx.AsyncClient(
                base_url=self._url,
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._http

    async def close(self) -> None:
        if self._http:
            await self._http.aclose()
            self._http = None

    # ============= Internal Helpers =============

    def _remote(self, path: str) -> str:
        return normalize_path(posixpath.join(self._root, normalize_path(path).lstrip("/")))

    async def _request(self, method: str, endpoint: str, path: str, **kwargs) -> httpx.Response:
        params = dict(kwargs.pop("params", {}))
        params["path"] = self._remote(path)
        logger.debug(f"[HTTPArchive] {method} {endpoint} {params}")
        response = await self._client().request(
            method, f"{API_PREFIX}{endpoint}", params=params, **kwargs
        )
        self._raise_for_status(response, path)
        return response

    def _raise_for_status(self, response: httpx.Response, path: str) -> None:
        """Map a failed gateway response onto the datshell exception hierarchy."""
        if response.is_success:
            return

        message = ""
        try:
            message = response.json().get("error") or ""
        except (ValueError, AttributeError):
            message = response.text

        status_code = response.status_code
        if "not empty" in message.lower():
            raise DirectoryNotEmptyError(path)
        if "not a directory" in message.lower():
            raise PathTypeError(path, expected="directory")
        if status_code == 404:
            raise NotFoundError(path)
        if status_code == 409:
            raise AlreadyExistsError(path)
        if status_code == 403:
            raise PermissionDeniedError(message or "Permission denied", resource=path)
        if status_code in (502, 503, 504):
            raise UnavailableError("gateway", message or f"HTTP {status_code}")
        raise DatShellError(
            message or f"HTTP error {status_code}",
            code="UNKNOWN",
            details={"status_code": status_code, "resource": path},
        )

    # ============= Directory Operations =============

    async def readdir(self, path: str, stat: bool = False) -> List[DirEntry]:
        response = await self._request("GET", "/directories", path)
        files = response.json().get("files") or []
        entries = []
        for item in files:
            name = item.get("name", "")
            if name in (".", ".."):
                continue
            entries.append(DirEntry(name, _parse_stat(item) if stat else None))
        return sorted(entries, key=lambda e: e.name)

    async def mkdir(self, path: str) -> None:
        await self._request("POST", "/directories", path, params={"mode": "755"})

    async def rmdir(self, path: str, recursive: bool = False) -> None:
        if normalize_path(path) == "/":
            raise PermissionDeniedError("Cannot remove the archive root", resource=path)
        if not (await self.stat(path)).is_dir:
            raise PathTypeError(path, expected="directory")
        params = {"recursive": "true"} if recursive else {}
        await self._request("DELETE", "/files", path, params=params)

    # ============= File Operations =============

    async def stat(self, path: str) -> Stat:
        response = await self._request("GET", "/stat", path)
        return _parse_stat(response.json())

    async def read_file(self, path: str, encoding: Optional[str] = None) -> Union[bytes, str]:
        response = await self._request("GET", "/files", path)
        return response.content.decode(encoding) if encoding else response.content

    async def write_file(self, path: str, data: Union[bytes, str]) -> None:
        if isinstance(data, str):
            data = data.encode("utf-8")
        await self._request("PUT", "/files", path, content=data)

    async def unlink(self, path: str) -> None:
        if (await self.stat(path)).is_dir:
            raise PathTypeError(path, expected="file")
        await self._request("DELETE", "/files", path)

    async def rename(self, src: str, dst: str) -> None:
        await self._request("POST", "/rename", src, json={"newPath": self._remote(dst)})
