# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Unified exception classes for datshell.

Codes follow gRPC status names so that CLI output and gateway error payloads
use the same vocabulary.
"""

from typing import Optional


class DatShellError(Exception):
    """Base exception for all datshell errors."""

    def __init__(self, message: str, code: str = "UNKNOWN", details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


# ============= Argument Errors =============


class InvalidArgumentError(DatShellError):
    """Invalid argument provided."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message, code="INVALID_ARGUMENT", details=details)


class ResolutionError(DatShellError):
    """A location could not be mapped to an archive and path."""

    def __init__(self, location: str, reason: str = ""):
        message = f"Cannot resolve: {location}"
        if reason:
            message += f" ({reason})"
        super().__init__(
            message, code="RESOLUTION_FAILED", details={"location": location, "reason": reason}
        )


class CommandNotFoundError(DatShellError):
    """No builtin or installed command has this name."""

    def __init__(self, name: str):
        super().__init__(
            f"command not found: {name}", code="COMMAND_NOT_FOUND", details={"command": name}
        )


# ============= Resource Errors =============


class NotFoundError(DatShellError):
    """Resource not found."""

    def __init__(self, resource: str, resource_type: str = "path"):
        message = f"{resource_type.capitalize()} not found: {resource}"
        super().__init__(
            message, code="NOT_FOUND", details={"resource": resource, "type": resource_type}
        )


class AlreadyExistsError(DatShellError):
    """Resource already exists."""

    def __init__(self, resource: str, resource_type: str = "path"):
        message = f"{resource_type.capitalize()} already exists: {resource}"
        super().__init__(
            message, code="ALREADY_EXISTS", details={"resource": resource, "type": resource_type}
        )


class DirectoryNotEmptyError(DatShellError):
    """Non-recursive removal of a directory that still has entries."""

    def __init__(self, path: str):
        super().__init__(
            f"Directory not empty: {path}", code="FAILED_PRECONDITION", details={"resource": path}
        )


class PathTypeError(DatShellError):
    """A file was given where a directory is expected, or the reverse."""

    def __init__(self, path: str, expected: str = "directory"):
        super().__init__(
            f"Not a {expected}: {path}",
            code="FAILED_PRECONDITION",
            details={"resource": path, "expected": expected},
        )


# ============= Access Errors =============


class PermissionDeniedError(DatShellError):
    """Permission denied for the requested operation."""

    def __init__(self, message: str = "Permission denied", resource: Optional[str] = None):
        details = {"resource": resource} if resource else {}
        super().__init__(message, code="PERMISSION_DENIED", details=details)


class UnavailableError(DatShellError):
    """Archive provider temporarily unavailable."""

    def __init__(self, service: str = "archive", reason: str = ""):
        message = f"{service.capitalize()} unavailable"
        if reason:
            message += f": {reason}"
        super().__init__(
            message, code="UNAVAILABLE", details={"service": service, "reason": reason}
        )


# ============= Shell Control =============


class ShellExit(DatShellError):
    """Raised by the exit command to end the session with a status code."""

    def __init__(self, exit_code: int = 0):
        super().__init__(f"exit {exit_code}", code="EXIT", details={"exit_code": exit_code})
        self.exit_code = exit_code
