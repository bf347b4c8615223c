# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""CLI output helpers."""

import json
from dataclasses import asdict, is_dataclass
from typing import Any, Dict, List, Optional

import typer
from tabulate import tabulate

from datshell.cli.context import CLIContext
from datshell.commands.rmdir import RemovalOutcome
from datshell.render import to_html

_MAX_COL_WIDTH = 256


def _to_serializable(value: Any) -> Any:
    """Convert rich Python values to JSON-serializable primitives."""
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if hasattr(value, "to_dict"):
        return _to_serializable(value.to_dict())
    if is_dataclass(value):
        return _to_serializable(asdict(value))
    if isinstance(value, dict):
        return {str(k): _to_serializable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_to_serializable(item) for item in value]
    return str(value)


def _truncate(val: Any) -> Any:
    """Truncate a value to _MAX_COL_WIDTH for table display."""
    s = str(val) if not isinstance(val, str) else val
    return s[: _MAX_COL_WIDTH - 3] + "..." if len(s) > _MAX_COL_WIDTH else val


def _format_list_table(rows: List[Dict[str, Any]], compact: bool = True) -> Optional[str]:
    """Render a list of dict rows as a table; compact mode drops the header row."""
    if not rows:
        return None

    headers: List[str] = []
    for row in rows:
        for key in row.keys():
            if str(key) not in headers:
                headers.append(str(key))

    values = [[_truncate(row.get(h, "")) for h in headers] for row in rows]
    if compact:
        return tabulate(values, tablefmt="plain")
    return tabulate(values, headers=headers, tablefmt="plain")


def output_success(ctx: CLIContext, result: Any) -> None:
    """Print successful command result."""
    if ctx.output_format == "html":
        html = to_html(result)
        if html:
            typer.echo(html)
        return

    serializable = _to_serializable(result)

    if ctx.output_format == "json":
        typer.echo(json.dumps({"ok": True, "result": serializable}, ensure_ascii=False))
        return
    if serializable is None:
        return
    if isinstance(serializable, str):
        typer.echo(serializable)
        return

    if isinstance(serializable, list) and all(isinstance(r, dict) for r in serializable):
        table = _format_list_table(serializable, ctx.compact)
        if table is not None:
            typer.echo(table)
        return

    if ctx.compact:
        typer.echo(json.dumps(serializable, ensure_ascii=False))
    else:
        typer.echo(json.dumps(serializable, ensure_ascii=False, indent=2))


def output_outcome(ctx: CLIContext, outcome: RemovalOutcome) -> None:
    """Print one streamed removal outcome as soon as it arrives."""
    if ctx.output_format == "json":
        typer.echo(json.dumps({"ok": outcome.ok, "result": outcome.to_dict()}, ensure_ascii=False))
    elif ctx.output_format == "html":
        html = outcome.to_html()
        if html:
            typer.echo(html)
    elif not outcome.ok:
        typer.echo(f"{outcome.command}: {outcome.path}: {outcome.error}", err=True)


def output_error(
    ctx: CLIContext,
    *,
    message: str,
    code: str,
    exit_code: int,
    details: Optional[Dict[str, Any]] = None,
) -> None:
    """Print error in JSON or plain format then exit."""
    details = details or {}
    if ctx.output_format == "json":
        payload = {
            "ok": False,
            "error": {
                "code": code,
                "message": message,
                "details": _to_serializable(details),
            },
        }
        typer.echo(json.dumps(payload, ensure_ascii=False), err=True)
    else:
        typer.echo(f"ERROR[{code}]: {message}", err=True)
    raise typer.Exit(exit_code)
