# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Command registration for datshell CLI."""

import typer

from datshell.cli.commands import content, filesystem, system


def register_commands(app: typer.Typer) -> None:
    """Register all supported commands into the root CLI app."""
    filesystem.register(app)
    content.register(app)
    system.register(app)
