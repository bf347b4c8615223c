# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""datshell CLI package."""

from datshell.cli.main import app

__all__ = ["app"]
