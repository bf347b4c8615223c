# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Allow python -m datshell."""

from datshell.cli.main import app

if __name__ == "__main__":
    app()
