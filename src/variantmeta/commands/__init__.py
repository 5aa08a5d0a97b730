#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command modules for the variantmeta CLI."""

from __future__ import annotations

from variantmeta.commands.provides import bconds_command, provides_command
from variantmeta.commands.render import render_command

__all__ = [
    "bconds_command",
    "provides_command",
    "render_command",
]

# 🌶️📦🔚
