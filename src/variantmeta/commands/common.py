#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Options and loaders shared by the variantmeta commands."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from variantmeta.options import BuildOptions


def options_file_option(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add ``--options FILE``; without it, build options come from the environment."""
    return click.option(
        "--options",
        "options_file",
        type=click.Path(exists=True, dir_okay=False, resolve_path=True),
        default=None,
        help="TOML or JSON build options file (default: BUILDSYS_VARIANT* environment variables).",
    )(func)


def os_prefix_option(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add ``--os-prefix``, prepended to the package and capability names."""
    return click.option(
        "--os-prefix",
        default="",
        show_default=False,
        help="OS prefix for the package and capability names, e.g. 'bottlerocket-'.",
    )(func)


def load_build_options(options_file: str | None) -> BuildOptions:
    """Load build options from a file when given, else from the environment."""
    if options_file:
        return BuildOptions.from_file(Path(options_file))
    return BuildOptions.from_env()


# 🌶️📦🔚
