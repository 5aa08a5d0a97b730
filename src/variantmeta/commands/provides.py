#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Capability listing commands for the variantmeta CLI."""

from __future__ import annotations

import shlex

import click
from provide.foundation.console import perr, pout
from provide.foundation.serialization import json_dumps

from variantmeta.commands.common import load_build_options, options_file_option, os_prefix_option
from variantmeta.console import get_command_logger
from variantmeta.descriptor import MetadataDescriptor
from variantmeta.exceptions import ConfigurationError

log = get_command_logger("provides")


def _descriptor_or_abort(options_file: str | None, os_prefix: str, command: str) -> MetadataDescriptor:
    try:
        return MetadataDescriptor(load_build_options(options_file), os_prefix=os_prefix)
    except ConfigurationError as e:
        log.error("Loading build options failed", command=command, error=str(e))
        perr(f"❌ {e}")
        raise click.Abort() from e


@click.command("provides")
@options_file_option
@os_prefix_option
@click.option("--json", "as_json", is_flag=True, help="Output the capabilities as a JSON array.")
@click.option("--features-only", is_flag=True, help="Only list image-feature capabilities.")
def provides_command(options_file: str | None, os_prefix: str, as_json: bool, features_only: bool) -> None:
    """List the capabilities the descriptor provides, one per line."""
    descriptor = _descriptor_or_abort(options_file, os_prefix, "provides")
    capabilities = descriptor.feature_provides() if features_only else descriptor.provides()
    log.debug("Listing capabilities", count=len(capabilities), features_only=features_only)

    if as_json:
        pout(json_dumps(capabilities, indent=2))
        return
    for capability in capabilities:
        pout(capability)


@click.command("bconds")
@options_file_option
def bconds_command(options_file: str | None) -> None:
    """Print the rpmbuild --with/--without arguments for the image features."""
    args = _descriptor_or_abort(options_file, "", "bconds").bcond_arguments()
    log.debug("Rendering bcond arguments", args=args)
    pout(shlex.join(args))


# 🌶️📦🔚
