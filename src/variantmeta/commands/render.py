#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Render command for the variantmeta CLI."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import perr, pout
from provide.foundation.file import atomic_write_text
from provide.foundation.file.directory import ensure_parent_dir

from variantmeta.commands.common import load_build_options, options_file_option, os_prefix_option
from variantmeta.console import get_command_logger
from variantmeta.descriptor import MetadataDescriptor
from variantmeta.exceptions import ConfigurationError

# Get structured logger for this command
log = get_command_logger("render")


@click.command("render")
@options_file_option
@os_prefix_option
@click.option(
    "--template",
    is_flag=True,
    help="Emit %if %{with ...} blocks for the image features instead of evaluated lines.",
)
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False, resolve_path=True),
    default=None,
    help="Write the descriptor to this file instead of stdout.",
)
@click.option(
    "--force",
    "-f",
    is_flag=True,
    help="Overwrite an existing output file",
)
def render_command(
    options_file: str | None,
    os_prefix: str,
    template: bool,
    output_path: str | None,
    force: bool,
) -> None:
    """Render the variant metadata descriptor (an RPM spec file)."""
    log.debug(
        "Render command started",
        options_file=options_file,
        os_prefix=os_prefix,
        template=template,
        output=output_path,
    )

    output = Path(output_path) if output_path else None
    if output is not None and output.exists() and not force:
        log.error("Output file already exists", output=str(output))
        perr(f"❌ Output file already exists: {output}")
        perr("Use --force to overwrite")
        raise click.Abort()

    try:
        options = load_build_options(options_file)
        text = MetadataDescriptor(options, os_prefix=os_prefix).render(conditional=template)
    except ConfigurationError as e:
        log.error("Render failed", error=str(e), options_file=options_file)
        perr(f"❌ Render failed: {e}")
        raise click.Abort() from e

    if output is None:
        pout(text.rstrip("\n"))
        return

    try:
        ensure_parent_dir(output)
        atomic_write_text(output, text)
    except OSError as e:
        log.error("Writing descriptor failed", error=str(e), output=str(output))
        perr(f"❌ Failed to write {output}: {e}")
        raise click.Abort() from e

    log.info("Descriptor written", output=str(output), variant=options.identity.variant)
    pout(f"✅ Descriptor written to '{output}'")


# 🌶️📦🔚
