#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""variantmeta command-line interface entrypoint."""

from __future__ import annotations

from attrs import evolve
import click
from provide.foundation import CLIContext, TelemetryConfig, get_hub
from provide.foundation.utils import get_version

from variantmeta.commands.provides import bconds_command, provides_command
from variantmeta.commands.render import render_command
from variantmeta.config import VariantMetaRuntimeConfig

__version__ = get_version("variantmeta", caller_file=__file__)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="variantmeta",
    message="%(prog)s version %(version)s",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Variant metadata descriptor generator.

    Build options are read from a TOML/JSON file (--options) or from the
    BUILDSYS_VARIANT* environment variables.

    Configure logging via environment variables:
    - VARIANTMETA_LOG_LEVEL: Set log level (trace, debug, info, warning, error)
    - PROVIDE_LOG_FILE: Write logs to file
    """
    ctx.ensure_object(dict)

    runtime_config = VariantMetaRuntimeConfig.from_env()
    cli_ctx = CLIContext.from_env()
    base_telemetry = TelemetryConfig.from_env()

    telemetry_config = evolve(
        base_telemetry,
        service_name="variantmeta",
        logging=evolve(
            base_telemetry.logging,
            default_level=runtime_config.log_level,  # type: ignore[arg-type]
        ),
    )

    hub = get_hub()
    hub.initialize_foundation(telemetry_config)

    ctx.obj["cli_context"] = cli_ctx
    ctx.obj["log"] = cli_ctx.logger


cli.add_command(render_command, name="render")
cli.add_command(provides_command, name="provides")
cli.add_command(bconds_command, name="bconds")

main = cli

if __name__ == "__main__":
    cli()

# 🌶️📦🔚
