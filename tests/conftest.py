#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures for variantmeta tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from click.testing import CliRunner
import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

from variantmeta.features import resolve_feature_flags
from variantmeta.options import BuildOptions
from variantmeta.variant import VariantIdentity

OPTIONS_TOML = """\
[variant]
name = "aws-k8s-1.31"
platform = "aws"
runtime = "k8s"
family = "aws-k8s"
flavor = "nvidia"

[image-features]
grub-set-private-var = true
uefi-secure-boot = false
systemd-networkd = true
unified-cgroup-hierarchy = false
xfs-data-partition = false
fips = true
"""

BUILD_ENV = {
    "BUILDSYS_VARIANT": "aws-k8s-1.31",
    "BUILDSYS_VARIANT_PLATFORM": "aws",
    "BUILDSYS_VARIANT_RUNTIME": "k8s",
    "BUILDSYS_VARIANT_FAMILY": "aws-k8s",
    "BUILDSYS_VARIANT_FLAVOR": "nvidia",
    "BUILDSYS_VARIANT_IMAGE_FEATURE_GRUB_SET_PRIVATE_VAR": "true",
    "BUILDSYS_VARIANT_IMAGE_FEATURE_UEFI_SECURE_BOOT": "false",
    "BUILDSYS_VARIANT_IMAGE_FEATURE_SYSTEMD_NETWORKD": "1",
    "BUILDSYS_VARIANT_IMAGE_FEATURE_UNIFIED_CGROUP_HIERARCHY": "no",
    "BUILDSYS_VARIANT_IMAGE_FEATURE_XFS_DATA_PARTITION": "off",
    "BUILDSYS_VARIANT_IMAGE_FEATURE_FIPS": "YES",
}


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    reset_foundation_setup_for_testing()


@pytest.fixture
def cli_runner() -> CliRunner:
    """CliRunner with logging pinned so debug events stay out of command output."""
    return CliRunner(env={"VARIANTMETA_LOG_LEVEL": "WARNING", "PROVIDE_LOG_LEVEL": "WARNING"})


@pytest.fixture
def feature_values() -> dict[str, bool]:
    """Mixed feature states, keyed the way build systems spell bconds."""
    return {
        "grub_set_private_var": True,
        "uefi_secure_boot": False,
        "systemd_networkd": True,
        "unified_cgroup_hierarchy": False,
        "xfs_data_partition": False,
        "fips": True,
    }


@pytest.fixture
def identity() -> VariantIdentity:
    return VariantIdentity(
        variant="aws-k8s-1.31",
        platform="aws",
        runtime="k8s",
        family="aws-k8s",
        flavor="nvidia",
    )


@pytest.fixture
def build_options(identity: VariantIdentity, feature_values: dict[str, bool]) -> BuildOptions:
    return BuildOptions(identity=identity, features=resolve_feature_flags(feature_values))


@pytest.fixture
def options_file(tmp_path: Path) -> Path:
    """A valid TOML build options file."""
    path = tmp_path / "build-options.toml"
    path.write_text(OPTIONS_TOML)
    return path


@pytest.fixture
def build_env() -> dict[str, str]:
    return dict(BUILD_ENV)


# 🌶️📦🔚
