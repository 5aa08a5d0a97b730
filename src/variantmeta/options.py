#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Build options: the externally supplied variant identity and feature flags.

Options are loaded either from a TOML/JSON file::

    [variant]
    name = "aws-k8s-1.31"
    platform = "aws"
    runtime = "k8s"
    family = "aws-k8s"
    flavor = "nvidia"

    [image-features]
    grub-set-private-var = true
    uefi-secure-boot = true
    systemd-networkd = true
    unified-cgroup-hierarchy = true
    xfs-data-partition = true
    fips = false

or from the ``BUILDSYS_VARIANT*`` environment variables. Every value is
required; nothing is defaulted.
"""

from __future__ import annotations

from collections.abc import Mapping
import os
from pathlib import Path
import tomllib
from typing import Any

from attrs import define, field
from provide.foundation import logger
from provide.foundation.errors import FoundationError
from provide.foundation.file.formats import read_json

from variantmeta.config.defaults import (
    ENV_IMAGE_FEATURE_PREFIX,
    FALSE_VALUES,
    IMAGE_FEATURES,
    OPTIONS_FEATURES_TABLE,
    OPTIONS_VARIANT_NAME_KEY,
    OPTIONS_VARIANT_TABLE,
    TRUE_VALUES,
    VARIANT_ENV_VARS,
)
from variantmeta.exceptions import ConfigurationError, ManifestError
from variantmeta.features import FeatureFlag, bcond_name, resolve_feature_flags
from variantmeta.variant import VariantIdentity


def _validate_features(instance: BuildOptions, attribute: Any, value: tuple[FeatureFlag, ...]) -> None:
    names = tuple(flag.name for flag in value)
    if names != IMAGE_FEATURES:
        raise ConfigurationError(
            f"Build options must declare every image feature in order {list(IMAGE_FEATURES)}, got {list(names)}"
        )


@define(frozen=True)
class BuildOptions:
    """Variant identity plus all image feature flags, validated."""

    identity: VariantIdentity
    features: tuple[FeatureFlag, ...] = field(converter=tuple, validator=_validate_features)

    def feature(self, name: str) -> FeatureFlag:
        for flag in self.features:
            if flag.name == name:
                return flag
        raise KeyError(name)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> BuildOptions:
        """Build options from a parsed ``[variant]`` / ``[image-features]`` document."""
        variant_table = _require_table(data, OPTIONS_VARIANT_TABLE)
        features_table = _require_table(data, OPTIONS_FEATURES_TABLE)

        identity_values: dict[str, Any] = {}
        for attr in VariantIdentity.field_names():
            key = OPTIONS_VARIANT_NAME_KEY if attr == "variant" else attr
            if key not in variant_table:
                raise ConfigurationError(f"Missing build option '{OPTIONS_VARIANT_TABLE}.{key}'")
            identity_values[attr] = variant_table[key]

        return cls(
            identity=VariantIdentity(**identity_values),
            features=resolve_feature_flags(features_table),
        )

    @classmethod
    def from_file(cls, path: Path) -> BuildOptions:
        """Load build options from a ``.toml`` or ``.json`` file."""
        logger.debug("Loading build options", path=str(path))
        if not path.is_file():
            raise ManifestError(f"Build options file not found: {path}")

        if path.suffix == ".json":
            data = _read_json_options(path)
        else:
            data = _read_toml_options(path)

        if not isinstance(data, Mapping):
            raise ManifestError(f"Build options file {path} must contain a table at the top level")
        return cls.from_mapping(data)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> BuildOptions:
        """Load build options from ``BUILDSYS_VARIANT*`` environment variables."""
        env = os.environ if environ is None else environ

        identity_values = {attr: _require_env(env, var) for attr, var in VARIANT_ENV_VARS.items()}
        feature_values = {
            name: parse_bool(_require_env(env, feature_env_var(name)), feature_env_var(name))
            for name in IMAGE_FEATURES
        }
        logger.debug("Loaded build options from environment", variant=identity_values["variant"])
        return cls(
            identity=VariantIdentity(**identity_values),
            features=resolve_feature_flags(feature_values),
        )


def feature_env_var(name: str) -> str:
    """Environment variable carrying the state of an image feature."""
    return f"{ENV_IMAGE_FEATURE_PREFIX}{bcond_name(name).upper()}"


def parse_bool(value: str, source: str) -> bool:
    """Parse a boolean build option; unrecognized text is an error."""
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean value {value!r} for {source}")


def _require_env(env: Mapping[str, str], var: str) -> str:
    value = env.get(var)
    if value is None or value == "":
        raise ConfigurationError(f"Missing environment variable '{var}'")
    return value


def _require_table(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    table = data.get(key)
    if table is None:
        raise ConfigurationError(f"Missing build options table '[{key}]'")
    if not isinstance(table, Mapping):
        raise ConfigurationError(f"Build options '{key}' must be a table")
    return table


def _read_toml_options(path: Path) -> Any:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(f"{path} is not valid TOML: {e}") from e
    except OSError as e:
        raise ManifestError(f"Failed to read {path}: {e}") from e


def _read_json_options(path: Path) -> Any:
    try:
        return read_json(path)
    except (ValueError, FoundationError) as e:
        raise ManifestError(f"{path} is not valid JSON: {e}") from e
    except OSError as e:
        raise ManifestError(f"Failed to read {path}: {e}") from e


# 🌶️📦🔚
