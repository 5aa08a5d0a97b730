#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Image feature flags and the capability renderer.

Each image feature is declared in exactly one of two mutually exclusive forms,
``image-feature(<name>)`` when enabled and ``image-feature(no-<name>)`` when
disabled. The same flags drive the ``%if %{with <bcond>}`` blocks of the
descriptor template, so they can also be rendered as rpmbuild arguments.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from attrs import define, field

from variantmeta.config.defaults import (
    DISABLED_FEATURE_PREFIX,
    IMAGE_FEATURE_CAPABILITY,
    IMAGE_FEATURES,
)
from variantmeta.exceptions import ConfigurationError


def normalize_feature_name(name: str) -> str:
    """Accept both ``uefi-secure-boot`` and ``uefi_secure_boot`` spellings."""
    if not isinstance(name, str):
        return name
    return name.strip().lower().replace("_", "-")


def bcond_name(name: str) -> str:
    """RPM build-conditional name for a feature (``-`` becomes ``_``)."""
    return name.replace("-", "_")


def _validate_name(instance: FeatureFlag, attribute: Any, value: Any) -> None:
    if not isinstance(value, str) or value not in IMAGE_FEATURES:
        raise ConfigurationError(
            f"Unknown image feature {value!r}; expected one of: {', '.join(IMAGE_FEATURES)}"
        )


def _validate_enabled(instance: FeatureFlag, attribute: Any, value: Any) -> None:
    # bool is checked strictly: 0/1 or None would silently pick a branch
    if not isinstance(value, bool):
        raise ConfigurationError(
            f"Image feature '{instance.name}' must be true or false, got {value!r}"
        )


@define(frozen=True)
class FeatureFlag:
    """A named boolean build option controlling one image capability."""

    name: str = field(converter=normalize_feature_name, validator=_validate_name)
    enabled: bool = field(validator=_validate_enabled)

    @property
    def bcond(self) -> str:
        return bcond_name(self.name)

    def capability(self, prefix: str = "") -> str:
        """Capability string for the current state of the flag."""
        feature = self.name if self.enabled else f"{DISABLED_FEATURE_PREFIX}{self.name}"
        return f"{prefix}{IMAGE_FEATURE_CAPABILITY}({feature})"

    def disabled_capability(self, prefix: str = "") -> str:
        """Capability string for the opposite state, used by template blocks."""
        return FeatureFlag(self.name, not self.enabled).capability(prefix)


def _coerce_flag(item: FeatureFlag | tuple[str, Any]) -> FeatureFlag:
    if isinstance(item, FeatureFlag):
        return item
    try:
        name, enabled = item
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Expected a (name, enabled) pair, got {item!r}") from e
    if not isinstance(name, str):
        raise ConfigurationError(f"Image feature name must be a string, got {name!r}")
    return FeatureFlag(name, enabled)


def coerce_flags(
    flags: Iterable[FeatureFlag | tuple[str, Any]] | Mapping[str, Any],
) -> list[FeatureFlag]:
    """Turn pairs, a mapping, or FeatureFlags into a validated list.

    Input order is preserved. Duplicate names raise ConfigurationError.
    """
    items: Iterable[Any] = flags.items() if isinstance(flags, Mapping) else flags
    result: list[FeatureFlag] = []
    seen: set[str] = set()
    for item in items:
        flag = _coerce_flag(item)
        if flag.name in seen:
            raise ConfigurationError(f"Image feature '{flag.name}' is declared more than once")
        seen.add(flag.name)
        result.append(flag)
    return result


def resolve_feature_flags(values: Mapping[str, Any]) -> tuple[FeatureFlag, ...]:
    """Build the complete set of feature flags in declaration order.

    Every known feature must be present in ``values``; there are no defaults.

    Raises:
        ConfigurationError: If a feature is missing, unknown, repeated, or not a boolean.
    """
    by_name = {flag.name: flag for flag in coerce_flags(values)}
    missing = [name for name in IMAGE_FEATURES if name not in by_name]
    if missing:
        raise ConfigurationError(f"Missing value for image feature(s): {', '.join(missing)}")
    return tuple(by_name[name] for name in IMAGE_FEATURES)


def render_capabilities(
    flags: Iterable[FeatureFlag | tuple[str, Any]] | Mapping[str, Any],
    prefix: str = "",
) -> list[str]:
    """Render one capability string per flag, preserving input order.

    Args:
        flags: (name, enabled) pairs, a name-to-bool mapping, or FeatureFlags
        prefix: OS prefix prepended to the capability name

    Returns:
        List of ``image-feature(...)`` capability strings

    Raises:
        ConfigurationError: If any flag is invalid or repeated
    """
    return [flag.capability(prefix) for flag in coerce_flags(flags)]


def bcond_arguments(
    flags: Iterable[FeatureFlag | tuple[str, Any]] | Mapping[str, Any],
) -> list[str]:
    """rpmbuild arguments selecting the matching ``%if %{with ...}`` branches."""
    args: list[str] = []
    for flag in coerce_flags(flags):
        args.extend(["--with" if flag.enabled else "--without", flag.bcond])
    return args


# 🌶️📦🔚
