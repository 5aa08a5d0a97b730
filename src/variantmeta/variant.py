#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Variant identity capabilities."""

from __future__ import annotations

from typing import Any

from attrs import define, field, fields

from variantmeta.config.defaults import CAPABILITY_FORBIDDEN_CHARS, VARIANT_CAPABILITIES
from variantmeta.exceptions import ConfigurationError


def _validate_identity_value(instance: Any, attribute: Any, value: Any) -> None:
    if not isinstance(value, str) or not value:
        raise ConfigurationError(f"Variant {attribute.name} must be a non-empty string, got {value!r}")
    bad = sorted(CAPABILITY_FORBIDDEN_CHARS.intersection(value))
    if bad:
        raise ConfigurationError(
            f"Variant {attribute.name} {value!r} contains unsupported characters: {bad!r}"
        )


@define(frozen=True)
class VariantIdentity:
    """Build-specific parameters identifying the target OS image."""

    variant: str = field(validator=_validate_identity_value)
    platform: str = field(validator=_validate_identity_value)
    runtime: str = field(validator=_validate_identity_value)
    family: str = field(validator=_validate_identity_value)
    flavor: str = field(validator=_validate_identity_value)

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(a.name for a in fields(cls))

    def provides(self, prefix: str = "") -> list[str]:
        """Identity capability strings, values copied verbatim."""
        return [f"{prefix}{capability}({getattr(self, attr)})" for attr, capability in VARIANT_CAPABILITIES]


# 🌶️📦🔚
