#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Variant metadata descriptor rendering.

The descriptor is an RPM spec file with no payload: it exists only to carry
``Provides:`` lines for the variant identity and the image features, which
other packages can then ``Requires:``.
"""

from __future__ import annotations

from typing import Any

from attrs import define, field
from provide.foundation import logger

from variantmeta.config.defaults import (
    CAPABILITY_FORBIDDEN_CHARS,
    DEFAULT_DESCRIPTOR_LICENSE,
    DEFAULT_DESCRIPTOR_NAME,
    DEFAULT_DESCRIPTOR_RELEASE,
    DEFAULT_DESCRIPTOR_SUMMARY,
    DEFAULT_DESCRIPTOR_URL,
    DEFAULT_DESCRIPTOR_VERSION,
    DEFAULT_OS_PREFIX,
    DESCRIPTOR_EMPTY_SECTIONS,
    DESCRIPTOR_PREAMBLE,
)
from variantmeta.exceptions import ConfigurationError
from variantmeta.features import FeatureFlag, bcond_arguments, render_capabilities
from variantmeta.options import BuildOptions


def _validate_os_prefix(instance: Any, attribute: Any, value: Any) -> None:
    if not isinstance(value, str):
        raise ConfigurationError(f"OS prefix must be a string, got {value!r}")
    # The prefix is pasted into Name: and every Provides: line
    if CAPABILITY_FORBIDDEN_CHARS.intersection(value) or any(ch.isspace() for ch in value):
        raise ConfigurationError(
            f"OS prefix {value!r} must not contain whitespace or any of {sorted(CAPABILITY_FORBIDDEN_CHARS)!r}"
        )


@define(frozen=True)
class MetadataDescriptor:
    """An immutable variant metadata descriptor."""

    options: BuildOptions
    os_prefix: str = field(default=DEFAULT_OS_PREFIX, validator=_validate_os_prefix)
    name: str = DEFAULT_DESCRIPTOR_NAME
    version: str = DEFAULT_DESCRIPTOR_VERSION
    release: str = DEFAULT_DESCRIPTOR_RELEASE
    summary: str = DEFAULT_DESCRIPTOR_SUMMARY
    license: str = DEFAULT_DESCRIPTOR_LICENSE
    url: str = DEFAULT_DESCRIPTOR_URL

    @property
    def package_name(self) -> str:
        return f"{self.os_prefix}{self.name}"

    def identity_provides(self) -> list[str]:
        return self.options.identity.provides(self.os_prefix)

    def feature_provides(self) -> list[str]:
        return render_capabilities(self.options.features, self.os_prefix)

    def provides(self) -> list[str]:
        """All capabilities in descriptor order: identity, then features."""
        return [*self.identity_provides(), *self.feature_provides()]

    def bcond_arguments(self) -> list[str]:
        return bcond_arguments(self.options.features)

    def render(self, conditional: bool = False) -> str:
        """Render the descriptor as RPM spec text.

        Args:
            conditional: Emit ``%if %{with ...}`` template blocks for the
                features instead of the lines already evaluated against the
                build options.

        Returns:
            The spec file contents, newline terminated
        """
        logger.debug(
            "Rendering metadata descriptor",
            package=self.package_name,
            variant=self.options.identity.variant,
            conditional=conditional,
        )

        lines = [DESCRIPTOR_PREAMBLE, ""]
        lines.extend(self._header())
        lines.append("")
        lines.extend(f"Provides: {capability}" for capability in self.identity_provides())
        lines.append("")

        if conditional:
            for flag in self.options.features:
                lines.extend(self._conditional_block(flag))
                lines.append("")
        else:
            lines.extend(f"Provides: {capability}" for capability in self.feature_provides())
            lines.append("")

        lines.extend(["%description", "%{summary}."])
        for section in DESCRIPTOR_EMPTY_SECTIONS:
            lines.extend(["", section])

        return "\n".join(lines) + "\n"

    def _header(self) -> list[str]:
        return [
            f"Name: {self.package_name}",
            f"Version: {self.version}",
            f"Release: {self.release}",
            f"Summary: {self.summary}",
            "",
            f"License: {self.license}",
            f"URL: {self.url}",
        ]

    def _conditional_block(self, flag: FeatureFlag) -> list[str]:
        enabled = FeatureFlag(flag.name, True)
        return [
            f"%if %{{with {flag.bcond}}}",
            f"Provides: {enabled.capability(self.os_prefix)}",
            "%else",
            f"Provides: {enabled.disabled_capability(self.os_prefix)}",
            "%endif",
        ]


def render_descriptor(options: BuildOptions, os_prefix: str = DEFAULT_OS_PREFIX, conditional: bool = False) -> str:
    """Render the metadata descriptor for a set of build options."""
    return MetadataDescriptor(options, os_prefix=os_prefix).render(conditional=conditional)


# 🌶️📦🔚
