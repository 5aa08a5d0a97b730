#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for variantmeta."""

from __future__ import annotations

from provide.foundation.errors import FoundationError


class VariantMetaError(FoundationError):
    """Base exception for all variantmeta errors."""

    pass


class ConfigurationError(VariantMetaError):
    """Raised when a build option is missing or invalid."""

    pass


class ManifestError(ConfigurationError):
    """Raised when a build options file cannot be read or parsed."""

    pass


# 🌶️📦🔚
