#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""variantmeta configuration: runtime settings and build-time defaults."""

from __future__ import annotations

from variantmeta.config.defaults import IMAGE_FEATURES, VARIANT_CAPABILITIES
from variantmeta.config.runtime import VariantMetaRuntimeConfig, parse_log_level

__all__ = [
    "IMAGE_FEATURES",
    "VARIANT_CAPABILITIES",
    "VariantMetaRuntimeConfig",
    "parse_log_level",
]

# 🌶️📦🔚
