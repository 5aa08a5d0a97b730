#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""variantmeta core package exports."""

from __future__ import annotations

from provide.foundation.utils import get_version

from variantmeta.descriptor import MetadataDescriptor, render_descriptor
from variantmeta.exceptions import ConfigurationError, ManifestError, VariantMetaError
from variantmeta.features import FeatureFlag, bcond_arguments, render_capabilities
from variantmeta.options import BuildOptions
from variantmeta.variant import VariantIdentity

__version__ = get_version("variantmeta", caller_file=__file__)

__all__ = [
    "BuildOptions",
    "ConfigurationError",
    "FeatureFlag",
    "ManifestError",
    "MetadataDescriptor",
    "VariantIdentity",
    "VariantMetaError",
    "__version__",
    "bcond_arguments",
    "render_capabilities",
    "render_descriptor",
]

# 🌶️📦🔚
