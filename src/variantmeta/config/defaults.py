#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for variantmeta."""

from __future__ import annotations

# =================================
# Image features
# =================================
# Declaration order is significant: descriptors list features in this order.
FEATURE_GRUB_SET_PRIVATE_VAR = "grub-set-private-var"
FEATURE_UEFI_SECURE_BOOT = "uefi-secure-boot"
FEATURE_SYSTEMD_NETWORKD = "systemd-networkd"
FEATURE_UNIFIED_CGROUP_HIERARCHY = "unified-cgroup-hierarchy"
FEATURE_XFS_DATA_PARTITION = "xfs-data-partition"
FEATURE_FIPS = "fips"

IMAGE_FEATURES = (
    FEATURE_GRUB_SET_PRIVATE_VAR,
    FEATURE_UEFI_SECURE_BOOT,
    FEATURE_SYSTEMD_NETWORKD,
    FEATURE_UNIFIED_CGROUP_HIERARCHY,
    FEATURE_XFS_DATA_PARTITION,
    FEATURE_FIPS,
)

IMAGE_FEATURE_CAPABILITY = "image-feature"
DISABLED_FEATURE_PREFIX = "no-"

# =================================
# Variant identity
# =================================
# (field, capability) pairs in declaration order
VARIANT_CAPABILITIES = (
    ("variant", "variant"),
    ("platform", "variant-platform"),
    ("runtime", "variant-runtime"),
    ("family", "variant-family"),
    ("flavor", "variant-flavor"),
)

# Characters that would break a single "Provides: name(value)" line
CAPABILITY_FORBIDDEN_CHARS = frozenset("()\r\n")

# =================================
# Environment variables
# =================================
ENV_VARIANT = "BUILDSYS_VARIANT"
ENV_VARIANT_PLATFORM = "BUILDSYS_VARIANT_PLATFORM"
ENV_VARIANT_RUNTIME = "BUILDSYS_VARIANT_RUNTIME"
ENV_VARIANT_FAMILY = "BUILDSYS_VARIANT_FAMILY"
ENV_VARIANT_FLAVOR = "BUILDSYS_VARIANT_FLAVOR"
ENV_IMAGE_FEATURE_PREFIX = "BUILDSYS_VARIANT_IMAGE_FEATURE_"

VARIANT_ENV_VARS = {
    "variant": ENV_VARIANT,
    "platform": ENV_VARIANT_PLATFORM,
    "runtime": ENV_VARIANT_RUNTIME,
    "family": ENV_VARIANT_FAMILY,
    "flavor": ENV_VARIANT_FLAVOR,
}

TRUE_VALUES = frozenset({"true", "1", "yes", "on"})
FALSE_VALUES = frozenset({"false", "0", "no", "off"})

# =================================
# Build options file layout
# =================================
OPTIONS_VARIANT_TABLE = "variant"
OPTIONS_FEATURES_TABLE = "image-features"
# The variant name is stored under "name" in the file
OPTIONS_VARIANT_NAME_KEY = "name"

# =================================
# Descriptor defaults
# =================================
DEFAULT_DESCRIPTOR_NAME = "metadata"
DEFAULT_DESCRIPTOR_VERSION = "1.0"
DEFAULT_DESCRIPTOR_RELEASE = "1%{?dist}"
DEFAULT_DESCRIPTOR_SUMMARY = "Bottlerocket metadata"
DEFAULT_DESCRIPTOR_LICENSE = "Apache-2.0 OR MIT"
DEFAULT_DESCRIPTOR_URL = "https://github.com/bottlerocket-os/twoliter"
DEFAULT_OS_PREFIX = ""

DESCRIPTOR_PREAMBLE = "%global cross_generate_attribution %{nil}"
DESCRIPTOR_EMPTY_SECTIONS = ("%prep", "%build", "%install", "%files", "%changelog")

# =================================
# Logging defaults
# =================================
DEFAULT_LOG_LEVEL = "WARNING"

# 🌶️📦🔚
