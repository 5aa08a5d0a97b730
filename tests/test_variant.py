#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for variant identity capabilities."""

from __future__ import annotations

import pytest

from variantmeta.exceptions import ConfigurationError
from variantmeta.variant import VariantIdentity


def test_provides_in_fixed_order(identity: VariantIdentity) -> None:
    assert identity.provides() == [
        "variant(aws-k8s-1.31)",
        "variant-platform(aws)",
        "variant-runtime(k8s)",
        "variant-family(aws-k8s)",
        "variant-flavor(nvidia)",
    ]


def test_values_are_copied_verbatim() -> None:
    """No trimming or case changes are applied to supplied values."""
    identity = VariantIdentity(
        variant="Metal-Dev ",
        platform=" metal",
        runtime="K8S",
        family="metal_dev",
        flavor="fips.1",
    )
    assert identity.provides() == [
        "variant(Metal-Dev )",
        "variant-platform( metal)",
        "variant-runtime(K8S)",
        "variant-family(metal_dev)",
        "variant-flavor(fips.1)",
    ]


def test_prefix_applies_to_every_capability(identity: VariantIdentity) -> None:
    assert all(c.startswith("bottlerocket-variant") for c in identity.provides("bottlerocket-"))


@pytest.mark.parametrize("field_name", ["variant", "platform", "runtime", "family", "flavor"])
def test_empty_value_rejected(identity: VariantIdentity, field_name: str) -> None:
    values = {name: getattr(identity, name) for name in VariantIdentity.field_names()}
    values[field_name] = ""
    with pytest.raises(ConfigurationError, match=f"Variant {field_name}"):
        VariantIdentity(**values)


def test_non_string_value_rejected(identity: VariantIdentity) -> None:
    with pytest.raises(ConfigurationError, match="non-empty string"):
        VariantIdentity("aws-dev", "aws", None, "aws-dev", "default")  # type: ignore[arg-type]


@pytest.mark.parametrize("value", ["aws(dev)", "aws\ndev"])
def test_line_breaking_characters_rejected(value: str) -> None:
    with pytest.raises(ConfigurationError, match="unsupported characters"):
        VariantIdentity(value, "aws", "k8s", "aws-k8s", "default")


def test_field_names() -> None:
    assert VariantIdentity.field_names() == ("variant", "platform", "runtime", "family", "flavor")


# 🌶️📦🔚
