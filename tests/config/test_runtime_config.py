#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for the runtime configuration."""

from __future__ import annotations

import os
from unittest.mock import patch

import attrs
import pytest

from variantmeta.config import VariantMetaRuntimeConfig, parse_log_level
from variantmeta.config.defaults import DEFAULT_LOG_LEVEL


class TestVariantMetaRuntimeConfig:
    """Test runtime configuration loading."""

    def test_defaults(self) -> None:
        config = VariantMetaRuntimeConfig()
        assert config.log_level == DEFAULT_LOG_LEVEL

    @patch.dict(os.environ, {"VARIANTMETA_LOG_LEVEL": "debug"})
    def test_log_level_from_env(self) -> None:
        config = VariantMetaRuntimeConfig.from_env()
        assert config.log_level == "DEBUG"

    def test_no_unused_setup_log_level(self) -> None:
        """Only levels the CLI applies are configurable."""
        field_names = attrs.fields_dict(VariantMetaRuntimeConfig)
        assert "log_level" in field_names
        assert "setup_log_level" not in field_names

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValueError, match="Invalid log level"):
            VariantMetaRuntimeConfig(log_level="chatty")


@pytest.mark.parametrize(("value", "expected"), [("info", "INFO"), (" Warning ", "WARNING"), ("TRACE", "TRACE")])
def test_parse_log_level(value: str, expected: str) -> None:
    assert parse_log_level(value) == expected


# 🌶️📦🔚
