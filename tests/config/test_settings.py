# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=missing-return-doc,missing-param-doc,missing-yield-doc
"""Test pwdigest.config.settings.*."""

import pytest
from pydantic import ValidationError

from pwdigest.config import (
    DEFAULT_MAX_ROUNDS,
    DEFAULT_MIN_ROUNDS,
    DEFAULT_MIN_SALT_LENGTH,
    DEFAULT_SALT_LENGTH,
    Settings,
)


def test_default_settings_load() -> None:
    """Ensure default settings are loaded properly."""
    settings = Settings.load()
    assert settings.min_rounds == DEFAULT_MIN_ROUNDS == 5000
    assert settings.max_rounds == DEFAULT_MAX_ROUNDS == 9000
    assert settings.salt_length == DEFAULT_SALT_LENGTH == 16
    assert settings.min_salt_length == DEFAULT_MIN_SALT_LENGTH == 8


def test_init_by_name() -> None:
    """Ensure the settings can be created by field name."""
    settings = Settings(min_rounds=1000, max_rounds=2000, salt_length=10)
    assert settings.min_rounds == 1000
    assert settings.max_rounds == 2000
    assert settings.salt_length == 10


def test_log_level_validator() -> None:
    """Test log level is converted to uppercase if provided as a string."""
    settings = Settings(log_level="debug")
    assert settings.log_level == "DEBUG"


def test_inverted_rounds() -> None:
    """Test that min_rounds > max_rounds is rejected."""
    with pytest.raises(ValidationError):
        Settings(min_rounds=9001, max_rounds=9000)


def test_inverted_salt_lengths() -> None:
    """Test that min_salt_length > salt_length is rejected."""
    with pytest.raises(ValidationError):
        Settings(salt_length=4, min_salt_length=8)


@pytest.mark.parametrize(
    "field", ["min_rounds", "max_rounds", "salt_length", "min_salt_length"]
)
def test_non_positive_values(field: str) -> None:
    """Test that counts must be positive."""
    with pytest.raises(ValidationError):
        Settings(**{field: 0})
