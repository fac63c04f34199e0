# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
# pylint: disable=missing-return-doc,missing-yield-doc,missing-param-doc
"""Shared fixtures for tests."""

import logging
import os
from collections.abc import Generator

import pytest

from pwdigest.config import Settings
from pwdigest.hashing import AlgorithmRegistry, PasswordDigester, build_registry

ENV_KEY_PREFIX = "PWDIGEST_"


@pytest.fixture(scope="function", autouse=True)
def reset_env() -> Generator[None, None, None]:
    """Remove any PWDIGEST_ variables before each test."""
    for key in list(os.environ):
        if key.startswith(ENV_KEY_PREFIX):
            os.environ.pop(key, None)
    logging.getLogger("pwdigest").setLevel(logging.NOTSET)
    yield
    for key in list(os.environ):
        if key.startswith(ENV_KEY_PREFIX):
            os.environ.pop(key, None)


@pytest.fixture(name="fast_settings")
def fast_settings_fixture() -> Settings:
    """Settings with few rounds to keep the tests fast."""
    return Settings(
        min_rounds=10,
        max_rounds=20,
        salt_length=16,
        min_salt_length=8,
    )


@pytest.fixture(name="registry")
def registry_fixture(fast_settings: Settings) -> AlgorithmRegistry:
    """The default registry built with fast settings."""
    return build_registry(fast_settings)


@pytest.fixture(name="digester")
def digester_fixture(registry: AlgorithmRegistry) -> PasswordDigester:
    """A digester using the fast registry."""
    return PasswordDigester(registry)
