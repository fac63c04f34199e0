# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Configuration module for pwdigest."""

from ._common import ENV_PREFIX, FALSY, ROOT_DIR
from ._rounds import DEFAULT_MAX_ROUNDS, DEFAULT_MIN_ROUNDS
from ._salt import DEFAULT_MIN_SALT_LENGTH, DEFAULT_SALT_LENGTH
from .settings import Settings

__all__ = [
    "Settings",
    "ENV_PREFIX",
    "ROOT_DIR",
    "FALSY",
    "DEFAULT_MIN_ROUNDS",
    "DEFAULT_MAX_ROUNDS",
    "DEFAULT_SALT_LENGTH",
    "DEFAULT_MIN_SALT_LENGTH",
]
