# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Self describing password hashes with transparent upgrades."""

from ._version import __version__
from .hashing import MatchResult, PasswordDigester, password_digester

__all__ = [
    "MatchResult",
    "PasswordDigester",
    "password_digester",
    "__version__",
]
