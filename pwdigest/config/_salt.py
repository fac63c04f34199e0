# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Salt related configuration.

Environment variables (with prefix PWDIGEST_)
---------------------------------------------
SALT_LENGTH (int) # default: 16
MIN_SALT_LENGTH (int) # default: 8

Command line arguments (no prefix)
----------------------------------
--salt-length (int)  # default: 16
--min-salt-length (int)  # default: 8
"""

from ._common import get_value, positive_int

DEFAULT_SALT_LENGTH = 16
DEFAULT_MIN_SALT_LENGTH = 8


def get_salt_length() -> int:
    """Get the (maximum) salt length.

    Returns
    -------
    int
        The salt length.
    """
    return get_value(
        "--salt-length", "SALT_LENGTH", positive_int, DEFAULT_SALT_LENGTH
    )


def get_min_salt_length() -> int:
    """Get the minimum salt length.

    Returns
    -------
    int
        The minimum salt length.
    """
    return get_value(
        "--min-salt-length",
        "MIN_SALT_LENGTH",
        positive_int,
        DEFAULT_MIN_SALT_LENGTH,
    )
