# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Round (iteration count) related configuration.

Environment variables (with prefix PWDIGEST_)
---------------------------------------------
MIN_ROUNDS (int) # default: 5000
MAX_ROUNDS (int) # default: 9000

Command line arguments (no prefix)
----------------------------------
--min-rounds (int)  # default: 5000
--max-rounds (int)  # default: 9000
"""

from ._common import get_value, positive_int

DEFAULT_MIN_ROUNDS = 5000
DEFAULT_MAX_ROUNDS = 9000


def get_min_rounds() -> int:
    """Get the minimum number of rounds for new hashes.

    Returns
    -------
    int
        The minimum number of rounds.
    """
    return get_value(
        "--min-rounds", "MIN_ROUNDS", positive_int, DEFAULT_MIN_ROUNDS
    )


def get_max_rounds() -> int:
    """Get the maximum number of rounds for new hashes.

    Returns
    -------
    int
        The maximum number of rounds.
    """
    return get_value(
        "--max-rounds", "MAX_ROUNDS", positive_int, DEFAULT_MAX_ROUNDS
    )
