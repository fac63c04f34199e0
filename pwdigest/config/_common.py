# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Shared configuration helpers.

Values are looked up on the command line first, then in the
(``PWDIGEST_`` prefixed) environment, then fall back to a default.
"""

import os
import sys
from pathlib import Path
from typing import Callable, Optional, TypeVar

from dotenv import load_dotenv

ENV_PREFIX = "PWDIGEST_"
ROOT_DIR = Path(__file__).parent.parent.parent.resolve()
DOT_ENV_PATH = ROOT_DIR / ".env"
if DOT_ENV_PATH.exists():
    load_dotenv(DOT_ENV_PATH, override=True)


FALSY = ("false", "0", "no", "n", "off")
T = TypeVar("T")


def to_kebab(value: str) -> str:
    """Convert a field name to its command line spelling.

    Parameters
    ----------
    value : str
        The snake case name

    Returns
    -------
    str
        The kebab case name
    """
    return value.replace("_", "-")


def positive_int(value: str) -> int:
    """Parse a strictly positive integer.

    Parameters
    ----------
    value : str
        The text to parse

    Returns
    -------
    int
        The parsed number

    Raises
    ------
    ValueError
        If the text is not a positive integer
    """
    number = int(value)
    if number < 1:
        raise ValueError(f"Expected a positive integer, got {value}")
    return number


def _from_argv(cli_key: str) -> Optional[str]:
    """Get the argument following ``cli_key``, if any."""
    if cli_key not in sys.argv:
        return None
    position = sys.argv.index(cli_key) + 1
    return sys.argv[position] if position < len(sys.argv) else None


def _flag_from_argv(cli_key: str) -> Optional[bool]:
    """Check for ``--key`` or ``--no-key`` on the command line."""
    name = cli_key.lstrip("-")
    if f"--no-{name}" in sys.argv:
        return False
    if f"--{name}" in sys.argv:
        return True
    return None


def get_value(
    cli_key: str,
    env_key: str,
    cast: Callable[[str], T],
    fallback: T,
    skip_prefix: bool = False,
) -> T:
    """Get a value from CLI args, env vars, or fallback, with type casting.

    Parameters
    ----------
    cli_key : str
        The CLI argument key
    env_key : str
        The environment variable key
    cast : Callable[[str], T]
        The casting function
    fallback : T
        The fallback value
    skip_prefix : bool, optional
        Whether to skip the prefix for the env var, by default False

    Returns
    -------
    T
        The value
    """
    env_var = env_key if skip_prefix else f"{ENV_PREFIX}{env_key}"
    if cast is bool:
        flag = _flag_from_argv(cli_key)
        if flag is None:
            flag = os.environ.get(env_var, str(fallback)).lower() not in FALSY
        return flag  # type: ignore[return-value]
    raw = _from_argv(cli_key) or os.environ.get(env_var) or None
    if raw is None:
        return fallback
    try:
        return cast(raw)
    except (TypeError, ValueError):
        return fallback
