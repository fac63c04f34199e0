# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Salt policy."""

import secrets
import string
from dataclasses import dataclass
from typing import Optional

from ..config import DEFAULT_MIN_SALT_LENGTH, DEFAULT_SALT_LENGTH

SALT_ALPHABET = string.ascii_letters + string.digits


@dataclass(frozen=True)
class SaltPolicy:
    """Validates supplied salts and generates random ones."""

    salt_length: int = DEFAULT_SALT_LENGTH
    minimum_salt_length: int = DEFAULT_MIN_SALT_LENGTH
    alphabet: str = SALT_ALPHABET

    def __post_init__(self) -> None:
        if self.minimum_salt_length < 1:
            raise ValueError(
                f"Invalid minimum salt length: {self.minimum_salt_length}"
            )
        if self.minimum_salt_length > self.salt_length:
            raise ValueError(
                f"Minimum salt length ({self.minimum_salt_length}) exceeds "
                f"salt length ({self.salt_length})"
            )
        if not self.alphabet or "$" in self.alphabet:
            raise ValueError("The salt alphabet must be non empty without '$'")

    def random_salt(self) -> str:
        """Generate a random salt of ``salt_length`` characters.

        Returns
        -------
        str
            The generated salt.
        """
        return "".join(
            secrets.choice(self.alphabet) for _ in range(self.salt_length)
        )

    def effective_salt(self, candidate: Optional[str]) -> str:
        """Get the salt to use for a candidate.

        Supplied salts are only truncated, never padded or rejected
        when shorter than ``minimum_salt_length``.

        Parameters
        ----------
        candidate : Optional[str]
            The supplied salt, None to generate one.

        Returns
        -------
        str
            The salt to use.
        """
        if candidate is None:
            return self.random_salt()
        return candidate[: self.salt_length]


__all__ = ["SALT_ALPHABET", "SaltPolicy"]
