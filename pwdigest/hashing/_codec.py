# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Encoded hash strings.

Two layouts are understood:

- ``$<id>$[rounds=<n>$]<salt>$<digest>``, the crypt layout, where the
  rounds clause is left out for the algorithm's default rounds.
- ``$<id>$<n>$<salt>$<digest>``, the layout of the iterated digests,
  where the (unlabelled) rounds are always present.
"""

import re
from dataclasses import dataclass
from typing import Optional

ROUNDS_PREFIX = "rounds="

_ENCODED_HASH_RE = re.compile(
    r"\$(?P<identifier>[0-9A-Za-z]+)\$"
    r"(?:rounds=(?P<rounds>[0-9]+)\$)?"
    r"(?P<salt>[^$]*)\$"
    r"(?P<digest>[^$\s]+)"
)
_BARE_ROUNDS_RE = re.compile(
    r"\$(?P<identifier>[0-9A-Za-z]+)\$"
    r"(?P<rounds>[0-9]+)\$"
    r"(?P<salt>[^$]*)\$"
    r"(?P<digest>[^$\s]+)"
)


@dataclass(frozen=True)
class EncodedHash:
    """The parts of a self describing hash string."""

    identifier: str
    salt: str
    digest: str
    rounds: Optional[int] = None
    bare_rounds: bool = False

    @property
    def magic_prefix(self) -> str:
        """The ``$<id>$`` prefix of the encoded hash."""
        return f"${self.identifier}$"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["EncodedHash"]:
        """Parse an encoded hash string.

        Parameters
        ----------
        value : Optional[str]
            The encoded hash.

        Returns
        -------
        Optional[EncodedHash]
            The parsed hash, None if the value matches neither layout.
        """
        if not value:
            return None
        bare_rounds = False
        match = _ENCODED_HASH_RE.fullmatch(value)
        if not match:
            match = _BARE_ROUNDS_RE.fullmatch(value)
            bare_rounds = True
        if not match:
            return None
        rounds = match.group("rounds")
        return cls(
            identifier=match.group("identifier"),
            salt=match.group("salt"),
            digest=match.group("digest"),
            rounds=int(rounds) if rounds is not None else None,
            bare_rounds=bare_rounds,
        )

    def rounds_or(self, default_rounds: int) -> int:
        """Get the rounds, falling back to the algorithm's default.

        Parameters
        ----------
        default_rounds : int
            The algorithm's default rounds.

        Returns
        -------
        int
            The rounds used to produce this hash.
        """
        return self.rounds if self.rounds is not None else default_rounds

    def format(self, default_rounds: int) -> str:
        """Serialize the hash.

        Parameters
        ----------
        default_rounds : int
            The algorithm's default rounds, omitted from the crypt layout.

        Returns
        -------
        str
            The encoded hash string.
        """
        if self.bare_rounds:
            return (
                f"{self.magic_prefix}{self.rounds_or(default_rounds)}$"
                f"{self.salt}${self.digest}"
            )
        rounds = ""
        if self.rounds is not None and self.rounds != default_rounds:
            rounds = f"{ROUNDS_PREFIX}{self.rounds}$"
        return f"{self.magic_prefix}{rounds}{self.salt}${self.digest}"


__all__ = ["EncodedHash", "ROUNDS_PREFIX"]
