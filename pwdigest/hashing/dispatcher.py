# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Password digester dispatching to the registered algorithms."""

import logging
from dataclasses import dataclass
from typing import Optional

from ._codec import EncodedHash
from .protocol import Hasher
from .registry import AlgorithmRegistry, build_registry

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchResult:
    """The outcome of a password verification."""

    matches: bool
    upgraded_hash: Optional[str] = None

    def __bool__(self) -> bool:
        return self.matches


NO_MATCH = MatchResult(matches=False)


class PasswordDigester(Hasher):
    """Hashes with the best algorithm but verifies all registered ones."""

    def __init__(self, registry: Optional[AlgorithmRegistry] = None) -> None:
        """Initialize the digester.

        Parameters
        ----------
        registry : Optional[AlgorithmRegistry]
            The algorithms to use, the default registry if None.
        """
        self._registry = registry if registry is not None else build_registry()

    @property
    def registry(self) -> AlgorithmRegistry:
        """The algorithm registry."""
        return self._registry

    def hash_password(
        self, plain: Optional[str], algorithm: Optional[str] = None
    ) -> Optional[str]:
        """Hash a password with a fresh salt and random rounds.

        Parameters
        ----------
        plain : Optional[str]
            The plain secret to hash.
        algorithm : Optional[str]
            The identifier of the algorithm to use, the best if None.

        Returns
        -------
        Optional[str]
            The encoded hash, None if the plain secret is None, the
            algorithm is unknown or its primitive is unavailable.
        """
        if algorithm is None:
            descriptor = self._registry.best()
        else:
            found = self._registry.get(algorithm)
            if found is None:
                LOG.warning("Unknown algorithm identifier: %s", algorithm)
                return None
            descriptor = found
        return descriptor.engine.hash(plain)

    def matches_password(
        self, plain: Optional[str], stored: Optional[str]
    ) -> MatchResult:
        """Verify a password, upgrading hashes of outdated algorithms.

        Parameters
        ----------
        plain : Optional[str]
            The plain secret to check.
        stored : Optional[str]
            The stored hashed secret.

        Returns
        -------
        MatchResult
            Whether the password matches and, if the stored hash was not
            produced by the best algorithm, a new hash to store instead.
        """
        parsed = EncodedHash.parse(stored)
        if parsed is None:
            LOG.warning(
                "The provided hash (%s) does not match the expected format!",
                stored,
            )
            return NO_MATCH
        descriptor = self._registry.get(parsed.identifier)
        if descriptor is None:
            LOG.warning("Unknown algorithm identifier: %s", parsed.identifier)
            return NO_MATCH
        if not descriptor.engine.verify(plain, stored):
            return NO_MATCH
        best = self._registry.best()
        if descriptor.identifier == best.identifier:
            return MatchResult(matches=True)
        LOG.info(
            "Hash uses outdated algorithm %s, creating a %s hash",
            descriptor.name,
            best.name,
        )
        return MatchResult(matches=True, upgraded_hash=self.hash_password(plain))

    def hash(self, plain: str) -> Optional[str]:
        """Hash with the best algorithm.

        Parameters
        ----------
        plain : str
            The plain secret to hash.

        Returns
        -------
        Optional[str]
            The hashed secret.
        """
        return self.hash_password(plain)

    def verify(self, plain: str, stored: str) -> bool:
        """Verify against any registered algorithm.

        Parameters
        ----------
        plain : str
            The plain secret to check.
        stored : str
            The stored hashed secret.

        Returns
        -------
        bool
            True if the verification succeeds, false otherwise.
        """
        return self.matches_password(plain, stored).matches

    def needs_rehash(self, stored: str) -> bool:
        """Check if the hash was not produced by the best algorithm.

        Parameters
        ----------
        stored : str
            The stored hash

        Returns
        -------
        bool
            True if secret needs rehash, False otherwise
        """
        parsed = EncodedHash.parse(stored)
        if parsed is None or parsed.identifier not in self._registry:
            return True
        return parsed.identifier != self._registry.best().identifier


__all__ = ["MatchResult", "PasswordDigester"]
