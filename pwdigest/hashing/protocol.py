# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=unnecessary-ellipsis

"""Password hashing protocols."""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class Digest(Protocol):  # pragma: no cover
    """A primitive digest context (as returned by ``hashlib.new``)."""

    def update(self, data: bytes, /) -> None:
        """Feed bytes into the digest."""
        ...

    def digest(self) -> bytes:
        """Return the digest of the data fed so far."""
        ...


@runtime_checkable
class CryptEngine(Protocol):  # pragma: no cover
    """Protocol for a single hashing algorithm."""

    @property
    def identifier(self) -> str:
        """The identifier of the algorithm (``6`` for ``$6$...``)."""
        ...

    @property
    def default_rounds(self) -> int:
        """The round count that is omitted from the encoded hash."""
        ...

    def hash(
        self,
        plain: Optional[str],
        salt: Optional[str] = None,
        rounds: Optional[int] = None,
    ) -> Optional[str]:
        """Hash a plain text password.

        Parameters
        ----------
        plain : Optional[str]
            The plain text password
        salt : Optional[str]
            The salt to use, a random one if None
        rounds : Optional[int]
            The requested rounds, random within the policy if None
        """
        ...

    def verify(self, plain: Optional[str], stored: str) -> bool:
        """Verify a plain text password against a stored hash.

        Parameters
        ----------
        plain : Optional[str]
            The plain text password
        stored : str
            The stored hash
        """
        ...


@runtime_checkable
class Hasher(Protocol):  # pragma: no cover
    """Protocol for password hashing implementations."""

    def hash(self, plain: str) -> Optional[str]:
        """Hash a plain text password.

        Parameters
        ----------
        plain : str
            The plain text password
        """
        ...

    def verify(self, plain: str, stored: str) -> bool:
        """Verify a plain text password against a stored hash.

        Parameters
        ----------
        plain : str
            The plain text password
        stored : str
            The stored hash
        """
        ...

    def needs_rehash(self, stored: str) -> bool:
        """Check if the stored hashed secret needs rehash.

        Parameters
        ----------
        stored : str
            The stored hash
        """
        ...


__all__ = ["CryptEngine", "Digest", "Hasher"]
