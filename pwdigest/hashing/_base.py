# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=too-many-try-statements

"""Common parts of the salted, round based hashing engines."""

import functools
import hashlib
import hmac
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, ClassVar, Optional

from ._codec import EncodedHash
from ._rounds import RoundPolicy, RoundRange
from ._salt import SaltPolicy
from .exceptions import HashEncodingError
from .protocol import Digest

LOG = logging.getLogger(__name__)

DigestFactory = Callable[[], Digest]


def digest_factory(name: str) -> DigestFactory:
    """Get a factory of fresh ``hashlib`` contexts for a primitive.

    Parameters
    ----------
    name : str
        The ``hashlib`` name of the primitive (e.g. ``sha512``).

    Returns
    -------
    DigestFactory
        Callable returning a new digest context on every call.
    """
    return functools.partial(hashlib.new, name)


def digest_of(new_digest: DigestFactory, *parts: bytes) -> bytes:
    """Digest the concatenation of ``parts`` with a fresh context.

    Parameters
    ----------
    new_digest : DigestFactory
        The digest context factory.
    *parts : bytes
        The data to feed, in order.

    Returns
    -------
    bytes
        The raw digest.
    """
    context = new_digest()
    for part in parts:
        context.update(part)
    return context.digest()


@dataclass(frozen=True)
class BaseEngine(ABC):
    """Salted, round based hashing engine.

    Subclasses define the identifier, the primitive and how the raw
    digest text is computed.
    """

    IDENTIFIER: ClassVar[str] = ""
    DIGEST_NAME: ClassVar[str] = ""
    DEFAULT_ROUNDS: ClassVar[int] = 1
    # rounds always written, without the "rounds=" label
    BARE_ROUNDS: ClassVar[bool] = False

    round_range: RoundRange = field(default_factory=RoundRange)
    salt_policy: SaltPolicy = field(default_factory=SaltPolicy)
    new_digest: Optional[DigestFactory] = field(
        default=None, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if not self.IDENTIFIER:
            raise ValueError(
                f"{type(self).__name__} does not define an identifier"
            )

    @property
    def identifier(self) -> str:
        """The identifier of the algorithm."""
        return self.IDENTIFIER

    @property
    def default_rounds(self) -> int:
        """The default rounds of the algorithm."""
        return self.DEFAULT_ROUNDS

    @property
    def round_policy(self) -> RoundPolicy:
        """The round policy of this engine."""
        return RoundPolicy(self.DEFAULT_ROUNDS, self.round_range)

    def random_rounds(self) -> int:
        """Draw random rounds for a new hash.

        Returns
        -------
        int
            The rounds to use.
        """
        return self.round_policy.random_rounds()

    @abstractmethod
    def _compute(
        self,
        new_digest: DigestFactory,
        plain: bytes,
        salt: bytes,
        rounds: int,
    ) -> str:
        """Compute the digest part of the encoded hash."""

    def _plain_bytes(self, plain: str) -> bytes:
        return encode_text(plain, "plain text")

    def _open_primitive(self) -> Optional[DigestFactory]:
        """Get the digest factory, None if the primitive is unavailable."""
        factory = self.new_digest or digest_factory(self.DIGEST_NAME)
        try:
            factory()
        except ValueError as error:
            LOG.error(
                "Digest primitive %s is not available: %s",
                self.DIGEST_NAME,
                error,
            )
            return None
        return factory

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
            The plain secret to hash.
        salt : Optional[str]
            The salt to use, a random one if None. Longer salts are
            truncated to the configured salt length.
        rounds : Optional[int]
            The requested rounds: random within the configured range
            if None, the default rounds if <= 0, clamped otherwise.

        Returns
        -------
        Optional[str]
            The encoded hash, None if there was nothing to hash or the
            digest primitive is unavailable.
        """
        if plain is None:
            LOG.info("No text to hash provided!")
            return None
        new_digest = self._open_primitive()
        if new_digest is None:
            return None
        actual_salt = self.salt_policy.effective_salt(salt)
        policy = self.round_policy
        actual_rounds = (
            policy.random_rounds()
            if rounds is None
            else policy.effective_rounds(rounds)
        )
        digest = self._compute(
            new_digest,
            self._plain_bytes(plain),
            encode_text(actual_salt, "salt"),
            actual_rounds,
        )
        return EncodedHash(
            identifier=self.identifier,
            salt=actual_salt,
            digest=digest,
            rounds=actual_rounds,
            bare_rounds=self.BARE_ROUNDS,
        ).format(self.DEFAULT_ROUNDS)

    def verify(self, plain: Optional[str], stored: Optional[str]) -> bool:
        """Verify a password against a hash of this algorithm.

        Parameters
        ----------
        plain : Optional[str]
            The plain secret to check.
        stored : Optional[str]
            The stored hashed secret.

        Returns
        -------
        bool
            True if the verification succeeds, false otherwise.
        """
        if plain is None or not stored:
            return False
        parsed = EncodedHash.parse(stored)
        if parsed is None or parsed.identifier != self.identifier:
            return False
        candidate = self.hash(
            plain, parsed.salt, parsed.rounds_or(self.DEFAULT_ROUNDS)
        )
        if candidate is None:
            return False
        return hmac.compare_digest(
            candidate.encode("utf-8", "surrogatepass"),
            stored.encode("utf-8", "surrogatepass"),
        )


def encode_text(value: str, what: str) -> bytes:
    """Encode text as UTF-8, raising HashEncodingError on failure."""
    try:
        return value.encode("utf-8")
    except UnicodeEncodeError as error:
        LOG.error("Could not encode the %s: %s", what, error)
        raise HashEncodingError(f"Could not encode the {what}") from error


__all__ = [
    "BaseEngine",
    "DigestFactory",
    "digest_factory",
    "digest_of",
    "encode_text",
]
