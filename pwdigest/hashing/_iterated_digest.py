# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Legacy salted, iterated single digest engines (``$1$``, ``$3$``, ``$4$``).

``digest = H(salt + password)``, re-digested ``rounds - 1`` more times,
stored as standard base64 in the ``$<id>$<rounds>$<salt>$<digest>`` layout.
Kept for verifying (and upgrading) old hashes.
"""

import base64
import unicodedata
from dataclasses import dataclass
from typing import ClassVar

from ._base import BaseEngine, DigestFactory, digest_of, encode_text


@dataclass(frozen=True)
class IteratedDigest(BaseEngine):
    """Base of the iterated digest engines."""

    DEFAULT_ROUNDS: ClassVar[int] = 1
    BARE_ROUNDS: ClassVar[bool] = True

    def _plain_bytes(self, plain: str) -> bytes:
        normalized = unicodedata.normalize("NFC", plain)
        return encode_text(normalized, "plain text")

    def _compute(
        self,
        new_digest: DigestFactory,
        plain: bytes,
        salt: bytes,
        rounds: int,
    ) -> str:
        result = digest_of(new_digest, salt, plain)
        for _ in range(rounds - 1):
            result = digest_of(new_digest, result)
        return base64.b64encode(result).decode("ascii")


@dataclass(frozen=True)
class Md5Digest(IteratedDigest):
    """Iterated MD5."""

    IDENTIFIER: ClassVar[str] = "1"
    DIGEST_NAME: ClassVar[str] = "md5"


@dataclass(frozen=True)
class Sha256Digest(IteratedDigest):
    """Iterated SHA-256."""

    IDENTIFIER: ClassVar[str] = "3"
    DIGEST_NAME: ClassVar[str] = "sha256"


@dataclass(frozen=True)
class Sha512Digest(IteratedDigest):
    """Iterated SHA-512."""

    IDENTIFIER: ClassVar[str] = "4"
    DIGEST_NAME: ClassVar[str] = "sha512"


__all__ = ["IteratedDigest", "Md5Digest", "Sha256Digest", "Sha512Digest"]
