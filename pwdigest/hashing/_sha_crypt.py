# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=line-too-long
# flake8: noqa: E501
"""SHA-256-crypt and SHA-512-crypt (``$5$`` and ``$6$``) engines.

Byte compatible with the construction published at
https://www.akkadia.org/drepper/SHA-crypt.txt
"""

from dataclasses import dataclass
from typing import ClassVar, Tuple

from ._base import BaseEngine, DigestFactory, digest_of

CRYPT_ALPHABET = "./0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"

Permutation = Tuple[Tuple[int, ...], ...]

# Source byte indices per output group, most significant byte first.
# Short (final) groups are left padded with zero bytes.
SHA256_PERMUTATION: Permutation = (
    (0, 10, 20), (21, 1, 11), (12, 22, 2), (3, 13, 23), (24, 4, 14),
    (15, 25, 5), (6, 16, 26), (27, 7, 17), (18, 28, 8), (9, 19, 29),
    (31, 30),
)

SHA512_PERMUTATION: Permutation = (
    (0, 21, 42), (22, 43, 1), (44, 2, 23), (3, 24, 45), (25, 46, 4),
    (47, 5, 26), (6, 27, 48), (28, 49, 7), (50, 8, 29), (9, 30, 51),
    (31, 52, 10), (53, 11, 32), (12, 33, 54), (34, 55, 13), (56, 14, 35),
    (15, 36, 57), (37, 58, 16), (59, 17, 38), (18, 39, 60), (40, 61, 19),
    (62, 20, 41),
    (63,),
)


def b64_from_24bit(b2: int, b1: int, b0: int, length: int) -> str:
    """Encode up to three bytes, least significant six bits first.

    Parameters
    ----------
    b2 : int
        The most significant byte.
    b1 : int
        The middle byte.
    b0 : int
        The least significant byte.
    length : int
        The number of characters to produce.

    Returns
    -------
    str
        The encoded characters.
    """
    value = (b2 << 16) | (b1 << 8) | b0
    return "".join(
        CRYPT_ALPHABET[(value >> (6 * index)) & 0x3F] for index in range(length)
    )


def crypt_b64_encode(raw: bytes, permutation: Permutation) -> str:
    """Encode a raw digest with the crypt base64 permutation.

    Parameters
    ----------
    raw : bytes
        The final digest.
    permutation : Permutation
        The width specific permutation table.

    Returns
    -------
    str
        The encoded digest.
    """
    chunks = []
    for group in permutation:
        padded = (0,) * (3 - len(group)) + tuple(raw[index] for index in group)
        chunks.append(b64_from_24bit(*padded, len(group) + 1))
    return "".join(chunks)


def _repeat_to_length(source: bytes, length: int) -> bytes:
    copies, rest = divmod(length, len(source))
    return source * copies + source[:rest]


def sha_crypt_digest(
    new_digest: DigestFactory,
    plain: bytes,
    salt: bytes,
    rounds: int,
) -> bytes:
    """Compute the raw SHA-crypt digest.

    Parameters
    ----------
    new_digest : DigestFactory
        Factory of fresh primitive contexts (sha256 or sha512).
    plain : bytes
        The password bytes.
    salt : bytes
        The salt bytes.
    rounds : int
        The number of rounds.

    Returns
    -------
    bytes
        The final digest (as wide as the primitive's output).
    """
    digest_b = digest_of(new_digest, plain, salt, plain)

    context = new_digest()
    context.update(plain)
    context.update(salt)
    context.update(_repeat_to_length(digest_b, len(plain)))
    length = len(plain)
    while length:
        context.update(digest_b if length & 1 else plain)
        length >>= 1
    digest_a = context.digest()

    p_bytes = _repeat_to_length(
        digest_of(new_digest, plain * len(plain)), len(plain)
    )
    s_bytes = _repeat_to_length(
        digest_of(new_digest, salt * (16 + digest_a[0])), len(salt)
    )

    result = digest_a
    for index in range(rounds):
        context = new_digest()
        context.update(p_bytes if index & 1 else result)
        if index % 3 != 0:
            context.update(s_bytes)
        if index % 7 != 0:
            context.update(p_bytes)
        context.update(result if index & 1 else p_bytes)
        result = context.digest()
    return result


@dataclass(frozen=True)
class ShaCrypt(BaseEngine):
    """Base of the SHA-crypt engines."""

    DEFAULT_ROUNDS: ClassVar[int] = 5000
    PERMUTATION: ClassVar[Permutation] = ()

    def _compute(
        self,
        new_digest: DigestFactory,
        plain: bytes,
        salt: bytes,
        rounds: int,
    ) -> str:
        raw = sha_crypt_digest(new_digest, plain, salt, rounds)
        return crypt_b64_encode(raw, self.PERMUTATION)


@dataclass(frozen=True)
class Sha256Crypt(ShaCrypt):
    """SHA-256-crypt, 43 character digests."""

    IDENTIFIER: ClassVar[str] = "5"
    DIGEST_NAME: ClassVar[str] = "sha256"
    PERMUTATION: ClassVar[Permutation] = SHA256_PERMUTATION


@dataclass(frozen=True)
class Sha512Crypt(ShaCrypt):
    """SHA-512-crypt, 86 character digests."""

    IDENTIFIER: ClassVar[str] = "6"
    DIGEST_NAME: ClassVar[str] = "sha512"
    PERMUTATION: ClassVar[Permutation] = SHA512_PERMUTATION


__all__ = [
    "CRYPT_ALPHABET",
    "SHA256_PERMUTATION",
    "SHA512_PERMUTATION",
    "Sha256Crypt",
    "Sha512Crypt",
    "ShaCrypt",
    "b64_from_24bit",
    "crypt_b64_encode",
    "sha_crypt_digest",
]
