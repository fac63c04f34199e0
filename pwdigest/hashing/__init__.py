# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Password hashing and verification."""

from ._codec import EncodedHash
from ._iterated_digest import Md5Digest, Sha256Digest, Sha512Digest
from ._rounds import RoundPolicy, RoundRange
from ._salt import SaltPolicy
from ._sha_crypt import Sha256Crypt, Sha512Crypt
from .dispatcher import MatchResult, PasswordDigester
from .exceptions import HashEncodingError
from .protocol import CryptEngine, Hasher
from .registry import AlgorithmDescriptor, AlgorithmRegistry, build_registry

password_digester = PasswordDigester()

__all__ = [
    "AlgorithmDescriptor",
    "AlgorithmRegistry",
    "CryptEngine",
    "EncodedHash",
    "HashEncodingError",
    "Hasher",
    "MatchResult",
    "Md5Digest",
    "PasswordDigester",
    "RoundPolicy",
    "RoundRange",
    "SaltPolicy",
    "Sha256Crypt",
    "Sha256Digest",
    "Sha512Crypt",
    "Sha512Digest",
    "build_registry",
    "password_digester",
]
