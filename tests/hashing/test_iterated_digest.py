# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=no-self-use,line-too-long
# flake8: noqa: E501

"""Tests for the iterated digest engines."""

from typing import Type

import pytest

from pwdigest.hashing import (
    Md5Digest,
    PasswordDigester,
    RoundRange,
    Sha256Digest,
    Sha512Digest,
)
from pwdigest.hashing._iterated_digest import IteratedDigest

ENGINES = [Md5Digest, Sha256Digest, Sha512Digest]

# (engine, plain, salt, rounds, expected)
KNOWN_HASHES = [
    (Md5Digest, "Hello world!", "saltstring", 1, "$1$1$saltstring$fwPB0pP8pynGbPk/Qg5rZg=="),
    (Md5Digest, "password", "saltsalt", 15, "$1$15$saltsalt$KnX37eejiEFVJemHIN7gSQ=="),
    (Sha256Digest, "Hello world!", "saltstring", 1, "$3$1$saltstring$7yQ5ZYnXYhx/vysbaLHPCH/s/WBdVuVp8TAY30sM0nI="),
    (Sha256Digest, "password", "saltsalt", 15, "$3$15$saltsalt$5k6cj4fqXzsc+7jq9Ha+IzCl0LrEuj45II/JWDwKbpk="),
    (Sha512Digest, "Hello world!", "saltstring", 1, "$4$1$saltstring$Mb4Nf2oMYpHpwa36UsYlR4BQWzRZx5TVYIzZze2cNVW3TYp7zOpJtieFDKfAbjzAjW/ag2cKJNuUWLR5PU5xvw=="),
    (Sha512Digest, "password", "saltsalt", 15, "$4$15$saltsalt$Cnuupb2S8hXl2m8SrKWCstqD3G/miy4Czp3EJzOBlPlWES+4hscwJF8865raX96MggLkc1rvefbloa55TOqbag=="),
]
STORED_HASHES = [entry for entry in KNOWN_HASHES if entry[3] == 15]


@pytest.mark.parametrize("engine_class,plain,salt,rounds,expected", KNOWN_HASHES)
def test_known_hashes(
    engine_class: Type[IteratedDigest],
    plain: str,
    salt: str,
    rounds: int,
    expected: str,
) -> None:
    """Test hashing against fixed values."""
    engine = engine_class(round_range=RoundRange(1, 100))
    assert engine.hash(plain, salt, rounds) == expected
    assert engine.verify(plain, expected)
    assert not engine.verify(plain + "!", expected)


@pytest.mark.parametrize("engine_class,plain,salt,rounds,expected", STORED_HASHES)
def test_stored_hashes_are_upgraded(
    digester: PasswordDigester,
    engine_class: Type[IteratedDigest],
    plain: str,
    salt: str,
    rounds: int,
    expected: str,
) -> None:
    """Test that stored legacy hashes verify and get a new hash."""
    assert engine_class.IDENTIFIER == expected[1]
    result = digester.matches_password(plain, expected)
    assert result.matches
    assert result.upgraded_hash is not None
    assert result.upgraded_hash.startswith("$6$")
    assert not digester.matches_password("wrong", expected).matches


@pytest.mark.parametrize("engine_class", ENGINES)
class TestIteratedDigest:
    """Test the iterated digest engines."""

    def test_default_rounds(self, engine_class: Type[IteratedDigest]) -> None:
        """Test that the default round count is always written."""
        engine = engine_class()
        hashed = engine.hash("Hello world!", "saltstring", 0)
        assert engine.default_rounds == 1
        assert hashed is not None
        assert hashed.startswith(f"${engine.identifier}$1$saltstring$")

    def test_random_hash_verifies(
        self, engine_class: Type[IteratedDigest]
    ) -> None:
        """Test hashing with random salt and rounds."""
        engine = engine_class(round_range=RoundRange(10, 20))
        hashed = engine.hash("test_password_123")  # nosemgrep # nosec
        assert hashed is not None
        assert hashed.startswith(f"${engine.identifier}$1")
        assert "rounds=" not in hashed
        assert engine.verify("test_password_123", hashed)
        assert not engine.verify("wrong_password", hashed)

    def test_labelled_rounds_are_not_verified(
        self, engine_class: Type[IteratedDigest]
    ) -> None:
        """Test that only the unlabelled rounds layout verifies."""
        engine = engine_class(round_range=RoundRange(10, 20))
        hashed = engine.hash("password", "saltsalt", 15)
        assert hashed is not None
        labelled = hashed.replace("$15$", "$rounds=15$")
        assert engine.verify("password", hashed)
        assert not engine.verify("password", labelled)

    def test_unicode_normalization(
        self, engine_class: Type[IteratedDigest]
    ) -> None:
        """Test that composed and decomposed forms hash the same."""
        engine = engine_class(round_range=RoundRange(10, 20))
        composed = "caf\u00e9"
        decomposed = "cafe\u0301"
        hashed = engine.hash(composed, "saltsalt", 10)
        assert hashed is not None
        assert engine.verify(decomposed, hashed)

    def test_none_plain(self, engine_class: Type[IteratedDigest]) -> None:
        """Test that there is no hash of nothing."""
        assert engine_class().hash(None) is None
