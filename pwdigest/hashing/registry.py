# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Registry of the known hashing algorithms."""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Optional, Tuple, Type

from ..config import Settings
from ._base import BaseEngine
from ._iterated_digest import Md5Digest, Sha256Digest, Sha512Digest
from ._rounds import RoundRange
from ._salt import SaltPolicy
from ._sha_crypt import Sha256Crypt, Sha512Crypt
from .protocol import CryptEngine

LOG = logging.getLogger(__name__)

# name, priority, engine
DEFAULT_ALGORITHMS: Tuple[Tuple[str, int, Type[BaseEngine]], ...] = (
    ("MD5", 1, Md5Digest),
    ("SHA-256", 2, Sha256Digest),
    ("SHA-512", 3, Sha512Digest),
    ("SHA-256-CRYPT", 4, Sha256Crypt),
    ("SHA-512-CRYPT", 5, Sha512Crypt),
)


@dataclass(frozen=True)
class AlgorithmDescriptor:
    """A registered algorithm."""

    name: str
    priority: int
    engine: CryptEngine

    @property
    def identifier(self) -> str:
        """The identifier of the algorithm."""
        return self.engine.identifier

    @property
    def default_rounds(self) -> int:
        """The default rounds of the algorithm."""
        return self.engine.default_rounds


class AlgorithmRegistry:
    """Immutable identifier to algorithm table."""

    def __init__(self, descriptors: Iterable[AlgorithmDescriptor]) -> None:
        """Initialize the registry.

        Parameters
        ----------
        descriptors : Iterable[AlgorithmDescriptor]
            The algorithms to register.

        Raises
        ------
        ValueError
            If no algorithm is given or an identifier is registered twice.
        """
        entries = tuple(descriptors)
        if not entries:
            raise ValueError("At least one algorithm must be registered")
        by_identifier = {}
        for descriptor in entries:
            if descriptor.identifier in by_identifier:
                raise ValueError(
                    f"Duplicate algorithm identifier: {descriptor.identifier}"
                )
            by_identifier[descriptor.identifier] = descriptor
        self._entries = entries
        self._by_identifier = MappingProxyType(by_identifier)
        self._best = max(entries, key=lambda entry: entry.priority)

    def __iter__(self) -> Iterator[AlgorithmDescriptor]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._by_identifier

    def get(self, identifier: str) -> Optional[AlgorithmDescriptor]:
        """Get the descriptor of an identifier.

        Parameters
        ----------
        identifier : str
            The algorithm identifier (e.g. ``6``).

        Returns
        -------
        Optional[AlgorithmDescriptor]
            The descriptor, None if not registered.
        """
        return self._by_identifier.get(identifier)

    def resolve(self, identifier: str) -> Optional[CryptEngine]:
        """Get the engine of an identifier.

        Parameters
        ----------
        identifier : str
            The algorithm identifier (e.g. ``6``).

        Returns
        -------
        Optional[CryptEngine]
            The engine, None if not registered.
        """
        descriptor = self.get(identifier)
        return descriptor.engine if descriptor is not None else None

    def best(self) -> AlgorithmDescriptor:
        """Get the algorithm with the highest priority.

        Returns
        -------
        AlgorithmDescriptor
            The best registered algorithm.
        """
        return self._best


def build_registry(settings: Optional[Settings] = None) -> AlgorithmRegistry:
    """Build the default registry.

    Parameters
    ----------
    settings : Optional[Settings]
        The settings to use, loaded if not given.

    Returns
    -------
    AlgorithmRegistry
        The registry with all the known algorithms.
    """
    if settings is None:
        settings = Settings.load()
    round_range = RoundRange(settings.min_rounds, settings.max_rounds)
    salt_policy = SaltPolicy(
        salt_length=settings.salt_length,
        minimum_salt_length=settings.min_salt_length,
    )
    LOG.debug("Building the algorithm registry with %s", round_range)
    return AlgorithmRegistry(
        AlgorithmDescriptor(
            name=name,
            priority=priority,
            engine=engine_class(
                round_range=round_range, salt_policy=salt_policy
            ),
        )
        for name, priority, engine_class in DEFAULT_ALGORITHMS
    )


__all__ = [
    "AlgorithmDescriptor",
    "AlgorithmRegistry",
    "DEFAULT_ALGORITHMS",
    "build_registry",
]
