# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Round count policy."""

import logging
import secrets
from dataclasses import dataclass, field

from ..config import DEFAULT_MAX_ROUNDS, DEFAULT_MIN_ROUNDS

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoundRange:
    """Inclusive range of accepted round counts."""

    minimum: int = DEFAULT_MIN_ROUNDS
    maximum: int = DEFAULT_MAX_ROUNDS

    def __post_init__(self) -> None:
        if self.minimum < 1:
            raise ValueError(f"Invalid minimum rounds: {self.minimum}")
        if self.minimum > self.maximum:
            raise ValueError(
                f"Minimum rounds ({self.minimum}) exceed "
                f"maximum rounds ({self.maximum})"
            )


@dataclass(frozen=True)
class RoundPolicy:
    """Selects the round count to use for an algorithm."""

    default_rounds: int
    round_range: RoundRange = field(default_factory=RoundRange)

    @property
    def minimum(self) -> int:
        """The minimum accepted rounds."""
        return self.round_range.minimum

    @property
    def maximum(self) -> int:
        """The maximum accepted rounds."""
        return self.round_range.maximum

    def effective_rounds(self, requested: int) -> int:
        """Clamp the requested rounds to the policy.

        Parameters
        ----------
        requested : int
            The requested number of rounds, <= 0 for the default.

        Returns
        -------
        int
            The rounds to use.
        """
        if requested <= 0:
            LOG.debug("No rounds requested, using %d", self.default_rounds)
            return self.default_rounds
        if requested < self.minimum:
            LOG.debug(
                "Requested rounds %d below minimum, using %d",
                requested,
                self.minimum,
            )
            return self.minimum
        if requested > self.maximum:
            LOG.debug(
                "Requested rounds %d above maximum, using %d",
                requested,
                self.maximum,
            )
            return self.maximum
        return requested

    def random_rounds(self) -> int:
        """Draw a round count from ``[minimum, maximum)``.

        Returns
        -------
        int
            The random number of rounds.
        """
        spread = self.maximum - self.minimum
        if spread <= 0:
            return self.minimum
        return self.minimum + secrets.randbelow(spread)


__all__ = ["RoundPolicy", "RoundRange"]
