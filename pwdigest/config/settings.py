# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Password digester settings module."""

import logging
from typing import Any

from dotenv import load_dotenv
from pydantic import Field, ValidationInfo, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Annotated, Self

from ._common import DOT_ENV_PATH, ENV_PREFIX, to_kebab
from ._rounds import get_max_rounds, get_min_rounds
from ._salt import get_min_salt_length, get_salt_length

LOG = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Settings class."""

    min_rounds: Annotated[int, Field(ge=1)] = get_min_rounds()
    max_rounds: Annotated[int, Field(ge=1)] = get_max_rounds()
    salt_length: Annotated[int, Field(ge=1)] = get_salt_length()
    min_salt_length: Annotated[int, Field(ge=1)] = get_min_salt_length()
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        alias_generator=to_kebab,
        populate_by_name=True,
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
        cli_parse_args=False,  # we use typer
    )

    @classmethod
    def load(cls) -> "Settings":
        """Load the settings.

        Returns
        -------
        Settings
            The settings instance
        """
        if DOT_ENV_PATH.exists():
            load_dotenv(DOT_ENV_PATH, override=True)
        return cls()

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, value: Any, info: ValidationInfo) -> Any:
        """Validate the log level.

        Parameters
        ----------
        value : Any
            The value
        info : ValidationInfo
            The validation info

        Returns
        -------
        LogLevelType
            The log level
        """
        if isinstance(value, str):
            return value.upper()
        return value  # pragma: no cover

    @model_validator(mode="after")
    def validate_ranges(self) -> Self:
        """Validate the round and salt length ranges.

        Returns
        -------
        Settings
            The validated instance

        Raises
        ------
        ValueError
            If a minimum is greater than its maximum
        """
        if self.min_rounds > self.max_rounds:
            raise ValueError(
                f"min_rounds ({self.min_rounds}) must not exceed "
                f"max_rounds ({self.max_rounds})"
            )
        if self.min_salt_length > self.salt_length:
            raise ValueError(
                f"min_salt_length ({self.min_salt_length}) must not exceed "
                f"salt_length ({self.salt_length})"
            )
        LOG.debug(
            "Rounds: [%d, %d], salt length: [%d, %d]",
            self.min_rounds,
            self.max_rounds,
            self.min_salt_length,
            self.salt_length,
        )
        return self
