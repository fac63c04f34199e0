# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Command line interface module."""

# flake8: noqa: E501
# pylint: disable=too-many-arguments,too-many-positional-arguments
import logging
import logging.config
from typing import Optional

import typer
from pydantic import ValidationError

from pwdigest._logging import LogLevel, get_log_level, get_logging_config
from pwdigest._version import __version__
from pwdigest.config import Settings
from pwdigest.hashing import PasswordDigester, build_registry

APP_NAME = "pwdigest"
APP_HELP = "Create and verify self describing password hashes"

DEFAULT_SETTINGS = Settings.load()

LOG = logging.getLogger(__name__)

app = typer.Typer(
    name=APP_NAME,
    help=APP_HELP,
    add_completion=False,
    no_args_is_help=True,
    add_help_option=True,
    pretty_exceptions_short=True,
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    min_rounds: int = typer.Option(
        default=DEFAULT_SETTINGS.min_rounds,
        help="The minimum rounds of new hashes",
    ),
    max_rounds: int = typer.Option(
        default=DEFAULT_SETTINGS.max_rounds,
        help="The maximum rounds of new hashes",
    ),
    salt_length: int = typer.Option(
        default=DEFAULT_SETTINGS.salt_length,
        help="The length of generated salts (and the limit of given ones)",
    ),
    min_salt_length: int = typer.Option(
        default=DEFAULT_SETTINGS.min_salt_length,
        help="The minimum salt length",
    ),
    log_level: LogLevel = typer.Option(
        default=get_log_level(),
        help="The log level",
        case_sensitive=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the version and exit",
    ),
) -> None:
    """Password digester command line interface."""
    if version:
        typer.echo(f"{APP_NAME} {__version__}")
        raise typer.Exit()
    logging.config.dictConfig(get_logging_config(log_level.value))
    try:
        settings = Settings(
            min_rounds=min_rounds,
            max_rounds=max_rounds,
            salt_length=salt_length,
            min_salt_length=min_salt_length,
            log_level=log_level.value,
        )
    except ValidationError as error:
        typer.echo(f"Invalid settings: {error}", err=True)
        raise typer.Exit(code=2) from error
    LOG.debug("Effective settings: %s", settings.model_dump_json(indent=2))
    ctx.obj = PasswordDigester(build_registry(settings))


@app.command(name="hash")
def hash_password(
    ctx: typer.Context,
    password: Optional[str] = typer.Argument(
        None,
        help="The password to hash (prompted for if omitted)",
        show_default=False,
    ),
    salt: Optional[str] = typer.Option(
        None,
        help="Use this salt instead of a random one",
    ),
    rounds: Optional[int] = typer.Option(
        None,
        help="Use these rounds instead of random ones (0 for the default)",
    ),
    algorithm: Optional[str] = typer.Option(
        None,
        "--algorithm",
        "-a",
        help="The algorithm identifier, the best available if omitted",
    ),
) -> None:
    """Hash a password."""
    digester: PasswordDigester = ctx.obj
    if password is None:
        password = typer.prompt(
            "Password", hide_input=True, confirmation_prompt=True
        )
    identifier = algorithm or digester.registry.best().identifier
    engine = digester.registry.resolve(identifier)
    if engine is None:
        typer.echo(f"Unknown algorithm: {identifier}", err=True)
        raise typer.Exit(code=2)
    if salt is None and rounds is None:
        hashed = digester.hash_password(password, identifier)
    else:
        hashed = engine.hash(password, salt, rounds)
    if hashed is None:
        typer.echo("Could not hash the password", err=True)
        raise typer.Exit(code=1)
    typer.echo(hashed)


@app.command(name="verify")
def verify_password(
    ctx: typer.Context,
    stored: str = typer.Argument(..., help="The stored hash"),
    password: Optional[str] = typer.Argument(
        None,
        help="The password to check (prompted for if omitted)",
        show_default=False,
    ),
) -> None:
    """Verify a password against a stored hash."""
    digester: PasswordDigester = ctx.obj
    if password is None:
        password = typer.prompt("Password", hide_input=True)
    result = digester.matches_password(password, stored)
    if not result.matches:
        typer.echo("no match")
        raise typer.Exit(code=1)
    typer.echo("match")
    if result.upgraded_hash:
        typer.echo(result.upgraded_hash)


@app.command(name="algorithms")
def list_algorithms(ctx: typer.Context) -> None:
    """List the registered algorithms."""
    digester: PasswordDigester = ctx.obj
    best = digester.registry.best()
    for descriptor in digester.registry:
        marker = " (best)" if descriptor.identifier == best.identifier else ""
        typer.echo(
            f"${descriptor.identifier}$\t{descriptor.name}\t"
            f"{descriptor.priority}{marker}"
        )


if __name__ == "__main__":
    app()
