"""Positional command dispatcher.

Matches the raw argument list (program name at index 0) against the command
catalogue, runs the first match and waits for any request it started.
"""

from pathlib import Path
from typing import Sequence

import click

from commands.registry import COMMANDS, CommandDescriptor
from core.config import ConfigStore, load_config
from core.errors import MissingConfig, UnexpectedResponseShape
from core.gateway import HttpGateway
from models.utils import find_similar_strings

DEFAULT_PROGRAM_NAME = 'hue-control'


def find_command(args: Sequence[str],
                 commands: Sequence[CommandDescriptor] = COMMANDS) -> CommandDescriptor | None:
    """Return the first command whose name and arity match args, if any."""
    for command in commands:
        if command.matches(args):
            return command
    return None


def print_usage(args: Sequence[str], commands: Sequence[CommandDescriptor] = COMMANDS):
    """Print the usage banner to stderr.

    When the requested command exists but got the wrong number of arguments,
    or looks like a typo of a known command, say so before the listing.
    """
    program = Path(args[0]).name if args else DEFAULT_PROGRAM_NAME
    requested = args[1] if len(args) > 1 else None
    names = [command.name for command in commands]

    if requested is not None:
        if requested in names:
            click.secho(f"Wrong number of arguments for '{requested}'.", fg='red', err=True)
            click.echo(err=True)
        else:
            suggestions = find_similar_strings(requested, names)
            if suggestions:
                click.secho(f"No such command '{requested}'. Did you mean one of these?",
                            fg='yellow', err=True)
                for suggestion in suggestions:
                    click.secho(f"  • {suggestion}", fg='green', err=True)
                click.echo(err=True)

    click.echo(f"usage: {program} <command> [<args>]", err=True)
    click.echo(err=True)
    click.echo("Available commands:", err=True)
    click.echo(err=True)
    for command in commands:
        click.echo(f"    {command.usage}", err=True)


def dispatch(args: Sequence[str], commands: Sequence[CommandDescriptor] = COMMANDS,
             config: ConfigStore | None = None, gateway: HttpGateway | None = None) -> int:
    """Run the command selected by args and return the process exit status.

    Args:
        args: Full argument list, program name first
        commands: Ordered command catalogue
        config: Loaded configuration (loaded from disk if not provided)
        gateway: HTTP gateway (created, and closed afterwards, if not provided
            and the command talks to the bridge)

    Returns:
        1 if no command matched or a response couldn't be understood, else 0.
        A missing configuration value is reported but still returns 0.
    """
    command = find_command(args, commands)
    if command is None:
        print_usage(args, commands)
        return 1

    if config is None:
        config = load_config()
    owns_gateway = gateway is None and not command.local
    if owns_gateway:
        gateway = HttpGateway(config)

    try:
        pending = command.execute(config, gateway, args)
        if pending is not None:
            pending.wait()
    except MissingConfig as e:
        click.echo(str(e))
    except UnexpectedResponseShape as e:
        click.secho(f"Error: {e}", fg='red', err=True)
        return 1
    finally:
        if owns_gateway:
            gateway.close()

    return 0
