"""Commands that read and change the local configuration file."""

import click

from core.config import ConfigStore
from core.gateway import HttpGateway


def get_config(config: ConfigStore, gateway: HttpGateway | None, args: list[str]):
    """Print every stored configuration key."""
    click.echo("Configuration")
    for key, value in config.items():
        click.echo(f"    {key}={value}")


def set_bridge_ip_address(config: ConfigStore, gateway: HttpGateway | None, args: list[str]):
    config.ip_address = args[0]
    config.save()


def set_device_type(config: ConfigStore, gateway: HttpGateway | None, args: list[str]):
    config.device_type = args[0]
    config.save()
