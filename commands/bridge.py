"""Bridge commands: pairing, whitelist management and resource listings."""

from typing import Any, Callable

import click

from core.config import ConfigStore
from core.errors import UnexpectedResponseShape
from core.gateway import HttpGateway, PendingRequest
from models.types import BridgeError, PairingRequest, PairingSuccess
from models.utils import print_json

DEFAULT_DEVICE_TYPE = 'hue_control#cli'


def handle_pairing_response(config: ConfigStore, data: Any):
    """Store the username from a pairing response.

    The bridge answers with a single-element list holding either an 'error'
    (link button not pressed) or a 'success' with the new username.

    Raises:
        UnexpectedResponseShape: If the response matches neither form
    """
    if not isinstance(data, list) or not data or not isinstance(data[0], dict):
        raise UnexpectedResponseShape(f"Unexpected pairing response: {data!r}")

    entry = data[0]
    if 'error' in entry:
        error: BridgeError = entry['error'] if isinstance(entry['error'], dict) else {}
        click.echo()
        click.secho("Press the link button on your Hue Bridge, then run create-user again.",
                    fg='yellow', bold=True)
        if error.get('description'):
            click.echo(f"Bridge said: {error['description']}")
        return

    success: PairingSuccess | None = entry.get('success')
    username = success.get('username') if isinstance(success, dict) else None
    if not isinstance(username, str) or not username:
        raise UnexpectedResponseShape(f"Unexpected pairing response: {data!r}")

    config.username = username
    config.save()
    click.secho(f"✓ Created user {username}", fg='green')


def create_user(config: ConfigStore, gateway: HttpGateway, args: list[str]) -> PendingRequest:
    """Register a new username with the bridge via link button pairing."""
    url = gateway.build_pairing_url()
    body: PairingRequest = {'devicetype': config.device_type or DEFAULT_DEVICE_TYPE}
    return gateway.post(url, body, lambda data: handle_pairing_response(config, data))


def delete_user(config: ConfigStore, gateway: HttpGateway, args: list[str]) -> PendingRequest:
    """Remove a username from the bridge whitelist."""
    url = gateway.build_authenticated_url(f"config/whitelist/{args[0]}")
    return gateway.delete(url, print_json)


def get_resource_command(relative_path: str) -> Callable[[ConfigStore, HttpGateway, list[str]], PendingRequest]:
    """Build an action that fetches a bridge resource and pretty-prints it.

    Args:
        relative_path: Path below /api/<username>/ (e.g. 'lights', 'config')
    """
    def get_resource(config: ConfigStore, gateway: HttpGateway, args: list[str]) -> PendingRequest:
        url = gateway.build_authenticated_url(relative_path)
        return gateway.get(url, print_json)

    get_resource.__name__ = f"get_{relative_path}"
    return get_resource
