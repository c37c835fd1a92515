"""Schedule commands.

A schedule makes the bridge PUT a light state at a local time given in the
bridge's own format (e.g. W127/T23:00:15). The time is passed through as-is.
"""

import click

from core.config import ConfigStore
from core.gateway import HttpGateway, PendingRequest
from models.types import LightState, SchedulePayload
from models.utils import parse_brightness, print_json

SCHEDULE_NAME = 'Schedule Light'


def build_schedule_payload(username: str, local_time: str, light_id: str,
                           on: bool, brightness: int | None = None) -> SchedulePayload:
    """Build the body for POST schedules/.

    Args:
        username: Registered bridge username, used in the command address
        local_time: Trigger time in bridge notation
        light_id: Target light
        on: Power state to set
        brightness: Optional brightness (0-254)
    """
    state: LightState = {'on': on}
    if brightness is not None:
        state['bri'] = brightness

    return {
        'name': SCHEDULE_NAME,
        'command': {
            'address': f"/api/{username}/lights/{light_id}/state",
            'method': 'PUT',
            'body': state,
        },
        'localtime': local_time,
    }


def _create_schedule(config: ConfigStore, gateway: HttpGateway, local_time: str,
                     light_id: str, on: bool, brightness: int | None = None) -> PendingRequest:
    url = gateway.build_authenticated_url('schedules')
    payload = build_schedule_payload(config.username, local_time, light_id, on, brightness)
    return gateway.post(url, payload, print_json)


def create_schedule_light_on(config: ConfigStore, gateway: HttpGateway, args: list[str]) -> PendingRequest:
    local_time, light_id, brightness = args
    return _create_schedule(config, gateway, local_time, light_id, True, parse_brightness(brightness))


def create_schedule_light_off(config: ConfigStore, gateway: HttpGateway, args: list[str]) -> PendingRequest:
    local_time, light_id = args
    return _create_schedule(config, gateway, local_time, light_id, False)


def delete_schedule(config: ConfigStore, gateway: HttpGateway, args: list[str]) -> PendingRequest:
    url = gateway.build_authenticated_url(f"schedules/{args[0]}")
    click.echo(f"Deleting schedule {args[0]}")
    return gateway.delete(url)
