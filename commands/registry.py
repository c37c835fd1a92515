"""Command descriptors and the ordered command catalogue.

Each descriptor knows its name, the positional arguments it takes and the
action that runs it. The dispatcher walks COMMANDS in order and runs the
first descriptor whose name and argument count both match.
"""

from dataclasses import dataclass
from typing import Callable, Sequence

from core.config import ConfigStore
from core.gateway import HttpGateway, PendingRequest

from commands.bridge import (
    create_user,
    delete_user,
    get_resource_command,
)
from commands.config_commands import get_config, set_bridge_ip_address, set_device_type
from commands.schedules import (
    create_schedule_light_off,
    create_schedule_light_on,
    delete_schedule,
)

Action = Callable[[ConfigStore, HttpGateway | None, list[str]], PendingRequest | None]


@dataclass(frozen=True)
class CommandDescriptor:
    """A command name, its positional arguments and the action to run.

    Local commands only touch the configuration file and get no gateway.
    """
    name: str
    arguments: tuple[str, ...]
    action: Action
    local: bool = False

    @property
    def arity(self) -> int:
        return len(self.arguments)

    @property
    def usage(self) -> str:
        return ' '.join([self.name, *(f"<{arg}>" for arg in self.arguments)])

    def matches(self, args: Sequence[str]) -> bool:
        """Check the full argument list, program name included at index 0."""
        return len(args) == 2 + self.arity and args[1] == self.name

    def execute(self, config: ConfigStore, gateway: HttpGateway | None,
                args: Sequence[str]) -> PendingRequest | None:
        return self.action(config, gateway, list(args[2:]))


COMMANDS: tuple[CommandDescriptor, ...] = (
    CommandDescriptor('get-config', (), get_config, local=True),
    CommandDescriptor('set-bridge-ip-address', ('ip-address',), set_bridge_ip_address, local=True),
    CommandDescriptor('set-device-type', ('device-type',), set_device_type, local=True),
    CommandDescriptor('create-user', (), create_user),
    CommandDescriptor('delete-user', ('username',), delete_user),
    CommandDescriptor('get-bridge-config', (), get_resource_command('config')),
    CommandDescriptor('get-scenes', (), get_resource_command('scenes')),
    CommandDescriptor('get-schedules', (), get_resource_command('schedules')),
    CommandDescriptor('get-groups', (), get_resource_command('groups')),
    CommandDescriptor('get-sensors', (), get_resource_command('sensors')),
    CommandDescriptor('get-lights', (), get_resource_command('lights')),
    CommandDescriptor('get-rules', (), get_resource_command('rules')),
    CommandDescriptor(
        'create-schedule-light-on',
        ('local-time', 'light-id', 'brightness'),
        create_schedule_light_on,
    ),
    CommandDescriptor(
        'create-schedule-light-off',
        ('local-time', 'light-id'),
        create_schedule_light_off,
    ),
    CommandDescriptor('delete-schedule', ('schedule-id',), delete_schedule),
)
