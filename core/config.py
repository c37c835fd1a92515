"""Configuration store for the Hue Bridge connection.

This module handles:
- Locating the configuration file (~/.hue.conf.json or $HUE_CONF_FILE)
- Loading the stored keys (bridge IP, device type, username)
- Atomically writing them back after each change
"""

import json
import os
import tempfile
from pathlib import Path

import click

# Keys as stored in the configuration file
IP_ADDRESS_KEY = 'IpAddress'
DEVICE_TYPE_KEY = 'DeviceType'
USERNAME_KEY = 'Username'

DEFAULT_CONFIG_FILE = Path.home() / '.hue.conf.json'


def get_config_path() -> Path:
    """Return the configuration file path, honouring HUE_CONF_FILE."""
    override = os.getenv('HUE_CONF_FILE')
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_FILE


class ConfigStore:
    """Persistent string-keyed configuration for a single CLI invocation."""

    def __init__(self, path: Path | None = None):
        self.path = Path(path) if path else get_config_path()
        self._values: dict[str, str] = {}

    def load(self) -> 'ConfigStore':
        """Load configuration from disk.

        A missing file is an empty configuration, not an error. A file that
        can't be parsed is reported and treated as empty.
        """
        self._values = {}
        if not self.path.exists():
            return self

        try:
            with open(self.path, 'r') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            click.echo(f"Warning: Failed to load config from {self.path}: {e}", err=True)
            return self

        if isinstance(data, dict):
            self._values = {str(k): str(v) for k, v in data.items() if v is not None}
        else:
            click.echo(f"Warning: Ignoring malformed config in {self.path}", err=True)
        return self

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str | None):
        """Update a value in memory. None removes the key."""
        if value is None:
            self._values.pop(key, None)
        else:
            self._values[key] = value

    def items(self) -> list[tuple[str, str]]:
        return list(self._values.items())

    def save(self) -> bool:
        """Write the full mapping to disk atomically.

        Failures are reported on stderr and never raised.

        Returns:
            True if saved successfully, False otherwise
        """
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", dir=self.path.parent
            )
            with os.fdopen(fd, 'w') as f:
                json.dump(self._values, f, indent=2)
            os.chmod(tmp_name, 0o600)
            os.replace(tmp_name, self.path)
            return True
        except OSError as e:
            click.echo(f"Error writing configuration file {self.path}: {e}", err=True)
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            return False

    @property
    def ip_address(self) -> str | None:
        return self.get(IP_ADDRESS_KEY)

    @ip_address.setter
    def ip_address(self, value: str | None):
        self.set(IP_ADDRESS_KEY, value)

    @property
    def device_type(self) -> str | None:
        return self.get(DEVICE_TYPE_KEY)

    @device_type.setter
    def device_type(self, value: str | None):
        self.set(DEVICE_TYPE_KEY, value)

    @property
    def username(self) -> str | None:
        return self.get(USERNAME_KEY)

    @username.setter
    def username(self, value: str | None):
        self.set(USERNAME_KEY, value)


def load_config(path: Path | None = None) -> ConfigStore:
    """Create a ConfigStore and load it from disk."""
    return ConfigStore(path).load()


def get_request_timeout() -> float | None:
    """Return the HTTP timeout in seconds from HUE_REQUEST_TIMEOUT, if set.

    Requests wait indefinitely when no timeout is configured.
    """
    value = os.getenv('HUE_REQUEST_TIMEOUT')
    if not value:
        return None
    try:
        timeout = float(value)
    except ValueError:
        click.echo(f"Warning: Ignoring invalid HUE_REQUEST_TIMEOUT '{value}'", err=True)
        return None
    return timeout if timeout > 0 else None
