"""Pytest configuration and fixtures for Hue control tests."""

import json

import pytest
from pathlib import Path
from unittest.mock import MagicMock

from core.config import ConfigStore
from core.gateway import HttpGateway


@pytest.fixture
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def config_file(tmp_path):
    """Return a configuration file path inside the test's temp directory."""
    return tmp_path / 'hue.conf.json'


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, config_file):
    """Point HUE_CONF_FILE at a temp file so tests never touch ~/.hue.conf.json."""
    monkeypatch.setenv('HUE_CONF_FILE', str(config_file))
    monkeypatch.delenv('HUE_REQUEST_TIMEOUT', raising=False)


@pytest.fixture
def config(config_file):
    """An empty, loaded configuration."""
    return ConfigStore(config_file).load()


@pytest.fixture
def paired_config(config_file):
    """A configuration with bridge IP and username already set."""
    config_file.write_text(json.dumps({'IpAddress': '192.168.1.2', 'Username': 'test-user'}))
    return ConfigStore(config_file).load()


def make_response(data=None, content: bytes | None = None):
    """Create a mock requests.Response carrying a JSON body."""
    response = MagicMock()
    if content is None:
        content = json.dumps(data).encode() if data is not None else b''
    response.content = content
    response.json.return_value = data
    return response


@pytest.fixture
def mock_session():
    """A mock requests.Session whose request() returns an empty JSON list."""
    session = MagicMock()
    session.request.return_value = make_response([])
    return session


@pytest.fixture
def gateway_factory(mock_session):
    """Build HttpGateways on the mock session and close them after the test."""
    gateways = []

    def factory(config):
        gateway = HttpGateway(config, session=mock_session)
        gateways.append(gateway)
        return gateway

    yield factory

    for gateway in gateways:
        gateway.close()
