"""Tests for the configuration store in core/config.py"""

import json
import os
import stat

import pytest
from pathlib import Path
from unittest.mock import patch

from core.config import (
    DEFAULT_CONFIG_FILE,
    ConfigStore,
    get_config_path,
    get_request_timeout,
    load_config,
)


class TestConfigPath:
    """Test configuration file location."""

    def test_default_path_in_home(self, monkeypatch):
        """Without HUE_CONF_FILE the config lives in the home directory."""
        monkeypatch.delenv('HUE_CONF_FILE')
        assert get_config_path() == DEFAULT_CONFIG_FILE
        assert DEFAULT_CONFIG_FILE.parent == Path.home()

    def test_env_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv('HUE_CONF_FILE', str(tmp_path / 'other.json'))
        assert get_config_path() == tmp_path / 'other.json'

    def test_store_uses_env_path(self, config_file):
        assert ConfigStore().path == config_file


class TestLoad:
    """Test loading configuration files."""

    def test_missing_file_is_empty(self, config_file):
        """A missing file is an empty configuration, not an error."""
        assert not config_file.exists()
        config = load_config(config_file)
        assert config.items() == []
        assert config.ip_address is None
        assert config.device_type is None
        assert config.username is None

    def test_loads_stored_keys(self, config_file):
        config_file.write_text(json.dumps({
            'IpAddress': '10.0.0.5',
            'DeviceType': 'my-app#laptop',
            'Username': 'abc',
        }))
        config = load_config(config_file)
        assert config.ip_address == '10.0.0.5'
        assert config.device_type == 'my-app#laptop'
        assert config.username == 'abc'

    def test_corrupt_file_warns_and_is_empty(self, config_file, capsys):
        config_file.write_text('{not json')
        config = load_config(config_file)
        assert config.items() == []
        assert 'Failed to load config' in capsys.readouterr().err

    def test_non_mapping_is_ignored(self, config_file, capsys):
        config_file.write_text('["IpAddress"]')
        config = load_config(config_file)
        assert config.items() == []
        assert 'malformed' in capsys.readouterr().err


class TestSave:
    """Test writing configuration files."""

    def test_round_trip_preserves_keys(self, config_file):
        """save(load()) on an untouched configuration reproduces the file contents."""
        stored = {'IpAddress': '192.168.1.2', 'Username': 'abc', 'Extra': 'kept'}
        config_file.write_text(json.dumps(stored))

        assert load_config(config_file).save() is True
        assert json.loads(config_file.read_text()) == stored

    def test_set_then_fresh_load(self, config_file):
        config = load_config(config_file)
        config.ip_address = '192.168.1.2'
        config.save()

        fresh = load_config(config_file)
        assert fresh.ip_address == '192.168.1.2'
        assert fresh.username is None
        assert fresh.device_type is None
        assert 'Username' not in json.loads(config_file.read_text())

    def test_set_none_removes_key(self, config_file):
        config = load_config(config_file)
        config.username = 'abc'
        config.username = None
        config.save()
        assert json.loads(config_file.read_text()) == {}

    def test_set_is_memory_only(self, config_file):
        config = load_config(config_file)
        config.set('IpAddress', '1.2.3.4')
        assert not config_file.exists()

    def test_creates_parent_directory(self, tmp_path):
        path = tmp_path / 'nested' / 'dir' / 'hue.json'
        config = ConfigStore(path)
        config.ip_address = '1.2.3.4'
        assert config.save() is True
        assert path.exists()

    @pytest.mark.skipif(os.name != 'posix', reason="POSIX permissions only")
    def test_file_is_user_only(self, config_file):
        config = load_config(config_file)
        config.username = 'secret'
        config.save()
        assert stat.S_IMODE(config_file.stat().st_mode) == 0o600

    def test_no_temp_files_left_behind(self, config_file):
        config = load_config(config_file)
        config.ip_address = '1.2.3.4'
        config.save()
        assert [p.name for p in config_file.parent.iterdir()] == [config_file.name]

    @patch('core.config.tempfile.mkstemp')
    def test_write_failure_is_reported_not_raised(self, mock_mkstemp, config_file, capsys):
        """Persistence is best effort: errors are printed and save() returns False."""
        mock_mkstemp.side_effect = OSError('disk full')
        config = load_config(config_file)
        config.ip_address = '1.2.3.4'

        assert config.save() is False
        err = capsys.readouterr().err
        assert 'Error writing configuration file' in err
        assert 'disk full' in err
        assert config.ip_address == '1.2.3.4'


class TestRequestTimeout:
    """Test HUE_REQUEST_TIMEOUT handling."""

    def test_unset_means_no_timeout(self):
        assert get_request_timeout() is None

    def test_valid_value(self, monkeypatch):
        monkeypatch.setenv('HUE_REQUEST_TIMEOUT', '2.5')
        assert get_request_timeout() == 2.5

    def test_invalid_value_warns(self, monkeypatch, capsys):
        monkeypatch.setenv('HUE_REQUEST_TIMEOUT', 'soon')
        assert get_request_timeout() is None
        assert 'HUE_REQUEST_TIMEOUT' in capsys.readouterr().err

    def test_non_positive_value(self, monkeypatch):
        monkeypatch.setenv('HUE_REQUEST_TIMEOUT', '0')
        assert get_request_timeout() is None
