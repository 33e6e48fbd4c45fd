"""Tests for the config manager (load_config + env overrides)."""

import json

import pytest
from pydantic import ValidationError

from bookie_address.config.config_manager import load_config
from bookie_address.core.errors import InvalidConfiguration
from bookie_address.core.models.config import DEFAULT_BOOKIE_PORT, BookieConfig


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "bookie_config.json"
    path.write_text(json.dumps({"address": {}, "system": {}}))
    return path


class TestLoadConfig:
    def test_load_default_config(self):
        """The packaged bookie_config.json should load without errors."""
        cfg = load_config()
        assert isinstance(cfg, BookieConfig)
        assert cfg.address.advertised_address is None
        assert cfg.address.allow_loopback is False
        assert cfg.address.port == DEFAULT_BOOKIE_PORT == 3181

    def test_load_custom_config(self, tmp_path):
        path = tmp_path / "custom.json"
        path.write_text(
            json.dumps(
                {
                    "address": {
                        "advertised_address": "bookie-1.example.com",
                        "use_hostname_as_identity": True,
                        "service_selector": "eth0",
                    },
                    "system": {"log_level": "DEBUG"},
                }
            )
        )
        cfg = load_config(path)
        assert cfg.address.advertised_address == "bookie-1.example.com"
        assert cfg.address.use_hostname_as_identity is True
        assert cfg.address.service_selector == "eth0"
        assert cfg.system.log_level == "DEBUG"

    def test_config_file_env_var(self, config_file, monkeypatch):
        config_file.write_text(json.dumps({"address": {"port": 4000}}))
        monkeypatch.setenv("BOOKIE_CONFIG_FILE", str(config_file))
        assert load_config().address.port == 4000

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nonexistent.json")

    def test_invalid_address_raises(self, config_file):
        config_file.write_text(json.dumps({"address": {"advertised_address": "no such host!"}}))
        with pytest.raises(ValidationError):
            load_config(config_file)

    def test_malformed_json(self, config_file):
        config_file.write_text("{\"address\": ")
        with pytest.raises(InvalidConfiguration) as excinfo:
            load_config(config_file)
        assert excinfo.value.source == str(config_file)

    def test_top_level_must_be_object(self, config_file):
        config_file.write_text("[]")
        with pytest.raises(InvalidConfiguration, match="JSON object"):
            load_config(config_file)


class TestEnvOverrides:
    def test_advertised_address(self, config_file, monkeypatch):
        monkeypatch.setenv("BOOKIE_ADVERTISED_ADDRESS", "10.0.0.7")
        assert load_config(config_file).address.advertised_address == "10.0.0.7"

    def test_blank_advertised_address_means_auto(self, config_file, monkeypatch):
        config_file.write_text(json.dumps({"address": {"advertised_address": "10.0.0.7"}}))
        monkeypatch.setenv("BOOKIE_ADVERTISED_ADDRESS", "")
        assert load_config(config_file).address.advertised_address is None

    @pytest.mark.parametrize("raw, expected", [("1", True), ("yes", True), ("TRUE", True), ("0", False)])
    def test_allow_loopback(self, config_file, monkeypatch, raw, expected):
        monkeypatch.setenv("BOOKIE_ALLOW_LOOPBACK", raw)
        assert load_config(config_file).address.allow_loopback is expected

    def test_hostname_flags(self, config_file, monkeypatch):
        monkeypatch.setenv("BOOKIE_USE_HOSTNAME_AS_IDENTITY", "true")
        monkeypatch.setenv("BOOKIE_USE_SHORT_HOSTNAME", "1")
        cfg = load_config(config_file)
        assert cfg.address.use_hostname_as_identity is True
        assert cfg.address.use_short_hostname is True

    def test_selector_and_port(self, config_file, monkeypatch):
        monkeypatch.setenv("BOOKIE_SERVICE_SELECTOR", "bond0")
        monkeypatch.setenv("BOOKIE_PORT", "3182")
        cfg = load_config(config_file)
        assert cfg.address.service_selector == "bond0"
        assert cfg.address.port == 3182

    def test_log_level(self, config_file, monkeypatch):
        monkeypatch.setenv("BOOKIE_LOG_LEVEL", "DEBUG")
        assert load_config(config_file).system.log_level == "DEBUG"

    @pytest.mark.parametrize("raw", ["flase", "enabled", ""])
    def test_unrecognised_boolean_rejected(self, config_file, monkeypatch, raw):
        monkeypatch.setenv("BOOKIE_ALLOW_LOOPBACK", raw)
        with pytest.raises(InvalidConfiguration) as excinfo:
            load_config(config_file)
        assert excinfo.value.source == "BOOKIE_ALLOW_LOOPBACK"

    @pytest.mark.parametrize("raw", ["31x1", "0", "70000"])
    def test_invalid_port_names_variable(self, config_file, monkeypatch, raw):
        monkeypatch.setenv("BOOKIE_PORT", raw)
        with pytest.raises(InvalidConfiguration, match="BOOKIE_PORT") as excinfo:
            load_config(config_file)
        assert excinfo.value.source == "BOOKIE_PORT"
        assert isinstance(excinfo.value, ValueError)

    def test_invalid_advertised_address_names_variable(self, config_file, monkeypatch):
        monkeypatch.setenv("BOOKIE_ADVERTISED_ADDRESS", "127.1")
        with pytest.raises(InvalidConfiguration) as excinfo:
            load_config(config_file)
        assert excinfo.value.source == "BOOKIE_ADVERTISED_ADDRESS"

    def test_invalid_log_level_names_variable(self, config_file, monkeypatch):
        monkeypatch.setenv("BOOKIE_LOG_LEVEL", "chatty")
        with pytest.raises(InvalidConfiguration, match="BOOKIE_LOG_LEVEL"):
            load_config(config_file)

    def test_file_errors_stay_validation_errors(self, config_file, monkeypatch):
        config_file.write_text(json.dumps({"address": {"port": "abc"}}))
        monkeypatch.setenv("BOOKIE_LOG_LEVEL", "DEBUG")
        with pytest.raises(ValidationError):
            load_config(config_file)
