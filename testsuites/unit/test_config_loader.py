import pytest
import yaml
from loguru import logger

from pagewire.common import global_config
from pagewire.common.config_loader import ConfigLoader, ConfigurationError
from pagewire.ui.framework.driver import DEFAULT_TIMEOUT, default_timeout


def test_env_override_and_defaults(monkeypatch, tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        yaml.dump({"restapi": {"base_url": "http://example.com/rest/v2/", "user": "admin"}}),
        encoding="utf-8",
    )

    ConfigLoader.reset()
    loader = ConfigLoader(config_path=config_path)
    assert loader.get("restapi.base_url") == "http://example.com/rest/v2/"
    assert loader.get("restapi.password", "admin") == "admin"

    ConfigLoader.reset()
    monkeypatch.setenv("RESTAPI_BASE_URL", "http://env.example.com/rest/v2/")
    loader = ConfigLoader(config_path=config_path)
    assert loader.get("restapi.base_url") == "http://env.example.com/rest/v2/"


def test_env_values_follow_default_types(monkeypatch, tmp_path):
    ConfigLoader.reset()
    loader = ConfigLoader(config_path=tmp_path / "missing.yaml")

    monkeypatch.setenv("UI_TIMEOUT", "2500")
    monkeypatch.setenv("UI_COMPONENT_PROVIDERS", "a.b:P, c.d:Q")
    monkeypatch.setenv("UI_HEADLESS", "false")

    assert loader.get("ui.timeout", 4000) == 2500
    assert loader.get("ui.component_providers", []) == ["a.b:P", "c.d:Q"]
    assert loader.get("ui.headless", True) is False


def test_config_path_from_environment(monkeypatch, tmp_path):
    config_path = tmp_path / "custom.yaml"
    config_path.write_text(yaml.dump({"ui": {"timeout": 1500}}), encoding="utf-8")
    monkeypatch.setenv("PAGEWIRE_CONFIG", str(config_path))

    ConfigLoader.reset()

    assert ConfigLoader.instance().get("ui.timeout") == 1500
    assert default_timeout() == 1500


def test_default_timeout_without_configuration(tmp_path):
    ConfigLoader.reset()
    ConfigLoader(config_path=tmp_path / "missing.yaml")

    assert default_timeout() == DEFAULT_TIMEOUT


def test_reload_updates_values(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump({"jmx": {"host": "http://a:8778/jolokia/"}}), encoding="utf-8")

    ConfigLoader.reset()
    loader = ConfigLoader(config_path=config_path)
    assert loader.get("jmx.host") == "http://a:8778/jolokia/"
    assert loader.get_section("jmx") == {"host": "http://a:8778/jolokia/"}

    config_path.write_text(yaml.dump({"jmx": {"host": "http://b:8778/jolokia/"}}), encoding="utf-8")
    loader.reload()
    assert loader.get("jmx.host") == "http://b:8778/jolokia/"


def test_invalid_yaml_is_a_configuration_error(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("ui: [unclosed", encoding="utf-8")

    ConfigLoader.reset()
    with pytest.raises(ConfigurationError):
        ConfigLoader(config_path=config_path)


def test_init_logger_writes_configured_file(tmp_path):
    log_file = tmp_path / "logs" / "pagewire.log"
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        yaml.dump({"logging": {"level": "DEBUG", "file": str(log_file)}}),
        encoding="utf-8",
    )
    ConfigLoader.reset()
    config = ConfigLoader(config_path=config_path)

    global_config.reset_logger()
    try:
        global_config.init_logger(config=config)
        logger.bind(component="LoginWindow").info("Login window opened")
        # closing the sinks flushes the file
        logger.remove()

        content = log_file.read_text(encoding="utf-8")
        assert "LoginWindow | Login window opened" in content
        assert global_config.get_logger() is logger
    finally:
        ConfigLoader.reset()
        global_config.reset_logger()
        global_config.init_logger(level="INFO")
