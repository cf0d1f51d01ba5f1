import logging
import pytest

from ..core import config_manager
from ..core.config_manager import configure_logging, load_config, merge_config
from ..core.examples import ExampleCatalog
from ..core.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def isolated_user_config(tmp_path, monkeypatch):
    monkeypatch.delenv(config_manager.CONFIG_ENV_VAR, raising=False)
    monkeypatch.setattr(config_manager, "USER_CONFIG_PATH", tmp_path / "absent.yaml")
    monkeypatch.setattr(config_manager, "load_dotenv", lambda: False)


def test_packaged_defaults():
    config = load_config()
    assert config["storage"]["backend"] == "json"
    assert config["examples"]["scratch_name"] == "Scratch"
    assert config["dialog"]["strict"] is True
    assert config["dialog"]["invalid_name_hint"] == "Invalid File Name"


def test_user_file_is_merged(tmp_path):
    user = tmp_path / "user.yaml"
    user.write_text("storage:\n  backend: memory\nexamples:\n  scratch_name: Blank\n", encoding="utf-8")

    config = load_config(str(user))
    assert config["storage"]["backend"] == "memory"
    assert config["storage"]["path"] == "~/.zoneditor/saves.json"
    assert ExampleCatalog.from_config(config).scratch_name == "Blank"


def test_environment_variable_points_to_user_file(tmp_path, monkeypatch):
    user = tmp_path / "env.yaml"
    user.write_text("dialog:\n  strict: false\n", encoding="utf-8")
    monkeypatch.setenv(config_manager.CONFIG_ENV_VAR, str(user))
    assert load_config()["dialog"]["strict"] is False


@pytest.mark.parametrize("content", ["- a list\n- not a mapping\n", "storage: [unclosed\n"])
def test_bad_user_file(tmp_path, content):
    user = tmp_path / "bad.yaml"
    user.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(str(user))


def test_missing_user_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config(str(tmp_path / "nope.yaml"))


def test_merge_config_is_deep_and_copies():
    base = {"a": {"b": 1, "c": 2}}
    merged = merge_config(base, {"a": {"c": 3}})
    assert merged == {"a": {"b": 1, "c": 3}}
    assert base == {"a": {"b": 1, "c": 2}}


def test_configure_logging(tmp_path):
    log_file = tmp_path / "zoneditor.log"
    logger = configure_logging({"logging": {"level": "info", "file": str(log_file)}})
    logger.info("hello from the save store")
    for handler in logger.handlers:
        handler.flush()
    assert logger.level == logging.INFO
    assert "hello from the save store" in log_file.read_text(encoding="utf-8")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ConfigurationError):
        configure_logging({"logging": {"level": "chatty"}})
