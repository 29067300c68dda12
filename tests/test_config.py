import logging
from pathlib import Path

import pytest
import yaml

from xcode_bump.config import Config, get_config, reset_config
from xcode_bump.exceptions import ConfigError
from xcode_bump.logger import setup_logger


def test_config_default():
    config = Config(Path("nonexistent.yaml"))
    assert config.plist.version_key == "CFBundleShortVersionString"
    assert config.plist.build_key == "CFBundleVersion"
    assert config.project.suffix == ".xcodeproj"
    assert config.project.info_plist_setting == "INFOPLIST_FILE"
    assert config.bump.always_increment_build is True
    assert config.output.color is True
    assert config.logging.file is None


def test_config_override(tmp_path):
    config_file = tmp_path / "config.yaml"
    user_config = {"bump": {"always_increment_build": False}, "logging": {"level": "DEBUG"}}
    with open(config_file, "w") as f:
        yaml.dump(user_config, f)

    config = Config(config_file)
    assert config.bump.always_increment_build is False
    assert config.logging.level == "DEBUG"
    # Default values preserved
    assert config.logging.file is None
    assert config.plist.build_key == "CFBundleVersion"


def test_config_empty_file(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("")
    assert Config(config_file).output.color is True


@pytest.mark.parametrize("content", ["- a\n- b\n", "just a string\n", "42\n"])
def test_config_rejects_non_mapping(tmp_path, content):
    config_file = tmp_path / "config.yaml"
    config_file.write_text(content)
    with pytest.raises(ConfigError) as exc_info:
        Config(config_file)
    assert "must contain a mapping" in str(exc_info.value)


def test_config_none_uses_defaults():
    assert Config(None).plist.version_key == "CFBundleShortVersionString"


def test_setup_logger_survives_invalid_config(tmp_path, monkeypatch):
    (tmp_path / ".xcode-bump.yaml").write_text("- not a mapping\n")
    monkeypatch.chdir(tmp_path)

    logger = setup_logger("xcode_bump.test_invalid_config")

    assert logger.level == logging.WARNING
    logger.handlers.clear()


def test_config_override_does_not_leak_into_defaults(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("plist:\n  version_key: Version\n")
    Config(config_file)
    assert Config.DEFAULT_CONFIG["plist"]["version_key"] == "CFBundleShortVersionString"


def test_config_get():
    config = Config()
    assert config.get("plist.version_key") == "CFBundleShortVersionString"
    assert config.get("nonexistent.key", "default") == "default"
    assert config.get("plist.missing", "default") == "default"


def test_get_config_singleton():
    c1 = get_config()
    c2 = get_config()
    assert c1 is c2
    reset_config()
    assert get_config() is not c1


def test_get_config_reads_working_directory(tmp_path, monkeypatch):
    (tmp_path / ".xcode-bump.yaml").write_text("output:\n  color: false\n")
    monkeypatch.chdir(tmp_path)
    reset_config()
    assert get_config().output.color is False


def test_setup_logger_file_from_config(tmp_path, monkeypatch):
    (tmp_path / ".xcode-bump.yaml").write_text("logging:\n  level: DEBUG\n  file: logs/bump.log\n")
    monkeypatch.chdir(tmp_path)

    logger = setup_logger("xcode_bump.test_file", console_output=False)
    logger.debug("hello")

    assert logger.level == logging.DEBUG
    log_files = list((tmp_path / "logs").glob("bump_*.log"))
    assert len(log_files) == 1
    for handler in logger.handlers:
        handler.close()
    assert "hello" in log_files[0].read_text(encoding="utf-8")
    logger.handlers.clear()


def test_setup_logger_without_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    logger = setup_logger("xcode_bump.test_console")
    assert [type(h) for h in logger.handlers] == [logging.StreamHandler]
    assert logger.level == logging.WARNING
    assert not (tmp_path / "logs").exists()
    logger.handlers.clear()
