from pathlib import Path

import pytest

from idleview.config import DEFAULT_PORT, AppConfig

GOOD_YAML = """
host: 127.0.0.1
port: 9000
settings_path: "${IDLEVIEW_TEST_DIR}/settings.json"
unsplash_access_key: abcdef1234567890
"""

BAD_YAML = """
port: 70000
"""


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("IDLEVIEW_CONFIG", "IDLEVIEW_HOST", "IDLEVIEW_PORT", "UNSPLASH_ACCESS_KEY"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(AppConfig, "DEFAULT_CONFIG_PATHS", [])


def test_valid_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("IDLEVIEW_TEST_DIR", str(tmp_path))
    cfg_file = tmp_path / "good.yaml"
    cfg_file.write_text(GOOD_YAML)

    cfg = AppConfig.load(cfg_file)

    assert cfg.host == "127.0.0.1"
    assert cfg.port == 9000
    assert cfg.resolve_settings_path() == tmp_path / "settings.json"
    assert cfg.unsplash_key_source == "Config"


def test_invalid_config(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yaml"
    cfg_file.write_text(BAD_YAML)
    with pytest.raises(RuntimeError):
        AppConfig.load(cfg_file)


def test_unparseable_yaml(tmp_path: Path) -> None:
    cfg_file = tmp_path / "broken.yaml"
    cfg_file.write_text("port: [unclosed")
    with pytest.raises(RuntimeError):
        AppConfig.load(cfg_file)


def test_missing_explicit_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        AppConfig.load(tmp_path / "nope.yaml")


def test_missing_file_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("IDLEVIEW_CONFIG", str(tmp_path / "nope.yaml"))
    with pytest.raises(FileNotFoundError):
        AppConfig.load()


def test_environment_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("IDLEVIEW_PORT", "8123")
    monkeypatch.setenv("UNSPLASH_ACCESS_KEY", "env-key-1234567")

    cfg = AppConfig.load()

    assert cfg.port == 8123
    assert cfg.host == "0.0.0.0"
    assert cfg.unsplash_access_key == "env-key-1234567"
    assert cfg.unsplash_key_source == "Runtime env"


def test_no_key() -> None:
    cfg = AppConfig.load()
    assert cfg.port == DEFAULT_PORT
    assert cfg.unsplash_key_source == "None"
