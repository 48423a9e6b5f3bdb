import json

from pyzpool import config_manager
from pyzpool.paths import get_user_config_file_path, USER_CONFIG_FILE_PATH


def test_env_var_selects_config_file(isolated_config):
    assert get_user_config_file_path() == str(isolated_config)


def test_default_path_without_env(monkeypatch):
    monkeypatch.delenv("PYZPOOL_CONFIG", raising=False)
    assert get_user_config_file_path() == USER_CONFIG_FILE_PATH


def test_get_setting_reads_file(isolated_config):
    assert config_manager.get_setting("zpool_path") == "zpool"
    assert config_manager.get_setting("missing", "fallback") == "fallback"


def test_missing_file_gives_defaults(isolated_config):
    isolated_config.unlink()
    config_manager.reset_cache()
    assert config_manager.load_config() == {}
    assert config_manager.get_setting("zpool_path") is None


def test_malformed_file_warns_and_uses_defaults(isolated_config, capsys):
    isolated_config.write_text("{not json")
    assert config_manager.load_config() == {}
    assert "CONFIG [WARNING]" in capsys.readouterr().err


def test_non_object_file(isolated_config):
    isolated_config.write_text("[1, 2]")
    assert config_manager.load_config() == {}


def test_set_setting_persists(isolated_config):
    config_manager.set_setting("debug_logging", True)
    assert json.loads(isolated_config.read_text()) == {"zpool_path": "zpool", "debug_logging": True}
    config_manager.reset_cache()
    assert config_manager.get_bool_setting("debug_logging") is True


def test_bool_setting_spellings(isolated_config):
    isolated_config.write_text(json.dumps({"a": "yes", "b": "off", "c": 1, "d": None}))
    config_manager.reset_cache()
    assert config_manager.get_bool_setting("a") is True
    assert config_manager.get_bool_setting("b") is False
    assert config_manager.get_bool_setting("c") is True
    assert config_manager.get_bool_setting("d", True) is True
