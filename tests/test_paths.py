import os

from pyzpool import paths


def test_find_executable_prefers_path(mocker):
    mocker.patch("pyzpool.paths.shutil.which", return_value="/opt/zfs/bin/zpool")
    assert paths.find_executable("zpool") == "/opt/zfs/bin/zpool"


def test_find_executable_falls_back_to_sbin(mocker):
    mocker.patch("pyzpool.paths.shutil.which", return_value=None)
    mocker.patch("pyzpool.paths.platform.system", return_value="Linux")
    mocker.patch("pyzpool.paths.os.path.exists", side_effect=lambda p: p == "/sbin/zpool")
    mocker.patch("pyzpool.paths.os.access", return_value=True)
    assert paths.find_executable("zpool") == "/sbin/zpool"


def test_find_executable_missing(mocker):
    mocker.patch("pyzpool.paths.shutil.which", return_value=None)
    mocker.patch("pyzpool.paths.os.path.exists", return_value=False)
    assert paths.find_executable("zpool") is None


def test_config_path_override(monkeypatch, tmp_path):
    target = tmp_path / "cfg.json"
    monkeypatch.setenv(paths.CONFIG_ENV_VAR, str(target))
    assert paths.get_user_config_file_path() == os.path.expanduser(str(target))
