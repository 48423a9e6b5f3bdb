import json

import pytest

from pyzpool import debug_logging
from pyzpool.main import main
from pyzpool.version import __version__


def test_status_prints_json(fake_zpool, status_payload, capsys):
    fake_zpool.respond(["zpool", "status", "--json", "-p", "tank"], json.dumps(status_payload))
    assert main(["status", "tank", "--exact"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["name"] == "tank"
    assert list(out["vdevs"]["tank"]["vdevs"]) == ["mirror-0"]


def test_status_all(fake_zpool, status_payload, capsys):
    fake_zpool.respond(["zpool", "status", "--json"], json.dumps(status_payload))
    assert main(["status"]) == 0
    assert sorted(json.loads(capsys.readouterr().out)) == ["backup", "tank"]


def test_create_passes_properties(fake_zpool, capsys):
    fake_zpool.respond(["zpool", "create"], "")
    assert main(["create", "-o", "ashift=12", "tank", "mirror", "/dev/sda", "/dev/sdb"]) == 0
    assert fake_zpool.calls == [["zpool", "create", "-o", "ashift=12", "tank", "mirror", "/dev/sda", "/dev/sdb"]]
    assert json.loads(capsys.readouterr().out)["name"] == "tank"


def test_create_rejects_bad_property():
    with pytest.raises(SystemExit):
        main(["create", "-o", "ashift", "tank", "/dev/sda"])


def test_errors_exit_nonzero(fake_zpool, capsys):
    fake_zpool.respond(["zpool", "destroy", "tank"], "", returncode=1, stderr="cannot destroy 'tank': pool is busy")
    assert main(["destroy", "tank"]) == 1
    assert "MAIN [ERROR]: Failed to destroy pool 'tank'." in capsys.readouterr().err


def test_debug_flag(fake_zpool):
    fake_zpool.respond(["zpool", "list"], "")
    assert main(["--debug", "list"]) == 0
    assert debug_logging.is_debug_enabled()


def test_create_accepts_leading_flags(fake_zpool):
    fake_zpool.respond(["zpool", "create"], "")
    assert main(["create", "-f", "-O", "compression=lz4", "-m", "none", "tank", "/dev/sda"]) == 0
    assert fake_zpool.calls == [["zpool", "create", "-f", "-O", "compression=lz4", "-m", "none", "tank", "/dev/sda"]]


def test_version_flag(capsys):
    with pytest.raises(SystemExit):
        main(["--version"])
    assert capsys.readouterr().out.strip() == f"pyzpool {__version__}"
