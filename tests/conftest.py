import json
import subprocess

import pytest

from pyzpool import config_manager
from pyzpool import debug_logging


STATUS_JSON = {
    "output_version": {"command": "zpool status", "vers_major": 0, "vers_minor": 1},
    "pools": {
        "tank": {
            "name": "tank",
            "state": "ONLINE",
            "pool_guid": "9474378264325634201",
            "txg": "1234",
            "spa_version": "5000",
            "zpl_version": "5",
            "vdevs": {
                "tank": {
                    "name": "tank",
                    "vdev_type": "root",
                    "guid": "9474378264325634201",
                    "class": "normal",
                    "state": "ONLINE",
                    "alloc_space": "1.50G",
                    "total_space": "9.50G",
                    "def_space": "9.50G",
                    "read_errors": "0",
                    "write_errors": "0",
                    "checksum_errors": "0",
                    "vdevs": {
                        "mirror-0": {
                            "name": "mirror-0",
                            "vdev_type": "mirror",
                            "guid": "1111",
                            "class": "normal",
                            "state": "ONLINE",
                            "read_errors": "0",
                            "write_errors": "0",
                            "checksum_errors": "0",
                            "vdevs": {
                                "sda": {
                                    "name": "sda",
                                    "vdev_type": "disk",
                                    "guid": "2222",
                                    "path": "/dev/sda1",
                                    "phys_path": "pci-0000:00:10.0-scsi-0:0:0:0",
                                    "devid": "scsi-0QEMU_QEMU_HARDDISK_drive0-part1",
                                    "class": "normal",
                                    "state": "ONLINE",
                                    "read_errors": "0",
                                    "write_errors": "0",
                                    "checksum_errors": "0",
                                    "slow_ios": "0",
                                },
                                "sdb": {
                                    "name": "sdb",
                                    "vdev_type": "disk",
                                    "guid": "3333",
                                    "path": "/dev/sdb1",
                                    "class": "normal",
                                    "state": "ONLINE",
                                    "read_errors": "2",
                                    "write_errors": "-",
                                    "checksum_errors": "5",
                                    "slow_ios": "",
                                },
                            },
                        },
                    },
                },
            },
            "error_count": "0",
        },
        "backup": {
            "name": "backup",
            "state": "DEGRADED",
            "pool_guid": "42",
            "txg": "77",
            "spa_version": "5000",
            "zpl_version": "5",
            "status": "One or more devices could not be used.",
            "action": "Attach the missing device and online it.",
            "moreinfo": "https://openzfs.github.io/openzfs-docs/msg/ZFS-8000-2Q",
            "scan_stats": {"function": "SCRUB", "state": "FINISHED"},
            "vdevs": {
                "backup": {
                    "name": "backup",
                    "vdev_type": "root",
                    "guid": "42",
                    "state": "DEGRADED",
                    "read_errors": "0",
                    "write_errors": "0",
                    "checksum_errors": "0",
                    "vdevs": {
                        "sdc": {
                            "name": "sdc",
                            "vdev_type": "disk",
                            "guid": "4444",
                            "state": "UNAVAIL",
                            "read_errors": "0",
                            "write_errors": "0",
                            "checksum_errors": "0",
                        },
                    },
                },
            },
            "error_count": "3",
        },
    },
}


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config at a temp file that pins the zpool binary name."""
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"zpool_path": "zpool"}))
    monkeypatch.setenv("PYZPOOL_CONFIG", str(config_path))
    config_manager.reset_cache()
    debug_logging.set_debug_mode(False)
    yield config_path
    config_manager.reset_cache()
    debug_logging.set_debug_mode(False)


@pytest.fixture
def status_payload():
    return json.loads(json.dumps(STATUS_JSON))


@pytest.fixture
def fake_zpool(mocker):
    """
    Patches subprocess.run in zpool_core. Register responses with
    ``fake_zpool.respond(argv_prefix, stdout, returncode=0, stderr="")``;
    the longest matching argv prefix wins.
    """
    class FakeZpool:
        def __init__(self):
            self.responses = []
            self.calls = []

        def respond(self, argv, stdout="", returncode=0, stderr=""):
            self.responses.append((list(argv), stdout, returncode, stderr))

        def __call__(self, command_parts, **kwargs):
            self.calls.append(list(command_parts))
            best = None
            for argv, stdout, returncode, stderr in self.responses:
                if command_parts[:len(argv)] == argv and (best is None or len(argv) > len(best[0])):
                    best = (argv, stdout, returncode, stderr)
            if best is None:
                return subprocess.CompletedProcess(command_parts, 1, b"", b"unexpected command")
            _, stdout, returncode, stderr = best
            return subprocess.CompletedProcess(command_parts, returncode, stdout.encode(), stderr.encode())

    fake = FakeZpool()
    mocker.patch("pyzpool.zpool_core.subprocess.run", side_effect=fake)
    return fake
