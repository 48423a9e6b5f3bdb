# --- START OF FILE models.py ---

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Any

from . import constants
from . import utils


@dataclass
class Pool:
    """A ZFS pool as reported by `zpool get` at call time."""
    name: str
    health: str = ""
    allocated: int = 0  # bytes
    size: int = 0  # bytes
    free: int = 0  # bytes
    fragmentation: int = 0  # percent
    readonly: bool = False
    freeing: int = 0  # bytes
    leaked: int = 0  # bytes
    dedupratio: float = 0.0

    @property
    def capacity(self) -> float:
        """Allocated space as a percentage of pool size."""
        if self.size <= 0:
            return 0.0
        return (self.allocated / self.size) * 100

    @property
    def is_healthy(self) -> bool:
        return self.health == constants.ZPOOL_ONLINE

    def refresh(self) -> 'Pool':
        """Re-query the pool; returns a new, fully populated Pool."""
        from . import zpool_core
        return zpool_core.get_pool(self.name)

    def status(self, exact_bytes: bool = False) -> 'PoolStatus':
        from . import zpool_core
        return zpool_core.get_pool_status(self.name, exact_bytes=exact_bytes)

    def destroy(self) -> None:
        from . import zpool_core
        zpool_core.destroy_pool(self.name)


@dataclass
class Vdev:
    """A node of the vdev tree reported by `zpool status --json`."""
    name: str
    vdev_type: str = ""
    guid: str = ""
    vdev_class: str = ""
    state: str = ""
    path: Optional[str] = None
    phys_path: Optional[str] = None
    devid: Optional[str] = None
    alloc_space: Optional[str] = None
    total_space: Optional[str] = None
    def_space: Optional[str] = None
    rep_dev_size: Optional[str] = None
    phys_space: Optional[str] = None
    # Raw counters, as reported
    read_errors: str = ""
    write_errors: str = ""
    checksum_errors: str = ""
    slow_ios: str = ""
    # Parsed counters
    read_errs: int = 0
    write_errs: int = 0
    cksum_errs: int = 0
    slow_io_count: int = 0

    # Children keyed by device name, in reported order
    vdevs: Dict[str, 'Vdev'] = field(default_factory=dict, repr=False)

    @property
    def children(self) -> List['Vdev']:
        return list(self.vdevs.values())

    @property
    def is_leaf(self) -> bool:
        return not self.vdevs

    @property
    def total_errors(self) -> int:
        return self.read_errs + self.write_errs + self.cksum_errs

    @property
    def alloc_bytes(self) -> int:
        return utils.parse_size(self.alloc_space)

    @property
    def total_bytes(self) -> int:
        return utils.parse_size(self.total_space)

    def walk(self) -> Iterator['Vdev']:
        """Yield this vdev and all of its descendants, depth-first."""
        yield self
        for child in self.vdevs.values():
            yield from child.walk()

    def find(self, name: str) -> Optional['Vdev']:
        for vdev in self.walk():
            if vdev.name == name:
                return vdev
        return None


@dataclass
class PoolStatus:
    """Status of a single pool from `zpool status --json`."""
    name: str
    state: str = ""
    pool_guid: str = ""
    txg: str = ""
    spa_version: str = ""
    zpl_version: str = ""
    vdevs: Dict[str, Vdev] = field(default_factory=dict, repr=False)
    error_count: int = 0
    error_count_raw: str = ""
    # Only present when the pool needs attention
    status: Optional[str] = None
    action: Optional[str] = None
    see: Optional[str] = None
    scan_stats: Optional[Dict[str, Any]] = field(default=None, repr=False)

    @property
    def config(self) -> Optional[Vdev]:
        """The root vdev, keyed by the pool name."""
        return self.vdevs.get(self.name)

    @property
    def errors(self) -> str:
        if self.error_count == 0:
            return constants.NO_KNOWN_DATA_ERRORS
        return f"{self.error_count} data errors"

    def walk_vdevs(self) -> Iterator[Vdev]:
        for vdev in self.vdevs.values():
            yield from vdev.walk()


@dataclass
class OutputVersion:
    command: str = ""
    vers_major: int = 0
    vers_minor: int = 0


@dataclass
class StatusReport:
    """The whole `zpool status --json` envelope."""
    output_version: OutputVersion = field(default_factory=OutputVersion)
    pools: Dict[str, PoolStatus] = field(default_factory=dict)

# --- END OF FILE models.py ---
