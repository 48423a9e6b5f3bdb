"""
pyzpool: a thin binding over the `zpool` command-line utility.

Every call runs one `zpool` process, waits for it, and parses its output.
"""

from .version import __version__
from .constants import (
    ZPOOL_ONLINE, ZPOOL_DEGRADED, ZPOOL_FAULTED,
    ZPOOL_OFFLINE, ZPOOL_UNAVAIL, ZPOOL_REMOVED, ZPOOL_HEALTH_STATES,
)
from .errors import ZfsError, ZfsCommandError, ZfsParsingError, ZpoolNotFoundError
from .models import Pool, Vdev, PoolStatus, OutputVersion, StatusReport
from .parsers.zpool import parse_error_count
from .zpool_core import (
    list_pools, get_pool, create_pool, destroy_pool,
    get_pool_status, list_pool_status, get_status_report,
)

__all__ = [
    '__version__',
    'ZPOOL_ONLINE', 'ZPOOL_DEGRADED', 'ZPOOL_FAULTED',
    'ZPOOL_OFFLINE', 'ZPOOL_UNAVAIL', 'ZPOOL_REMOVED', 'ZPOOL_HEALTH_STATES',
    'ZfsError', 'ZfsCommandError', 'ZfsParsingError', 'ZpoolNotFoundError',
    'Pool', 'Vdev', 'PoolStatus', 'OutputVersion', 'StatusReport',
    'parse_error_count',
    'list_pools', 'get_pool', 'create_pool', 'destroy_pool',
    'get_pool_status', 'list_pool_status', 'get_status_report',
]
