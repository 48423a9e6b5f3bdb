# --- START OF FILE parsers/zpool.py ---
"""
Parsers for `zpool` command outputs (get/list columnar output, status JSON).
JSON status output needs OpenZFS >= 2.3.
"""

import json
import re
from typing import Dict, Any, Optional, List, Union

from .. import utils
from ..debug_logging import log_debug
from ..errors import ZfsParsingError
from ..models import Pool, Vdev, PoolStatus, OutputVersion, StatusReport

_UINT_RE = re.compile(r'[0-9]+')
# nicenum form printed without -p, e.g. "1.21K"
_NICENUM_RE = re.compile(r'[0-9]+(\.[0-9]+)?[KMGTPEZ]')


def parse_error_count(value: Union[str, int, None], human_units: bool = False) -> int:
    """
    Converts an error counter reported by `zpool status --json` to an int.

    Empty strings and "-" mean zero. Without `-p` the tool rounds counters of
    1024 and above to 1024-based units ("1.21K"); pass human_units=True to
    accept that form. Raises ValueError for anything else that is not an
    unsigned decimal integer.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        raise ValueError(f"Invalid error count: {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"Invalid error count: {value!r}")
        return value
    text = str(value).strip()
    if text in ('', '-'):
        return 0
    if _UINT_RE.fullmatch(text):
        return int(text)
    if human_units and _NICENUM_RE.fullmatch(text):
        return utils.parse_size(text)
    raise ValueError(f"Invalid error count: {value!r}")


class ZPoolParser:
    """Parses output from various `zpool` commands."""

    # --- Columnar output (-H) ---

    @staticmethod
    def split_rows(raw_output: str, expected_columns: int, command_parts: Optional[List[str]] = None) -> List[List[str]]:
        """
        Splits `-H` output into rows of tab separated fields.

        Blank lines are skipped. Raises ZfsParsingError when a row does not have
        exactly `expected_columns` fields.
        """
        rows = []
        for line_num, line in enumerate(raw_output.splitlines(), 1):
            if not line.strip():
                continue
            values = line.split('\t')
            if len(values) != expected_columns:
                raise ZfsParsingError(
                    f"Mismatched columns on output line {line_num}. Expected {expected_columns}, got {len(values)}.",
                    line, command_parts)
            rows.append(values)
        return rows

    @staticmethod
    def _parse_uint(prop: str, value: str, line: str, command_parts: Optional[List[str]]) -> int:
        # Human output appends '%' to fragmentation
        text = value.strip().rstrip('%')
        if text in ('', '-'):
            return 0
        if not _UINT_RE.fullmatch(text):
            raise ZfsParsingError(f"Invalid integer value '{value}' for property '{prop}'.", line, command_parts)
        return int(text)

    @staticmethod
    def _parse_ratio(prop: str, value: str, line: str, command_parts: Optional[List[str]]) -> float:
        # '1.00x' without -p, '1.00' with it
        text = value.strip()
        if text.endswith('x'):
            text = text[:-1]
        if text in ('', '-'):
            return 0.0
        try:
            return float(text)
        except ValueError:
            raise ZfsParsingError(f"Invalid ratio value '{value}' for property '{prop}'.", line, command_parts)

    @classmethod
    def parse_pool_properties(cls, name: str, rows: List[List[str]], command_parts: Optional[List[str]] = None) -> Pool:
        """
        Builds a Pool from `zpool get -Hp <props> <name>` rows.

        Each row is [pool, property, value, source]. Unknown properties are ignored.
        """
        pool = Pool(name=name)
        for row in rows:
            line = '\t'.join(row)
            prop, value = row[1], row[2]
            if prop == 'name':
                pool.name = value
            elif prop == 'health':
                pool.health = value
            elif prop in ('allocated', 'size', 'free', 'fragmentation', 'freeing', 'leaked'):
                setattr(pool, prop, cls._parse_uint(prop, value, line, command_parts))
            elif prop == 'readonly':
                pool.readonly = value == 'on'
            elif prop == 'dedupratio':
                pool.dedupratio = cls._parse_ratio(prop, value, line, command_parts)
        return pool

    # --- Status JSON (--json) ---

    @classmethod
    def parse_status_json(cls, raw_output: str, command_parts: Optional[List[str]] = None, human_units: bool = False) -> StatusReport:
        """
        Parses the JSON output of `zpool status --json [-p] [pool_name]`.

        Expected envelope:
            {
                "output_version": {"command": str, "vers_major": int, "vers_minor": int},
                "pools": {
                    "<pool_name>": {
                        "name": str, "state": str, "pool_guid": str, "txg": str,
                        "spa_version": str, "zpl_version": str, "error_count": str,
                        "vdevs": {"<pool_name>": {... "vdevs": {...}}}
                    }
                }
            }

        human_units must be True for output produced without -p, where counters
        may be rounded ("1.21K").

        Raises ZfsParsingError on invalid JSON or an unexpected shape.
        """
        try:
            raw_json = json.loads(raw_output)
        except json.JSONDecodeError as e:
            raise ZfsParsingError(f"Invalid JSON in zpool status output: {e}", raw_output, command_parts) from e

        if not isinstance(raw_json, dict):
            raise ZfsParsingError("zpool status output is not a JSON object.", raw_output, command_parts)

        report = StatusReport(output_version=cls._parse_output_version(raw_json.get("output_version"), command_parts))

        pools_data = raw_json.get("pools")
        if pools_data is None:
            pools_data = {}
        if not isinstance(pools_data, dict):
            raise ZfsParsingError("'pools' in zpool status output is not an object.", None, command_parts)

        for pname, pool_info in pools_data.items():
            report.pools[pname] = cls.parse_pool_status(pname, pool_info, command_parts, human_units)

        log_debug("PARSER", f"Parsed status for {len(report.pools)} pool(s)")
        return report

    @staticmethod
    def _parse_output_version(data: Any, command_parts: Optional[List[str]]) -> OutputVersion:
        if data is None:
            return OutputVersion()
        if not isinstance(data, dict):
            raise ZfsParsingError("'output_version' in zpool status output is not an object.", None, command_parts)
        try:
            return OutputVersion(
                command=str(data.get("command", "")),
                vers_major=int(data.get("vers_major", 0)),
                vers_minor=int(data.get("vers_minor", 0)),
            )
        except (TypeError, ValueError) as e:
            raise ZfsParsingError(f"Invalid output_version: {e}", None, command_parts) from e

    @classmethod
    def parse_pool_status(cls, pool_name: str, pool_info: Any, command_parts: Optional[List[str]] = None, human_units: bool = False) -> PoolStatus:
        if not isinstance(pool_info, dict):
            raise ZfsParsingError(f"Status entry for pool '{pool_name}' is not an object.", None, command_parts)

        error_count_raw = _text(pool_info, "error_count")
        try:
            error_count = parse_error_count(pool_info.get("error_count"), human_units)
        except ValueError as e:
            raise ZfsParsingError(f"Pool '{pool_name}': {e}", None, command_parts) from e

        scan_stats = pool_info.get("scan_stats")
        return PoolStatus(
            name=_text(pool_info, "name") or pool_name,
            state=_text(pool_info, "state"),
            pool_guid=_text(pool_info, "pool_guid"),
            txg=_text(pool_info, "txg"),
            spa_version=_text(pool_info, "spa_version"),
            zpl_version=_text(pool_info, "zpl_version"),
            vdevs=cls._parse_vdev_map(pool_info.get("vdevs"), pool_name, command_parts, human_units),
            error_count=error_count,
            error_count_raw=error_count_raw,
            status=_optional_text(pool_info, "status"),
            action=_optional_text(pool_info, "action"),
            see=_optional_text(pool_info, "moreinfo"),
            scan_stats=scan_stats if isinstance(scan_stats, dict) else None,
        )

    @classmethod
    def _parse_vdev_map(cls, vdevs_dict: Any, owner: str, command_parts: Optional[List[str]], human_units: bool = False) -> Dict[str, Vdev]:
        if vdevs_dict is None:
            return {}
        if not isinstance(vdevs_dict, dict):
            raise ZfsParsingError(f"'vdevs' under '{owner}' is not an object.", None, command_parts)
        return {key: cls.parse_vdev(key, value, command_parts, human_units) for key, value in vdevs_dict.items()}

    @classmethod
    def parse_vdev(cls, key: str, vdev_data: Any, command_parts: Optional[List[str]] = None, human_units: bool = False) -> Vdev:
        """
        Parses a single vdev entry and its children recursively.

        Args:
            key: The key this vdev was found under in its parent's 'vdevs' map.
            vdev_data: A dictionary representing a single VDEV node.
        """
        if not isinstance(vdev_data, dict):
            raise ZfsParsingError(f"Vdev '{key}' is not an object.", None, command_parts)

        name = _text(vdev_data, "name") or key
        try:
            counters = {
                "read_errs": parse_error_count(vdev_data.get("read_errors"), human_units),
                "write_errs": parse_error_count(vdev_data.get("write_errors"), human_units),
                "cksum_errs": parse_error_count(vdev_data.get("checksum_errors"), human_units),
                "slow_io_count": parse_error_count(vdev_data.get("slow_ios"), human_units),
            }
        except ValueError as e:
            raise ZfsParsingError(f"Vdev '{name}': {e}", None, command_parts) from e

        return Vdev(
            name=name,
            vdev_type=_text(vdev_data, "vdev_type"),
            guid=_text(vdev_data, "guid"),
            vdev_class=_text(vdev_data, "class"),
            state=_text(vdev_data, "state"),
            path=_optional_text(vdev_data, "path"),
            phys_path=_optional_text(vdev_data, "phys_path"),
            devid=_optional_text(vdev_data, "devid"),
            alloc_space=_optional_text(vdev_data, "alloc_space"),
            total_space=_optional_text(vdev_data, "total_space"),
            def_space=_optional_text(vdev_data, "def_space"),
            rep_dev_size=_optional_text(vdev_data, "rep_dev_size"),
            phys_space=_optional_text(vdev_data, "phys_space"),
            read_errors=_text(vdev_data, "read_errors"),
            write_errors=_text(vdev_data, "write_errors"),
            checksum_errors=_text(vdev_data, "checksum_errors"),
            slow_ios=_text(vdev_data, "slow_ios"),
            vdevs=cls._parse_vdev_map(vdev_data.get("vdevs"), name, command_parts, human_units),
            **counters,
        )


def _text(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


def _optional_text(data: Dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    return None if value is None else str(value)

# --- END OF FILE parsers/zpool.py ---
