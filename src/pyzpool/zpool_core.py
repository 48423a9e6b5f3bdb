# --- START OF FILE zpool_core.py ---

import subprocess
import os
import shlex
import datetime
from typing import List, Dict, Tuple, Optional, Union

from . import constants
from . import config_manager
from .debug_logging import log_debug, log_error, log_warning
from .errors import ZfsError, ZfsCommandError, ZfsParsingError, ZpoolNotFoundError
from .models import Pool, PoolStatus, StatusReport
from .parsers.zpool import ZPoolParser
from .paths import find_executable, DEFAULT_COMMAND_LOG_FILE_PATH

LOG_PREFIX = "ZPOOL_CORE"


def get_zpool_path() -> Optional[str]:
    """Configured `zpool_path`, else the first `zpool` found on the system."""
    configured = config_manager.get_setting("zpool_path")
    if configured:
        return str(configured)
    return find_executable("zpool")


# --- Internal Command Runner ---
def _run_command(command_parts: List[str]) -> Tuple[int, str, str]:
    """
    Runs a command using subprocess and returns (returncode, stdout, stderr).

    Failure to start the process (missing binary, permissions) is reported as
    return code -1 with the OS error text in stderr; it never raises.
    """
    if not command_parts or not command_parts[0]:
        err_msg = "Error: Invalid command parts provided to _run_command."
        log_error(LOG_PREFIX, err_msg)
        return -1, "", err_msg

    try:
        cmd_str_safe = shlex.join(command_parts)
    except TypeError:
        cmd_str_safe = str(command_parts)

    log_debug(LOG_PREFIX, f"Executing: {cmd_str_safe}")

    start_time = datetime.datetime.now()
    stdout, stderr, returncode = "", "", -1

    try:
        process = subprocess.run(
            command_parts,
            stdout=subprocess.PIPE, stderr=subprocess.PIPE,
            text=False,  # Read bytes
            check=False,  # Don't raise exception on non-zero exit
        )
        returncode = process.returncode
        stdout = process.stdout.decode('utf-8', errors='replace') if process.stdout else ""
        stderr = process.stderr.decode('utf-8', errors='replace') if process.stderr else ""

        if returncode != 0:
            log_error(LOG_PREFIX, f"Command failed (ret={returncode}) for: {cmd_str_safe}")
            if stderr.strip():
                log_debug(LOG_PREFIX, f"Stderr:\n{stderr.strip()}")
    except FileNotFoundError:
        stderr = f"Error: Command not found: '{command_parts[0]}'."
        log_error(LOG_PREFIX, stderr)
    except PermissionError:
        stderr = f"Error: Permission denied executing '{command_parts[0]}'."
        log_error(LOG_PREFIX, stderr)
    except OSError as e:
        stderr = f"Error: Could not execute '{command_parts[0]}': {e}"
        log_error(LOG_PREFIX, stderr)
    finally:
        if config_manager.get_bool_setting("command_log_enabled", constants.DEFAULT_COMMAND_LOG_ENABLED):
            _append_command_log(cmd_str_safe, start_time, returncode, stdout, stderr)

    return returncode, stdout, stderr


def _append_command_log(cmd_str: str, start_time: datetime.datetime, returncode: int, stdout: str, stderr: str) -> None:
    """Appends one invocation record to the command audit log."""
    log_path = os.path.expanduser(str(config_manager.get_setting("command_log_file", DEFAULT_COMMAND_LOG_FILE_PATH)))
    duration = datetime.datetime.now() - start_time
    try:
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        with open(log_path, 'a', encoding='utf-8') as log_file:
            log_file.write(f"--- {start_time.strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]} ---\n")
            log_file.write(f"COMMAND: {cmd_str}\n")
            log_file.write(f"RETURN CODE: {returncode}\n")
            log_file.write(f"DURATION: {duration.total_seconds():.3f}s\n")
            if stdout: log_file.write("STDOUT:\n"); log_file.write(stdout.strip() + "\n")
            if stderr: log_file.write("STDERR:\n"); log_file.write(stderr.strip() + "\n")
            log_file.write("\n")
    except OSError as log_e:
        log_warning(LOG_PREFIX, f"Error writing to command log '{log_path}': {log_e}")


# --- Command Builder ---
class CommandBuilder:
    def __init__(self, base_command: str):
        if not base_command:
            raise ValueError("Base command cannot be empty")
        self._parts: List[str] = [base_command]

    def _add_option(self, flag: str, value: Union[str, bool, None]):
        if isinstance(value, bool):
            if value: self._parts.append(flag)
        elif value is not None:
            self._parts.extend([flag, str(value)])
        return self

    def _add_flag(self, flag: str, condition: bool = True):
        if condition:
            self._parts.append(flag)
        return self

    def _add_key_value_option(self, flag: str, key: str, value: str):
        if not key or value is None:
            raise ValueError(f"Invalid property for {flag}: {key!r}={value!r}")
        self._parts.extend([flag, f"{key}={value}"])
        return self

    def _add_args(self, *args: Optional[str]):
        for arg in args:
            if arg is not None:
                self._parts.append(arg)
        return self

    def build(self) -> List[str]:
        return list(self._parts)

    def run(self) -> Tuple[int, str, str]:
        """Builds and runs the command using _run_command."""
        return _run_command(self.build())


class ZpoolCommandBuilder(CommandBuilder):
    def __init__(self, action: str):
        zpool_path = get_zpool_path()
        if not zpool_path: raise ZfsCommandError("zpool command not found.")
        super().__init__(zpool_path)
        self._add_args(action)

    def parsable(self, condition=True): return self._add_flag('-p', condition)  # Exact byte values
    def script(self, condition=True): return self._add_flag('-H', condition)  # No header, tab separated
    def json(self, condition=True): return self._add_flag('--json', condition)
    def output_props(self, props: List[str]): return self._add_option('-o', ','.join(props))
    def props_arg(self, props: List[str]): return self._add_args(','.join(props))  # Positional list for 'get'
    def pool_option(self, key: str, value: str): return self._add_key_value_option('-o', key, value)
    def pool_options(self, options: Optional[Dict[str, str]]):
        for key, value in (options or {}).items():
            self.pool_option(key, value)
        return self
    def fs_option(self, key: str, value: str): return self._add_key_value_option('-O', key, value)
    def fs_options(self, options: Optional[Dict[str, str]]):
        for key, value in (options or {}).items():
            self.fs_option(key, value)
        return self
    def force(self, condition=True): return self._add_flag('-f', condition)
    def dry_run(self, condition=True): return self._add_flag('-n', condition)
    def mountpoint(self, path: Optional[str]): return self._add_option('-m', path)
    def altroot(self, path: Optional[str]): return self._add_option('-R', path)
    def pool(self, name: Optional[str]): return self._add_args(name)
    def args(self, *args: str): return self._add_args(*args)


def _run_checked(builder: ZpoolCommandBuilder, failure_message: str) -> str:
    retcode, stdout, stderr = builder.run()
    if retcode != 0:
        raise ZfsCommandError(failure_message, builder.build(), stderr, retcode)
    return stdout


# --- Core Get Functions ---
def get_pool(name: str) -> Pool:
    """Retrieves a single pool's attributes by name."""
    builder = ZpoolCommandBuilder('get').script().parsable().props_arg(constants.ZPOOL_PROPS).pool(name)
    stdout = _run_checked(builder, f"Failed to get properties for pool '{name}'.")
    rows = ZPoolParser.split_rows(stdout, constants.ZPOOL_GET_COLUMNS, builder.build())
    return ZPoolParser.parse_pool_properties(name, rows, builder.build())


def list_pools() -> List[Pool]:
    """Lists every pool on the system, each fully populated with get_pool."""
    builder = ZpoolCommandBuilder('list').script().output_props(['name'])
    stdout = _run_checked(builder, "Failed to list pools.")
    rows = ZPoolParser.split_rows(stdout, constants.ZPOOL_LIST_COLUMNS, builder.build())
    return [get_pool(row[0]) for row in rows]


def get_status_report(name: Optional[str] = None, exact_bytes: bool = False) -> StatusReport:
    """
    Runs `zpool status --json` and returns the whole envelope.

    Args:
        name: Optional pool name. If None, every pool is reported.
        exact_bytes: Pass -p so space values are exact bytes instead of
            human-rounded units.
    """
    builder = ZpoolCommandBuilder('status').json().parsable(exact_bytes).pool(name)
    target = f"pool '{name}'" if name else "all pools"
    stdout = _run_checked(builder, f"Failed to get status for {target}.")
    return ZPoolParser.parse_status_json(stdout, builder.build(), human_units=not exact_bytes)


def get_pool_status(name: str, exact_bytes: bool = False) -> PoolStatus:
    """Status of a single pool; raises ZpoolNotFoundError if it is not reported."""
    report = get_status_report(name, exact_bytes=exact_bytes)
    status = report.pools.get(name)
    if status is None:
        raise ZpoolNotFoundError(name)
    return status


def list_pool_status(exact_bytes: bool = False) -> Dict[str, PoolStatus]:
    """Status of every pool, keyed by pool name."""
    return get_status_report(None, exact_bytes=exact_bytes).pools


# --- Core Modify Functions ---
def create_pool(name: str, properties: Optional[Dict[str, str]] = None, *args: str,
                force: bool = False, dry_run: bool = False,
                fs_properties: Optional[Dict[str, str]] = None,
                mountpoint: Optional[str] = None, altroot: Optional[str] = None) -> Pool:
    """
    Creates a new pool.

    Properties become `-o key=value` pairs placed before the pool name; `args`
    (vdev specification and any trailing arguments) follow it. The keyword
    options map to `-f`, `-n`, `-O key=value`, `-m` and `-R`, which zpool only
    accepts ahead of the pool name. Only the name of the returned Pool is
    populated; call refresh() for attributes.

    Raises ValueError for a property with an empty key or a None value.

    https://openzfs.github.io/openzfs-docs/man/8/zpool-create.8.html
    """
    builder = (ZpoolCommandBuilder('create').force(force).dry_run(dry_run)
               .pool_options(properties).fs_options(fs_properties)
               .mountpoint(mountpoint).altroot(altroot)
               .pool(name).args(*args))
    _run_checked(builder, f"Failed to create pool '{name}'.")
    return Pool(name=name)


def destroy_pool(name: str) -> None:
    builder = ZpoolCommandBuilder('destroy').pool(name)
    _run_checked(builder, f"Failed to destroy pool '{name}'.")


__all__ = [
    'ZfsError', 'ZfsCommandError', 'ZfsParsingError', 'ZpoolNotFoundError',
    'ZpoolCommandBuilder', 'get_zpool_path',
    'list_pools', 'get_pool', 'create_pool', 'destroy_pool',
    'get_pool_status', 'list_pool_status', 'get_status_report',
]

# --- END OF FILE zpool_core.py ---
