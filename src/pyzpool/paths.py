# Path configuration module for pyzpool
# This module centralizes all path logic for the library
#
# The config file location can be overridden per process with the
# PYZPOOL_CONFIG environment variable; it is read on every lookup so tests
# and callers can point at a different file without reloading the module.

import os
import platform
import shutil
from pathlib import Path

CONFIG_ENV_VAR = "PYZPOOL_CONFIG"

# User configuration paths (per-user, in home directory)
USER_CONFIG_DIR = Path.home() / ".config" / "pyzpool"
USER_CONFIG_FILE_PATH = str(USER_CONFIG_DIR / "config.json")

# Default command audit log, only written when command_log_enabled is set
DEFAULT_COMMAND_LOG_FILE_PATH = str(USER_CONFIG_DIR / "commands.log")


def get_user_config_file_path() -> str:
    """Return the active config file path, honoring PYZPOOL_CONFIG."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return os.path.expanduser(override)
    return USER_CONFIG_FILE_PATH


def find_executable(name: str) -> str | None:
    """Find an executable by name.

    First tries shutil.which which searches PATH, then falls back to searching
    common platform-specific directories.
    `zpool` usually lives in an sbin directory that is missing from the PATH
    of unprivileged users.

    Args:
        name: Executable base name to find

    Returns:
        Absolute path if found, otherwise None
    """
    path = shutil.which(name)
    if path:
        return path

    system = platform.system()
    if system == 'Linux':
        base_paths = ['/usr/sbin', '/sbin', '/usr/bin', '/bin', '/usr/local/sbin', '/usr/local/bin']
    elif system == 'Darwin':
        base_paths = ['/usr/local/bin', '/usr/local/sbin', '/opt/homebrew/bin', '/opt/homebrew/sbin', '/usr/bin', '/bin', '/sbin']
    elif 'BSD' in system:
        base_paths = ['/sbin', '/usr/sbin', '/usr/local/sbin', '/usr/local/bin', '/usr/bin', '/bin']
    else:
        base_paths = ['/usr/local/bin', '/usr/local/sbin', '/usr/bin', '/bin', '/sbin', '/usr/sbin']

    for p in base_paths:
        candidate = os.path.join(p, name)
        if os.path.exists(candidate) and os.access(candidate, os.X_OK):
            return candidate  # first match wins
    return None


__all__ = [
    'CONFIG_ENV_VAR', 'USER_CONFIG_DIR', 'USER_CONFIG_FILE_PATH',
    'DEFAULT_COMMAND_LOG_FILE_PATH', 'get_user_config_file_path', 'find_executable',
]
