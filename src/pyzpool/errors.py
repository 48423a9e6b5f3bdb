# --- START OF FILE errors.py ---

import shlex

from . import constants


class ZfsError(Exception):
    """Base class for ZFS related errors."""
    pass

class ZfsCommandError(ZfsError):
    """Custom exception for zpool command execution errors."""
    def __init__(self, message, command_parts=None, stderr=None, returncode=None):
        super().__init__(message)
        self.command_parts = command_parts
        self.stderr = stderr
        self.returncode = returncode

    def __str__(self):
        details = []
        if self.command_parts:
            try: cmd_str = shlex.join(self.command_parts); details.append(f"Command: {cmd_str}")
            except TypeError: details.append(f"Command: {self.command_parts}")
        if self.returncode is not None: details.append(f"Return Code: {self.returncode}")
        if self.stderr:
            stderr_short = self.stderr.strip()
            limit = constants.STDERR_DISPLAY_LIMIT
            if len(stderr_short) > limit: stderr_short = stderr_short[:limit] + "..."
            details.append(f"Stderr: {stderr_short}")
        details_str = " (" + ", ".join(details) + ")" if details else ""
        return f"{super().__str__()}{details_str}"

class ZfsParsingError(ZfsError):
    """Custom exception for errors parsing zpool command output."""
    def __init__(self, message, raw_line=None, command_parts=None):
        super().__init__(message)
        self.raw_line = raw_line
        self.command_parts = command_parts

    def __str__(self):
        details = []
        if self.command_parts:
            try: cmd_str = shlex.join(self.command_parts); details.append(f"Command: {cmd_str}")
            except TypeError: details.append(f"Command: {self.command_parts}")
        if self.raw_line: details.append(f"Problematic Line: '{self.raw_line[:100]}{'...' if len(self.raw_line)>100 else ''}'")
        details_str = " (" + ", ".join(details) + ")" if details else ""
        return f"{super().__str__()}{details_str}"

class ZpoolNotFoundError(ZfsError):
    """Raised when a requested pool is missing from the tool's output."""
    def __init__(self, pool_name, message=None):
        super().__init__(message or f"pool {pool_name} not found in status output")
        self.pool_name = pool_name

# --- END OF FILE errors.py ---
