"""
Unified Logging Utility for pyzpool

Provides a centralized logging system that:
- Routes logs to stderr with a module prefix and a level tag
- Filters DEBUG-level messages based on the --debug flag / debug_logging setting
- Always shows WARNING/ERROR/CRITICAL

Usage:
    from pyzpool.debug_logging import log, set_debug_mode

Modules call:
    log("ZPOOL_CORE", "message")                  # INFO level, debug mode only
    log("ZPOOL_CORE", "verbose details", "DEBUG") # Only logged in debug mode
    log("CONFIG", "bad file", "WARNING")          # Always logged
"""

import sys

# Global state
_debug_enabled = False

# Levels that are shown even when debug mode is disabled
ALWAYS_SHOW_LEVELS = ("CRITICAL", "ERROR", "WARNING")


def set_debug_mode(enabled: bool) -> None:
    """Enable or disable debug logging globally."""
    global _debug_enabled
    _debug_enabled = bool(enabled)


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled."""
    return _debug_enabled


def log(prefix: str, message: str, level: str = "INFO") -> None:
    """
    Log a message with the specified level.

    Args:
        prefix: Module prefix (e.g., "ZPOOL_CORE", "PARSER", "CONFIG")
        message: The log message
        level: Log level - DEBUG, INFO, WARNING, ERROR, CRITICAL
               DEBUG and INFO messages are only shown when debug mode is enabled.
    """
    if level not in ALWAYS_SHOW_LEVELS and not _debug_enabled:
        return

    txt = f"{prefix} [{level}]: {message}" if prefix else f"[{level}]: {message}"
    print(txt, file=sys.stderr)


# Convenience aliases for cleaner code
def log_debug(prefix: str, message: str) -> None:
    """Shortcut for DEBUG level logging."""
    log(prefix, message, "DEBUG")

def log_warning(prefix: str, message: str) -> None:
    """Shortcut for WARNING level logging."""
    log(prefix, message, "WARNING")

def log_error(prefix: str, message: str) -> None:
    """Shortcut for ERROR level logging."""
    log(prefix, message, "ERROR")
