# --- START OF FILE config_manager.py ---

import json
import os

from .debug_logging import log_warning, log_error
from .paths import get_user_config_file_path


def load_config() -> dict:
    """Loads the configuration from the JSON file."""
    config_path = get_user_config_file_path()
    if os.path.exists(config_path):
        try:
            with open(config_path, 'r') as f:
                config = json.load(f)
                if isinstance(config, dict):
                    return config
                else:
                    log_warning("CONFIG", f"Config file '{config_path}' does not contain a valid JSON object. Using defaults.")
                    return {}
        except (json.JSONDecodeError, IOError) as e:
            log_warning("CONFIG", f"Error loading config file '{config_path}': {e}. Using defaults.")
            return {}
    return {}  # Return empty dict if file doesn't exist

def save_config(config: dict):
    """Saves the configuration dictionary to the JSON file."""
    config_path = get_user_config_file_path()
    config_dir = os.path.dirname(config_path)
    try:
        if config_dir:
            os.makedirs(config_dir, exist_ok=True)
        with open(config_path, 'w') as f:
            json.dump(config, f, indent=4)
    except IOError as e:
        log_error("CONFIG", f"Error saving config file '{config_path}': {e}")
        raise

# --- Setting accessors with defaults ---
_config_cache = None

def _get_cached_config() -> dict:
    """Internal helper to load config only once."""
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache

def get_setting(key: str, default=None):
    """Gets a specific setting from the config, returning a default if not found."""
    return _get_cached_config().get(key, default)

def get_bool_setting(key: str, default: bool = False) -> bool:
    """Gets a boolean setting; accepts JSON booleans and the usual string spellings."""
    value = get_setting(key, default)
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in ('1', 'true', 'yes', 'on')
    if isinstance(value, int):
        return value != 0
    return default

def set_setting(key: str, value):
    """Sets a specific setting and saves the entire config."""
    global _config_cache
    config = dict(_get_cached_config())
    config[key] = value
    save_config(config)
    _config_cache = config

def reset_cache():
    """Drop the cached config so the next access re-reads the file."""
    global _config_cache
    _config_cache = None

# --- END OF FILE config_manager.py ---
