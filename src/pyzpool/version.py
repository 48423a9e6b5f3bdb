# --- START OF FILE src/pyzpool/version.py ---
"""
Single source of truth for pyzpool version and package information.
All other components should import from this module.
"""

__version__ = "0.3.0"
__app_name__ = "pyzpool"

# --- END OF FILE src/pyzpool/version.py ---
