"""Settings for the layerconf library itself.

Values come from ``LAYERCONF_`` environment variables, an optional
explicitly passed .env file, and defaults.
"""

from layerconf.settings.app import (
    LayerconfSettings,
    get_settings,
    load_settings,
    reset_settings,
)

__all__ = [
    "LayerconfSettings",
    "get_settings",
    "load_settings",
    "reset_settings",
]
