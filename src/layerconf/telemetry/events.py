"""Semantic event constants for structured logging.

All log events should use these constants rather than magic strings to ensure
consistency and enable reliable querying and analysis.
"""

# Load lifecycle events
CONFIG_LOAD_STARTED = "config_load_started"
CONFIG_LOAD_COMPLETED = "config_load_completed"
CONFIG_LOAD_JOINED = "config_load_joined"

# Source list events
CONFIG_SOURCE_ADDED = "config_source_added"
CONFIG_SOURCE_REMOVED = "config_source_removed"
SCRIPT_SOURCE_FAILED = "script_source_failed"

# Registry events
REGISTRY_INITIALIZED = "registry_initialized"

# Settings events
SETTINGS_LOADED = "settings_loaded"
