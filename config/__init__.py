"""
Configuration module for the Brickset catalog application.

Organized into separate config files for different concerns:
- settings.py: Application settings, logging setup and demo arguments
- paths.py: File paths and directories
"""

from .settings import (
    Settings,
    get_settings,
    reset_settings,
    configure_logging,
    LOG_FORMAT,
)

from .paths import PathConfig, get_path_config, BRICKSET_FILE

__all__ = [
    # Settings
    'Settings',
    'get_settings',
    'reset_settings',
    'configure_logging',
    'LOG_FORMAT',

    # Paths
    'PathConfig',
    'get_path_config',
    'BRICKSET_FILE',
]
