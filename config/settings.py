"""
Main settings configuration.
"""

import os
import logging
from typing import Optional
from dataclasses import dataclass, field

import streamlit as st

from config.paths import BRICKSET_FILE
from core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """
    Main application settings.

    Centralized configuration with environment variable support.
    """

    # Data source
    data_dir: Optional[str] = field(default_factory=lambda: os.environ.get('BRICKSET_DATA_DIR') or None)
    brickset_file: str = field(default_factory=lambda: os.environ.get('BRICKSET_FILE', BRICKSET_FILE))

    # Application Settings
    log_level: str = field(default_factory=lambda: os.environ.get('LOG_LEVEL', 'INFO').upper())
    debug: bool = field(default_factory=lambda: os.environ.get('DEBUG', 'false').lower() == 'true')

    # Demo report arguments
    min_pieces: int = 1000
    tags_set_name: str = "Star Wars Magnet Set"
    subtheme_theme: str = "Bionicle"
    piece_count: int = 49
    theme_substring: str = "Miscellaneous"
    average_theme_substring: str = "Books"
    min_name_length: int = 15
    name_limit: int = 5

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.log_level not in _LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level '{self.log_level}'",
                config_key="LOG_LEVEL"
            )
        if not self.brickset_file:
            raise ConfigurationError("Brickset file name cannot be empty", config_key="BRICKSET_FILE")

    @classmethod
    def from_streamlit_secrets(cls) -> 'Settings':
        """Create settings, letting Streamlit secrets override the data source."""
        settings = cls()

        try:
            if 'BRICKSET_DATA_DIR' in st.secrets:
                settings.data_dir = st.secrets['BRICKSET_DATA_DIR']

            if 'BRICKSET_FILE' in st.secrets:
                settings.brickset_file = st.secrets['BRICKSET_FILE']
        except Exception as e:
            # Streamlit secrets not available (e.g., in tests)
            logger.debug(f"Streamlit secrets not available: {e}")

        return settings


# Singleton settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings (useful for testing)."""
    global _settings
    _settings = None


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging for the entry points."""
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level)
    logging.basicConfig(level=level, format=LOG_FORMAT)
