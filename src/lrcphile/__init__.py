"""lrcphile: fetch lyrics from LRCLIB and store them beside audio files."""

from lrcphile.config.settings import APP_VERSION

__version__ = APP_VERSION

__all__ = ["__version__"]
