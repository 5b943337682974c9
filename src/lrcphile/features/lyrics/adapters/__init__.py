"""
Summary: Package marker for lyrics adapters.
Why: Keep adapter exports together for easy discovery.
"""

from .filesystem_adapter import LocalFilesystemAdapter
from .lrclib_adapter import LrclibLookupAdapter
from .tag_reader_adapter import MutagenTagReader

__all__ = ["LocalFilesystemAdapter", "LrclibLookupAdapter", "MutagenTagReader"]
