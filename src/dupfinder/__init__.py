"""
dupfinder: report files with identical content under a directory tree.

Core features:
- Size bucketing so only same-size files are ever compared
- Byte-for-byte comparison with a growing read buffer (no content hashing)
- Deterministic cluster report plus scan statistics
- CLI interface for headless/server usage
"""

# Get version
try:
    from importlib.metadata import version as _version
    __version__ = _version("dupfinder")
except Exception:
    try:
        import tomllib  # Python 3.11+
    except ImportError:
        import tomli as tomllib  # Python < 3.11: pip install tomli

    from pathlib import Path as _Path
    _pyproject = _Path(__file__).resolve().parents[2] / "pyproject.toml"
    with open(_pyproject, "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public API: only what users should import directly
from dupfinder.commands import DuplicateSearchCommand
from dupfinder.core import (
    SizeIndexer, ByteComparator, DuplicateClusterer,
    FileEntry, SizeIndex, Cluster, ScanStats,
    DupFinderError, PathNotFoundError, NotADirectoryRootError)
from dupfinder.utils.convert_utils import ConvertUtils

__all__ = [
    "DuplicateSearchCommand",
    "SizeIndexer",
    "ByteComparator",
    "DuplicateClusterer",
    "FileEntry",
    "SizeIndex",
    "Cluster",
    "ScanStats",
    "DupFinderError",
    "PathNotFoundError",
    "NotADirectoryRootError",
    "ConvertUtils",
    "__version__",
]
