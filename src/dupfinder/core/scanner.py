"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Builds the size index used by the duplicate finder.
Features:
- Uses pathlib.Path for cross-platform path handling
- Recursively walks directories, depth-first
- Sorts directory listings so bucket order is reproducible between runs
- Skips symbolic links and files whose size cannot be read
"""

import os
import stat
from typing import Optional, Callable
from pathlib import Path
import time
import logging

logger = logging.getLogger(__name__)

# Local imports
from dupfinder.core.models import FileEntry, SizeIndex, PathNotFoundError, NotADirectoryRootError
from dupfinder.core.interfaces import FileIndexer


class SizeIndexer(FileIndexer):
    """
    Walks a directory tree and buckets every regular file by its size.
    Nothing on disk is modified.
    """

    # Progress throttling: report every N files
    PROGRESS_INTERVAL = 5000

    def build(self,
              root_dir: str,
              progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None) -> SizeIndex:
        """
        Single-pass walk with throttled progress updates.
        Returns the populated SizeIndex.
        """
        root_path = Path(root_dir)

        if not root_path.exists():
            logger.error(f"Root directory {root_dir} does not exist")
            raise PathNotFoundError(root_dir)
        if not root_path.is_dir():
            logger.error(f"Not a directory: {root_dir}")
            raise NotADirectoryRootError(root_dir)

        root_path = root_path.resolve()
        logger.debug(f"Scanning directory: {root_path}")

        index = SizeIndex()
        processed_files = 0
        progress_counter = 0
        start_time = time.time()

        for root, dirs, files in os.walk(str(root_path), onerror=self._on_walk_error):
            # Listing order is platform dependent; fix it for this run and every other one
            dirs.sort()
            files.sort()

            for filename in files:
                entry = self._process_file(Path(root) / filename)
                if entry is None:
                    continue
                index.add(entry)
                processed_files += 1
                progress_counter += 1

                if progress_callback and progress_counter >= self.PROGRESS_INTERVAL:
                    progress_callback('scanning', processed_files, None)
                    progress_counter = 0

        # Final update for small trees
        if progress_callback and progress_counter > 0:
            progress_callback('scanning', processed_files, None)

        elapsed_time = time.time() - start_time
        logger.info(f"Indexed {processed_files} files in {len(index.buckets)} size buckets "
                    f"({len(index.collision_sizes)} collision sizes) in {elapsed_time:.2f} seconds")
        return index

    @staticmethod
    def _process_file(path: Path) -> Optional[FileEntry]:
        """
        Turn a path into a FileEntry, or None if it is not a readable regular file.
        """
        try:
            if path.is_symlink():
                logger.debug(f"Skipping symbolic link: {path}")
                return None
        except OSError as e:
            logger.debug(f"Could not check symlink status for {path}: {e}")
            return None

        try:
            stat_result = path.stat()
        except OSError as e:
            logger.warning(f"Could not get size of {path}: {e}")
            return None

        if not stat.S_ISREG(stat_result.st_mode):
            logger.debug(f"Skipping non-regular file: {path}")
            return None

        return FileEntry(path=str(path), size=stat_result.st_size)

    @staticmethod
    def _on_walk_error(error: OSError) -> None:
        logger.warning(f"Cannot read directory {error.filename}: {error.strerror}")
