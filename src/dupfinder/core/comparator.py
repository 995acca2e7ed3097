"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

comparator.py
Byte-for-byte file comparison with a growing read buffer.

Two different files usually differ within their first bytes, so the first passes
read small blocks. Every pass that still matches moves on to a bigger block, so
large identical files end up being compared in 256MB reads.
"""

import os
import logging
from typing import BinaryIO

logger = logging.getLogger(__name__)

from dupfinder.core.interfaces import FileComparator

# Read size per pass, tuned for small (<1KB) and large (>1GB) files
BUFFER_STAGES = (64, 255, 4096, 65535, 16777215, 268435456)


def buffer_size_for_pass(pass_number: int) -> int:
    """Read size of the given pass (0-based). Passes past the last stage reuse the largest size."""
    if pass_number < 0:
        raise ValueError(f"Pass number cannot be negative: {pass_number}")
    return BUFFER_STAGES[min(pass_number, len(BUFFER_STAGES) - 1)]


class ByteComparator(FileComparator):
    """
    Compares two files block by block with staged buffer growth.

    Counters (`comparisons`, `bytes_read`, `failures`, `last_passes`) are kept
    for statistics and never influence the result.
    """

    def __init__(self):
        self.comparisons = 0
        self.bytes_read = 0
        self.failures = 0
        self.last_passes = 0

    def reset_counters(self) -> None:
        self.comparisons = 0
        self.bytes_read = 0
        self.failures = 0
        self.last_passes = 0

    def equal(self, path_a: str, path_b: str) -> bool:
        """
        Returns True if both files hold exactly the same bytes.
        A file that cannot be opened or read never matches anything.
        """
        self.comparisons += 1
        self.last_passes = 0

        try:
            with open(path_a, 'rb') as file_a, open(path_b, 'rb') as file_b:
                try:
                    return self._compare_streams(file_a, file_b)
                except OSError as e:
                    self.failures += 1
                    logger.error(f"Could not read: {path_a} / {path_b} ({e.strerror or e})")
                    return False
        except OSError as e:
            self.failures += 1
            logger.error(f"Could not open: {e.filename or path_a} ({e.strerror or e})")
            return False

    def _compare_streams(self, file_a: BinaryIO, file_b: BinaryIO) -> bool:
        size_a = os.fstat(file_a.fileno()).st_size
        size_b = os.fstat(file_b.fileno()).st_size
        if size_a != size_b:
            return False
        if size_a == 0:
            return True

        pass_number = 0
        while True:
            size = buffer_size_for_pass(pass_number)
            pass_number += 1
            self.last_passes = pass_number

            block_a = file_a.read(size)
            block_b = file_b.read(size)
            self.bytes_read += len(block_a) + len(block_b)

            if block_a != block_b:
                return False

            # A short read means both streams are exhausted
            if len(block_a) < size:
                return True
