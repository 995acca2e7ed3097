"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
"""

MEGABYTE = 1 << 20


class ConvertUtils:
    @staticmethod
    def bytes_to_megabytes(size_bytes: int) -> float:
        """Convert bytes to binary megabytes (MiB)."""
        if size_bytes < 0:
            return 0.0
        return size_bytes / float(MEGABYTE)

    @staticmethod
    def format_megabytes(size_bytes: int) -> str:
        """
        Format bytes as megabytes with two decimals (e.g., 1.50MB).
        """
        return f"{ConvertUtils.bytes_to_megabytes(size_bytes):.2f}MB"

    @staticmethod
    def bytes_to_human(size_bytes: int) -> str:
        """
        Convert bytes to human-readable string (e.g., 1.5KB, 3.2MB).
        """
        if size_bytes < 0:
            return "0B"

        units = ["B", "KB", "MB", "GB", "TB", "PB"]
        for unit in units:
            if size_bytes < 1024:
                return f"{size_bytes:.2f}{unit}"
            size_bytes /= 1024
        return f"{size_bytes:.2f}EB"
