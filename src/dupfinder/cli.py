#!/usr/bin/env python3
"""
dupfinder CLI: report files with identical content under a root directory.
Detection only: nothing is moved or deleted.
"""
import argparse
import sys
import os
import time
from typing import List, Optional, NoReturn
import logging

from dupfinder import __version__
from dupfinder.core.models import Cluster, ScanStats, SizeIndex, DupFinderError
from dupfinder.commands import DuplicateSearchCommand
from dupfinder.utils.convert_utils import ConvertUtils

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)-8s | %(name)-25s | %(message)s"

EXIT_USAGE = 1
EXIT_PATH_NOT_FOUND = 2
EXIT_INTERRUPTED = 130

EPILOG_TEXT = """
Examples:
  Find duplicates in Downloads folder
  %(prog)s ~/Downloads

  Same as above with progress and detailed statistics on stderr
  %(prog)s ~/Downloads --verbose

  Show every size bucket before matching (debugging)
  %(prog)s ~/Downloads --dump-index
"""


class UsageArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with EXIT_USAGE on bad arguments."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def configure_logging(level: int) -> None:
    """Route log records to the current stderr."""
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False

        # Undecodable file names arrive as surrogate escapes: stdout writes their
        # original bytes back, stderr shows them as escapes
        for stream, errors in ((sys.stdout, 'surrogateescape'), (sys.stderr, 'backslashreplace')):
            if hasattr(stream, "reconfigure"):
                stream.reconfigure(encoding='utf-8', errors=errors)

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = UsageArgumentParser(
            prog="dupfinder",
            description="dupfinder: find files with identical content",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "root_directory",
            type=str,
            help="Root directory to search recursively for duplicates"
        )

        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show progress and detailed statistics on stderr"
        )
        parser.add_argument(
            "--debug",
            action="store_true",
            help="Enable debug logging"
        )
        parser.add_argument(
            "--dump-index",
            action="store_true",
            dest="dump_index",
            help="Print every size bucket ahead of the matching files"
        )
        parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate the root directory before any work begins."""
        if not os.path.exists(args.root_directory):
            self.error_exit(f"Root directory does not exist: {args.root_directory}", EXIT_PATH_NOT_FOUND)
        if not os.path.isdir(args.root_directory):
            self.error_exit(f"Path is not a directory: {args.root_directory}", EXIT_PATH_NOT_FOUND)

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console."""
        if not self.verbose:
            return

        if total and total > 0:
            percent = (current / total) * 100
            sys.stderr.write(f"\r  [{stage}] {current}/{total} ({percent:.1f}%)")
        else:
            sys.stderr.write(f"\r  [{stage}] {current} files indexed...")
        sys.stderr.flush()

    def run_search(self, command: DuplicateSearchCommand, root_dir: str):
        """Execute the duplicate search, mapping engine errors to exit codes."""
        try:
            clusters, stats = command.execute(
                root_dir,
                progress_callback=self.progress_callback if self.verbose else None
            )
        except DupFinderError as e:
            self.error_exit(str(e), EXIT_PATH_NOT_FOUND)

        if self.verbose:
            sys.stderr.write("\n")
        return clusters, stats

    @staticmethod
    def output_index(index: SizeIndex) -> None:
        """Print every size bucket, flagging the ones that need comparing."""
        for size, paths in index.to_dict().items():
            if len(paths) > 1:
                print("Potential dup!")
            print(f"Key {size}: ")
            for path in paths:
                print(path)
        print()

    @staticmethod
    def format_cluster(cluster: Cluster) -> str:
        return "[ " + ",\n  ".join(cluster.paths) + " ]"

    def output_results(self, clusters: List[Cluster]) -> None:
        """Print clusters in the order they were formed, each followed by a blank line."""
        print("Matching Files:")
        for cluster in clusters:
            print(self.format_cluster(cluster))
            print()

    @staticmethod
    def output_stats(stats: ScanStats) -> None:
        print("-- Stats --")
        print(f"Number of files scanned: {stats.files_scanned}")
        print(f"Total data compared: {ConvertUtils.format_megabytes(stats.total_bytes)}")

    @staticmethod
    def output_summary(clusters: List[Cluster], stats: ScanStats) -> None:
        """Detailed statistics for --verbose, written to stderr."""
        wasted = sum(c.wasted_bytes for c in clusters)
        lines = [
            "",
            "Search Statistics:",
            f"  Size buckets with collisions: {stats.collision_sizes}",
            f"  Comparisons performed:        {stats.comparisons}",
            f"  Clusters found:               {stats.clusters_found} ({stats.duplicate_files} files)",
            f"  Space held by extra copies:   {ConvertUtils.bytes_to_human(wasted)}",
            f"  Total time:                   {stats.total_time:.2f}s",
        ]
        print("\n".join(lines), file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = EXIT_USAGE) -> NoReturn:
        """Print error and exit."""
        print(f"Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv=None) -> None:
        """Main entry point."""
        args = self.parse_args(argv)
        self.verbose = args.verbose

        if args.debug:
            configure_logging(logging.DEBUG)
        elif args.verbose:
            configure_logging(logging.INFO)
        else:
            configure_logging(logging.ERROR)

        self.validate_args(args)

        command = DuplicateSearchCommand()
        clusters, stats = self.run_search(command, args.root_directory)

        if args.dump_index:
            self.output_index(command.get_index())

        self.output_results(clusters)
        self.output_stats(stats)

        if self.verbose:
            self.output_summary(clusters, stats)
            elapsed = time.time() - self.start_time
            logger.info(f"Completed in {elapsed:.2f} seconds")


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\nOperation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(EXIT_INTERRUPTED)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
