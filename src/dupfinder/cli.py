#!/usr/bin/env python3
"""
dupfinder CLI: command line interface for duplicate file detection.
Reports duplicate sets and reclaimable space. Never modifies or deletes files.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from typing import List, Optional, NoReturn
import logging

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

from dupfinder.core.models import DuplicateReport, DuplicateSet, ScanParams
from dupfinder.commands import DeduplicationCommand
from dupfinder.utils.convert_utils import ConvertUtils
from dupfinder.aliases import (
    ALGORITHM_ALIASES, ALGORITHM_CHOICES, ALGORITHM_HELP_TEXT, EPILOG_TEXT
)


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

        # Fix encoding for Windows consoles to prevent UnicodeEncodeError
        for stream in (sys.stdout, sys.stderr):
            if hasattr(stream, "reconfigure"):
                stream.reconfigure(encoding='utf-8', errors='replace')

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="dupfinder",
            description="dupfinder: find duplicated files by content",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        # Required arguments
        parser.add_argument(
            "files",
            nargs="+",
            metavar="FILE",
            help="Input files or folders"
        )

        # Traversal options
        parser.add_argument(
            "--depth", "-d",
            type=int,
            default=None,
            dest="max_depth",
            metavar="N",
            help="Max depth to recurse down in directories. Default: unlimited"
        )
        parser.add_argument(
            "--exclude-hidden", "-A",
            action="store_true",
            dest="exclude_hidden",
            help="Skip files and directories whose name starts with '.'"
        )
        parser.add_argument(
            "--min-size",
            default=None,
            type=str,
            metavar="SIZE",
            help="Ignore files smaller than SIZE (e.g., 500K, 1MiB)"
        )
        parser.add_argument(
            "--max-size",
            default=None,
            type=str,
            metavar="SIZE",
            help="Ignore files larger than SIZE (e.g., 10MB, 1GiB)"
        )

        # Hashing options
        parser.add_argument(
            "--algorithm",
            choices=ALGORITHM_CHOICES,
            default="blake2b",
            type=str,
            help=ALGORITHM_HELP_TEXT
        )
        parser.add_argument(
            "--jobs", "-j",
            type=int,
            default=None,
            dest="workers",
            metavar="N",
            help="Number of hashing threads. Default: number of CPUs"
        )

        # Output options
        parser.add_argument(
            "--summarize", "-m",
            action="store_true",
            help="Summarize size information"
        )
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Do not list duplicate sets (combine with --summarize to print only the total)"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show detailed statistics and progress"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if args.max_depth is not None and args.max_depth < 0:
            self.error_exit("Depth cannot be negative")

        if args.workers is not None and args.workers < 1:
            self.error_exit("Number of jobs must be at least 1")

        for size_str in (args.min_size, args.max_size):
            if size_str is not None and not ConvertUtils.is_valid_size_format(size_str):
                self.error_exit(f"Invalid size format: '{size_str}'")

        # Missing inputs are reported but do not stop the other inputs
        for path in args.files:
            if not os.path.exists(path):
                self.warning(f"Path not found: {path}")

    def create_params(self, args: argparse.Namespace) -> ScanParams:
        """Create ScanParams from CLI arguments."""
        try:
            return ScanParams.from_human_readable(
                roots=args.files,
                max_depth=args.max_depth,
                exclude_hidden=args.exclude_hidden,
                min_size_str=args.min_size,
                max_size_str=args.max_size,
                workers=args.workers,
                algorithm=ALGORITHM_ALIASES[args.algorithm],
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console."""
        if not self.verbose:
            return

        if total and total > 0:
            percent = (current / total) * 100
            sys.stderr.write(
                f"\r  [{stage}] {current}/{total} ({percent:.1f}%)"
            )
        else:
            sys.stderr.write(f"\r  [{stage}] {current} files processed...")
        sys.stderr.flush()

    def run_deduplication(self, params: ScanParams) -> DuplicateReport:
        """Execute the scan workflow."""
        command = DeduplicationCommand()
        if self.verbose:
            print(f"Finding duplicates (algorithm: {params.algorithm.display_name})...",
                  file=sys.stderr)

        try:
            report, stats = command.execute(
                params,
                progress_callback=self.progress_callback if self.verbose else None
            )
        except OSError as e:
            self.error_exit(f"Scan failed: {e}")

        if self.verbose:
            sys.stderr.write("\n")
            print(stats.print_summary(), file=sys.stderr)

        return report

    @staticmethod
    def display_path(path: str) -> str:
        """Printable form of a path; undecodable bytes become U+FFFD."""
        return os.fsencode(path).decode("utf-8", errors="replace")

    @staticmethod
    def format_duplicate_set(duplicate_set: DuplicateSet) -> List[str]:
        """Lines for one duplicate set: reclaimable size, then one path per line."""
        lines = [f"Duplicates: {ConvertUtils.bytes_to_human(duplicate_set.reclaimable_bytes)}"]
        lines.extend(CLIApplication.display_path(path) for path in duplicate_set.paths)
        return lines

    def output_results(self, report: DuplicateReport, summarize: bool = False) -> None:
        """Print duplicate sets (largest reclaimable space first) and optionally the total."""
        if not self.quiet:
            for duplicate_set in report.sorted_by_reclaimable():
                for line in self.format_duplicate_set(duplicate_set):
                    print(line)
                print()

        if summarize:
            print(f"Total: {ConvertUtils.bytes_to_human(report.total_reclaimable)} duplicated")

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv=None) -> None:
        """Main entry point with conditional output behavior."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet

        if self.verbose:
            logging.getLogger("dupfinder").setLevel(logging.DEBUG)

        self.validate_args(args)
        params = self.create_params(args)

        report = self.run_deduplication(params)
        self.output_results(report, summarize=args.summarize)

        # Show completion time
        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"\n✅ Completed in {elapsed:.2f} seconds", file=sys.stderr)


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
