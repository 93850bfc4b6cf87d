#!/usr/bin/env python3
"""
dedupe CLI — command line interface for content-based duplicate removal.
Lists every duplicate group (digest, occurrence count, removable paths) and the
total duplicate bytes; with --clean the listed files are removed.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from pathlib import Path
from typing import Optional, NoReturn
import logging

from dedupe.core.models import DeduplicationParams, DeduplicationResult
from dedupe.commands import DeduplicationCommand
from dedupe.errors import DedupeError
from dedupe.utils.convert_utils import ConvertUtils
from dedupe.services.duplicate_service import DuplicateService
from dedupe.aliases import (
    ALGORITHM_ALIASES, ALGORITHM_CHOICES, ALGORITHM_HELP_TEXT,
    EPILOG_TEXT
)

LOG_FORMAT = "%(levelname)-8s | %(name)-25s | %(message)s"
DEFAULT_DELAY = 10


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

        # Fix encoding for Windows consoles to prevent UnicodeEncodeError
        for stream in (sys.stdout, sys.stderr):
            if hasattr(stream, "reconfigure"):
                stream.reconfigure(encoding='utf-8')

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="dedupe",
            description="dedupe — find and remove byte-identical files",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        # Required arguments
        parser.add_argument(
            "--directory", "-d",
            required=True,
            type=str,
            help="The path of the directory containing the files to de-duplicate"
        )
        parser.add_argument(
            "--extensions", "-x",
            required=True,
            type=str,
            help="Comma separated list of file extensions to filter by (e.g., txt,doc)"
        )

        # Retention
        parser.add_argument(
            "--preferred", "-p",
            default="",
            type=str,
            help="The preferred extension of the file to keep in a set of duplicates"
        )

        # Hashing options
        parser.add_argument(
            "--algorithm", "-a",
            choices=ALGORITHM_CHOICES,
            default="sha1",
            type=str,
            help=ALGORITHM_HELP_TEXT
        )
        parser.add_argument(
            "--workers", "-w",
            default=1,
            type=int,
            metavar='',
            help="Number of files hashed in parallel. Default: 1"
        )

        # Actions
        parser.add_argument(
            "--clean",
            action="store_true",
            help="Delete duplicate files"
        )
        parser.add_argument(
            "--trash",
            action="store_true",
            help="With --clean: move duplicates to the system trash instead of deleting them"
        )
        parser.add_argument(
            "--delay",
            default=None,
            type=int,
            metavar='',
            help=f"With --clean: seconds to wait before deleting. Default: {DEFAULT_DELAY}"
        )

        # Output options
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress non-essential output"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show debug logging and progress"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if not args.directory.strip():
            self.error_exit("path is required")
        if not ConvertUtils.parse_extensions(args.extensions):
            self.error_exit("a comma separated list of extensions are required")

        if args.trash and not args.clean:
            self.error_exit("--trash can only be used with --clean")
        if args.delay is not None and not args.clean:
            self.error_exit("--delay can only be used with --clean")
        if args.delay is not None and args.delay < 0:
            self.error_exit("--delay cannot be negative")
        if args.workers < 1:
            self.error_exit("--workers must be at least 1")

        root_path = Path(args.directory)
        if not root_path.exists():
            self.error_exit(f"Directory not found: {args.directory}")
        if not root_path.is_dir():
            self.error_exit(f"Path is not a directory: {args.directory}")

    def create_params(self, args: argparse.Namespace) -> DeduplicationParams:
        """Create DeduplicationParams from CLI arguments."""
        try:
            return DeduplicationParams.from_human_readable(
                root_dir=os.path.abspath(args.directory),
                extensions_str=args.extensions,
                preferred=args.preferred,
                clean=args.clean,
                use_trash=args.trash,
                algorithm=ALGORITHM_ALIASES[args.algorithm],
                workers=args.workers,
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
            sys.stderr.flush()
        else:
            sys.stderr.write(f"\r  [{stage}] {current} files processed...")
            sys.stderr.flush()

    @staticmethod
    def countdown(delay: int) -> None:
        """Give the operator a chance to abort before anything is deleted."""
        print(f"WARNING: Files will begin deletion in {delay} seconds. CTRL+C to stop.")
        sys.stdout.flush()
        if delay > 0:
            time.sleep(delay)
        print("Starting...")

    def run_deduplication(self, params: DeduplicationParams) -> DeduplicationResult:
        """Execute deduplication workflow."""
        command = DeduplicationCommand()
        if self.verbose:
            print(f"Hashing with {params.algorithm.display_name} ({params.workers} worker(s))...")

        try:
            result = command.execute(
                params,
                progress_callback=self.progress_callback if self.verbose else None,
            )
        except DedupeError as e:
            self.error_exit(str(e))

        if self.verbose:
            sys.stderr.write("\n")
        return result

    @staticmethod
    def print_group_header(result: DeduplicationResult, digest: str) -> None:
        print(digest, " -> ", result.counts[digest])

    def output_results(self, result: DeduplicationResult) -> None:
        """List every duplicate set without touching the files."""
        for digest in sorted(result.duplicates):
            self.print_group_header(result, digest)
            for path in sorted(result.duplicates[digest]):
                print(path)

    def execute_clean(self, result: DeduplicationResult, use_trash: bool = False) -> None:
        """Remove every duplicate, printing each one as it goes. Stops at the first failure."""
        action = "trashed" if use_trash else "deleted"
        current = {"digest": None}

        def on_removed(digest: str, path: str) -> None:
            if digest != current["digest"]:
                self.print_group_header(result, digest)
                current["digest"] = digest
            print(f"{action}: ", path)

        try:
            DuplicateService.remove_duplicates(result, use_trash=use_trash, on_removed=on_removed)
        except DedupeError as e:
            self.error_exit(str(e))

    @staticmethod
    def print_summary(result: DeduplicationResult) -> None:
        total = result.duplicate_bytes
        print("total duplicate bytes: ", total, f"({ConvertUtils.bytes_to_human(total)})")

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def configure_logging(self) -> None:
        level = logging.DEBUG if self.verbose else logging.ERROR
        logging.basicConfig(level=level, format=LOG_FORMAT)
        logging.getLogger().setLevel(level)

    def run(self, argv=None) -> None:
        """Main entry point."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet
        self.configure_logging()

        self.validate_args(args)
        params = self.create_params(args)

        if params.preferred and params.preferred not in params.extensions:
            self.warning(f"Preferred extension {params.preferred} is not among the scanned extensions")

        if params.clean:
            self.countdown(DEFAULT_DELAY if args.delay is None else args.delay)

        if not self.quiet:
            print(f"Scanning directory: {params.root_dir}")

        result = self.run_deduplication(params)

        if params.clean:
            self.execute_clean(result, use_trash=params.use_trash)
        else:
            self.output_results(result)

        self.print_summary(result)

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"\n✅ Completed in {elapsed:.2f} seconds")


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)")
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
