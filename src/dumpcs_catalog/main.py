"""Main entry point for the dump.cs catalog tool."""

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn

from .application import CatalogService
from .domain.models.catalog import Catalog
from .domain.services.compare import CatalogDiff
from .domain.services.search import FILTER_KEYS
from .infrastructure.config import Config
from .infrastructure.logging import LoggerSetup, ProgressTracker, get_logger, log_timing


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Build a searchable catalog of types and members from an "
        "IL2CPP dump.cs file, with RVA/Offset/VA metadata",
        epilog="""
Examples:
  # Summary of a dump
  dumpcs-catalog dump.cs

  # Search members and types (case-insensitive)
  dumpcs-catalog dump.cs --search PlayerController

  # Only methods and constructors
  dumpcs-catalog dump.cs --search Update --kinds method,ctor

  # Export to JSON and CSV (relative paths go to the output directory)
  dumpcs-catalog dump.cs --export-json catalog.json --export-csv members.csv

  # Compare against a newer dump
  dumpcs-catalog old/dump.cs --compare new/dump.cs

  # Fill in VA and file offsets from the native library
  dumpcs-catalog dump.cs --binary libil2cpp.so --export-csv members.csv

  # Using .env file for configuration
  echo 'DUMP_FILE_PATH=resources/dump.cs' > .env
  dumpcs-catalog --search Awake
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "dump_file",
        type=Path,
        nargs="?",
        help="Path to the dump.cs file (optional if using .env)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output directory for exports (default: ./output)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="Enable verbose output with debug logs",
    )
    parser.add_argument(
        "--search",
        type=str,
        metavar="TEXT",
        help="Search namespaces, types and members",
    )
    parser.add_argument(
        "--kinds",
        type=str,
        metavar="KINDS",
        help="Comma-separated search filter: " + ", ".join(sorted(FILTER_KEYS)),
    )
    parser.add_argument(
        "--export-json",
        type=Path,
        metavar="FILE",
        help="Write the catalog as JSON",
    )
    parser.add_argument(
        "--export-csv",
        type=Path,
        metavar="FILE",
        help="Write one CSV row per member",
    )
    parser.add_argument(
        "--compare",
        type=Path,
        metavar="DUMP",
        help="Compare against another dump.cs (this file is the baseline)",
    )
    parser.add_argument(
        "--binary",
        type=Path,
        metavar="LIB",
        help="Native ELF library used to fill in VA and file offsets",
    )
    return parser.parse_args(argv)


def _log_summary(catalog: Catalog) -> None:
    logger = get_logger(__name__)
    logger.info("=" * 70)
    logger.info("CATALOG SUMMARY")
    logger.info("=" * 70)
    logger.info(f"Types: {len(catalog)}")
    logger.info(f"Members: {catalog.member_count}")
    logger.info(f"Namespaces: {len(catalog.namespaces())}")
    logger.info(f"Assemblies: {len(catalog.assemblies())}")
    for assembly in catalog.assemblies():
        count = sum(1 for t in catalog if t.assembly == assembly)
        logger.debug(f"  - {assembly}: {count} types")


def _print_diff(diff: CatalogDiff) -> None:
    print(f"Diff ({diff.summary()})")
    for entry in diff.entries:
        old, new = entry.format_offsets()
        print(f"{entry.status!s:<8} {entry.item}  {old or '-'} -> {new or '-'}")


class ProgressLogger:
    """Progress callback that logs every 10% step."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger
        self.last_step = -1

    def __call__(self, percent: int) -> None:
        step = percent // 10
        if step != self.last_step:
            self.last_step = step
            self.logger.debug(f"Parsing... {percent}%")


@log_timing
def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point for dump.cs cataloging."""
    logger = get_logger(__name__)
    args = parse_args(argv)

    # Load configuration
    try:
        config = Config.from_args(
            dump_file_path=args.dump_file,
            output_dir=args.output,
            verbose=args.verbose,
            binary_path=args.binary,
        )
        config.validate()
        if args.compare is not None and not args.compare.is_file():
            raise ValueError(f"Compare file not found: {args.compare}")
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    LoggerSetup.initialize(config.log_dir, verbose=config.verbose)
    logger.debug(f"Dump file: {config.dump_file_path}")
    logger.debug(f"Output directory: {config.output_dir}")

    kinds = None
    if args.kinds:
        kinds = {k.strip().lower() for k in args.kinds.split(",") if k.strip()}

    service = CatalogService(config)
    tracker = ProgressTracker(logger)

    try:
        if args.compare is not None:
            with tracker.track_operation("compare"):
                diff = service.compare(args.compare)
            _print_diff(diff)
            if args.search is None and args.export_json is None and args.export_csv is None:
                sys.exit(0)

        with tracker.track_operation("load"):
            catalog = service.catalog
            if catalog is None:
                catalog = service.load(ProgressLogger(logger))
        _log_summary(catalog)

        if args.search is not None:
            results = service.search(args.search, kinds)
            logger.info(f"{len(results)} search result(s) for '{args.search}'")
            for entry in results:
                print(entry.display)

        if args.export_json is not None or args.export_csv is not None:
            with tracker.track_operation("export"):
                for path in service.export(args.export_json, args.export_csv):
                    logger.info(f"[SUCCESS] Wrote: {path}")

    except ValueError as e:
        logger.error(f"{e}")
        sys.exit(1)
    except OSError as e:
        logger.error(f"Output error: {e}")
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
