"""Command line entry point: import a carrier workbook and export the filtered rows."""
import argparse
import sys
from pathlib import Path

from tracker.core.config import load_settings
from tracker.core.errors import TrackerError
from tracker.core.logging import configure_logging
from tracker.processing.sorting import SORTABLE_FIELDS
from tracker.review.workflow import TrackerState, export_to_path, import_into, set_days_to_show, sort_by


def build_parser() -> argparse.ArgumentParser:
    """Create a small argument parser for the CLI entry point."""

    parser = argparse.ArgumentParser(description="Filter a carrier tracking workbook")
    parser.add_argument("input", type=Path, help="Carrier export workbook (.xlsx)")
    parser.add_argument(
        "--output",
        type=Path,
        help="Workbook to write the filtered records to (defaults to TRACKER_EXPORT_FILENAME)",
    )
    parser.add_argument(
        "--sort-by",
        choices=SORTABLE_FIELDS,
        help="Order the exported rows by this field",
    )
    parser.add_argument(
        "--descending",
        action="store_true",
        help="Sort in descending order (requires --sort-by)",
    )
    parser.add_argument(
        "--days",
        type=int,
        help="Only keep events from the last N days",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level (defaults to LOG_LEVEL or INFO)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entrypoint for running the import and export from the command line."""

    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    settings = load_settings()
    output_path = args.output or Path(settings.export_filename)

    state = set_days_to_show(TrackerState(), args.days)
    state = import_into(state, args.input, source_name=args.input.name, settings=settings)
    if state.error:
        print(state.error, file=sys.stderr)
        return 1

    if args.sort_by:
        state = sort_by(state, args.sort_by)
        if args.descending:
            state = sort_by(state, args.sort_by)

    try:
        export_to_path(state, output_path)
    except TrackerError as exc:
        print(exc, file=sys.stderr)
        return 1

    print(f"Wrote {len(state.records)} records to {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
