"""
Command-line interface for the rank tracker.

Usage:
    rank-tracker <username> [days] [max_commits]
    OR
    python -m rank_tracker.cli octocat 14 20 --csv --theme light
"""

import argparse
import json
import sys
from pathlib import Path

from rank_tracker.config import (
    ALLOWED_THEMES,
    DATASET_REMOTE_URL,
    DEFAULT_DATASET_PATH,
    DEFAULT_DAYS,
    DEFAULT_MAX_COMMITS,
    OUTPUT_FOLDER,
)
from rank_tracker.exceptions import TrackerError
from rank_tracker.history.git_repo import ensure_dataset
from rank_tracker.models import snapshots_to_frame
from rank_tracker.report.console import format_progress_report
from rank_tracker.tracker import UserProgressTracker
from rank_tracker.utils import atomic_write_csv, setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rank-tracker",
        description=(
            "Track a GitHub user's country ranking (followers, public and total "
            "contributions) across the history of the top-github-users dataset."
        ),
    )
    parser.add_argument("username", help="GitHub username to track")
    parser.add_argument("days", nargs="?", type=int, default=DEFAULT_DAYS,
                        help=f"Number of days to look back (default: {DEFAULT_DAYS})")
    parser.add_argument("max_commits", nargs="?", type=int, default=DEFAULT_MAX_COMMITS,
                        help=f"Maximum number of commits to analyze (default: {DEFAULT_MAX_COMMITS})")
    parser.add_argument("--repo", type=Path, default=DEFAULT_DATASET_PATH,
                        help="Path to the ranking dataset checkout")
    parser.add_argument("--output", type=Path, default=OUTPUT_FOLDER,
                        help="Folder for generated reports")
    parser.add_argument("--theme", choices=sorted(ALLOWED_THEMES), default="dark",
                        help="Color theme of the HTML report")
    parser.add_argument("--no-report", action="store_true",
                        help="Skip the HTML report")
    parser.add_argument("--csv", action="store_true",
                        help="Also export the snapshots as CSV")
    parser.add_argument("--json", action="store_true",
                        help="Print the summary as JSON instead of the text report")
    parser.add_argument("--setup", action="store_true",
                        help="Clone the dataset into --repo if it is missing")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        if args.setup:
            ensure_dataset(args.repo, DATASET_REMOTE_URL)

        tracker = UserProgressTracker(args.repo)
        summary = tracker.track_user_progress(args.username, args.days, args.max_commits)
    except TrackerError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    # Keep stdout clean for JSON consumers
    info = sys.stderr if args.json else sys.stdout

    if args.json:
        print(json.dumps(summary.to_dict(), indent=2))
    else:
        print()
        print(format_progress_report(summary))
        print()
        print("✅ Analysis complete!")

    if not summary.restored:
        print(
            f"⚠️  Warning: dataset checkout at {args.repo} was not restored to its original branch",
            file=sys.stderr,
        )

    if args.csv:
        csv_path = args.output / f"{summary.username}-snapshots.csv"
        atomic_write_csv(snapshots_to_frame(summary.snapshots), csv_path, index=False)
        print(f"📄 Snapshots saved to: {csv_path}", file=info)

    if not args.no_report:
        from rank_tracker.report.charts import write_progress_report
        try:
            path = write_progress_report(summary, args.output, theme=args.theme)
            print(f"📊 HTML report saved to: {path}", file=info)
        except OSError as e:
            logger.warning(f"Could not generate report: {e}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
