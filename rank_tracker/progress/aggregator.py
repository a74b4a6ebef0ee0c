"""
Progress Aggregation

Reduces a list of snapshots to one ProgressRecord per category, comparing
the earliest and the latest valid snapshot (not commit-to-commit steps).
"""

from rank_tracker.config import CATEGORIES
from rank_tracker.exceptions import NoValidDataError
from rank_tracker.models import ProgressRecord, ProgressSummary, Snapshot


def calculate_rank_change(start_rank: int | None, end_rank: int | None) -> int:
    """Positive when the user climbed (lower rank number is better), 0 if either end is missing."""
    if start_rank is None or end_rank is None:
        return 0
    return start_rank - end_rank


def calculate_count_change(start_count: int | None, end_count: int | None) -> int:
    if start_count is None or end_count is None:
        return 0
    return end_count - start_count


def build_progress_record(first: Snapshot, last: Snapshot, category: str) -> ProgressRecord:
    start_rank, end_rank = first.rank(category), last.rank(category)
    start_value, end_value = first.value(category), last.value(category)
    return ProgressRecord(
        rank_change=calculate_rank_change(start_rank, end_rank),
        count_change=calculate_count_change(start_value, end_value),
        start_rank=start_rank,
        end_rank=end_rank,
        start_value=start_value,
        end_value=end_value,
    )


def calculate_progress_summary(
    username: str,
    country: str,
    days: int,
    snapshots: list[Snapshot],
) -> ProgressSummary:
    """
    Summarize a user's ranking progress across snapshots.

    Args:
        username: Tracked GitHub username
        country: Country the rankings were read from
        days: Requested lookback window
        snapshots: Snapshots in any order

    Returns:
        ProgressSummary; ``snapshots`` holds every snapshot oldest first and
        ``commits_analyzed`` counts the valid ones

    Raises:
        NoValidDataError: If no snapshot has a rank in any category
    """
    ordered = sorted(snapshots, key=lambda s: s.commit_date)
    valid = [s for s in ordered if s.is_valid]

    if not valid:
        raise NoValidDataError(username)

    first, last = valid[0], valid[-1]

    return ProgressSummary(
        username=username,
        country=country,
        days_analyzed=days,
        commits_analyzed=len(valid),
        progress={c: build_progress_record(first, last, c) for c in CATEGORIES},
        snapshots=ordered,
    )
