"""
Commit selection for a lookback window.
"""

from datetime import datetime, timedelta, timezone

from rank_tracker.config import FALLBACK_COMMIT_COUNT
from rank_tracker.models import Commit
from rank_tracker.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


def get_commits_for_time_range(
    repo,
    days: int,
    max_commits: int,
    now: datetime | None = None,
    fallback_count: int = FALLBACK_COMMIT_COUNT,
) -> list[Commit]:
    """
    Select the dataset commits to analyze, newest first.

    Takes the ``max_commits`` most recent commits and keeps those made within
    the last ``days`` days. If none qualify (the dataset updates less often
    than the window), the ``fallback_count`` most recent commits are used
    regardless of age.

    Args:
        repo: GitRepository (anything with a ``log(max_count)`` method)
        days: Lookback window in days
        max_commits: Number of recent commits to consider
        now: Reference time (default: current UTC time)
        fallback_count: Commits to use when the window is empty

    Returns:
        List of Commit, possibly empty if the history itself is empty

    Raises:
        GitCommandError: If the history cannot be read
    """
    commits = repo.log(max_commits)

    now = now or datetime.now(timezone.utc)
    since = now - timedelta(days=days)

    in_window = [c for c in commits if c.date >= since]
    if in_window:
        return in_window

    fallback = commits[:max(fallback_count, 0)]
    if fallback:
        logger.info(
            f"No commits in the last {days} days, "
            f"falling back to the {len(fallback)} most recent"
        )
    return fallback
