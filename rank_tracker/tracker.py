"""
User Progress Tracker

Ties the pieces together: locate the user's country, pick dataset commits
in the lookback window, walk them, and summarize the rank changes.

Usage:
    from rank_tracker.tracker import UserProgressTracker
    tracker = UserProgressTracker("path/to/top-github-users")
    summary = tracker.track_user_progress("octocat", days=14)
"""

from datetime import datetime
from pathlib import Path
from typing import Iterable

from rank_tracker.config import (
    COUNTRIES,
    DEFAULT_DATASET_PATH,
    DEFAULT_DAYS,
    DEFAULT_MAX_COMMITS,
    FALLBACK_COMMIT_COUNT,
    MARKDOWN_SUBPATH,
)
from rank_tracker.exceptions import NoCommitsError, UserNotFoundError, ValidationError
from rank_tracker.history.commits import get_commits_for_time_range
from rank_tracker.history.git_repo import GitRepository
from rank_tracker.history.walker import collect_snapshots
from rank_tracker.ingestion.country_locator import find_user_country
from rank_tracker.models import ProgressSummary
from rank_tracker.progress.aggregator import calculate_progress_summary
from rank_tracker.utils import setup_logging, validate_request

# --- Module Logger ---
logger = setup_logging(__name__)


class UserProgressTracker:
    """Tracks one user's ranking history in a checkout of the ranking dataset."""

    def __init__(
        self,
        repository_path: Path = DEFAULT_DATASET_PATH,
        markdown_path: Path | None = None,
        fallback_commit_count: int = FALLBACK_COMMIT_COUNT,
        repo: GitRepository | None = None,
        countries: Iterable[str] = COUNTRIES,
    ):
        self.repo_path = Path(repository_path)
        self.markdown_path = Path(markdown_path) if markdown_path else self.repo_path / MARKDOWN_SUBPATH
        self.fallback_commit_count = fallback_commit_count
        self.repo = repo or GitRepository(self.repo_path)
        self.countries = tuple(countries)

    def track_user_progress(
        self,
        username: str,
        days: int = DEFAULT_DAYS,
        max_commits: int = DEFAULT_MAX_COMMITS,
        now: datetime | None = None,
    ) -> ProgressSummary:
        """
        Track a user's ranking progress over the last ``days`` days.

        Args:
            username: GitHub username
            days: Lookback window in days
            max_commits: Maximum number of dataset commits to inspect
            now: Reference time for the window (default: current time)

        Returns:
            ProgressSummary. Check ``restored``: False means the dataset
            checkout could not be returned to its original branch.

        Raises:
            ValidationError: If the request parameters are invalid
            UserNotFoundError: If no country's followers ranking lists the user
            NoCommitsError: If the dataset history has no commits to analyze
            NoValidDataError: If no analyzed commit has ranking data for the user
            GitCommandError: If the dataset history cannot be read
        """
        try:
            validate_request(username, days, max_commits)
        except ValueError as e:
            raise ValidationError(str(e)) from e

        logger.info(f"Tracking progress for @{username} over {days} days...")

        # Step 1: Find the user's country
        country = find_user_country(self.markdown_path, username, self.countries)
        if not country:
            raise UserNotFoundError(username)
        logger.info(f"Found @{username} in {country}")

        # Step 2: Pick commits in the window
        commits = get_commits_for_time_range(
            self.repo,
            days,
            max_commits,
            now=now,
            fallback_count=self.fallback_commit_count,
        )
        logger.info(f"Analyzing {len(commits)} commits over {days} days")
        if not commits:
            raise NoCommitsError(days)

        # Step 3: Snapshot every commit
        walk = collect_snapshots(self.repo, self.markdown_path, username, country, commits)
        if not walk.restored:
            logger.warning(
                f"Dataset checkout was not returned to its original position "
                f"(now at {walk.restore_target or 'unknown'})"
            )

        # Step 4: Summarize
        summary = calculate_progress_summary(username, country, days, walk.snapshots)
        summary.restored = walk.restored
        summary.restore_target = walk.restore_target

        followers = summary.followers_progress
        logger.info(
            f"Analysis complete! User went {'up' if followers.rank_change > 0 else 'down'} "
            f"by {abs(followers.rank_change)} positions in followers ranking"
        )
        return summary
