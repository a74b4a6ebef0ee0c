"""
History Walker

Checks out each selected dataset commit in turn, reads the user's rank in
every category, and always puts the checkout back where it was.

The checkout is a single shared working tree, so commits are visited one
at a time and only one walk may run per checkout. preserved_checkout()
owns the save/restore cycle: stash local changes, remember the branch
(or commit when detached), and on exit return to it and pop the stash.
"""

import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable

from rank_tracker.config import CATEGORIES, FALLBACK_BRANCHES, STASH_MESSAGE
from rank_tracker.exceptions import ConcurrentWalkError, TrackerError
from rank_tracker.ingestion.country_locator import ranking_file
from rank_tracker.ingestion.markdown_table import read_user_rank
from rank_tracker.models import Commit, Snapshot, WalkResult
from rank_tracker.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)

# Resolved checkout paths with a walk in progress
_active_walks: set[str] = set()
_active_lock = threading.Lock()


class CheckoutState:
    """Where the checkout was before a walk, and whether it got back there."""

    def __init__(self, original: str | None):
        self.original = original
        self.stashed = False
        self.restored = False
        self.restore_target: str | None = None

    def restore_candidates(self, fallbacks: Iterable[str] = FALLBACK_BRANCHES) -> list[str]:
        candidates = [self.original] if self.original else []
        candidates += [ref for ref in fallbacks if ref not in candidates]
        return candidates


def _record_position(repo) -> str | None:
    branch = repo.current_branch()
    if branch:
        return branch
    try:
        head = repo.head_commit()
    except TrackerError as e:
        logger.warning(f"Could not determine current position: {e}")
        return None
    logger.info(f"HEAD is detached, will return to {head[:8]}")
    return head


def _restore(repo, state: CheckoutState) -> None:
    for ref in state.restore_candidates():
        try:
            repo.checkout(ref)
        except TrackerError as e:
            logger.debug(f"Could not check out {ref}: {e}")
            continue
        state.restored = ref == state.original
        state.restore_target = ref
        if not state.restored:
            logger.warning(f"Could not return to {state.original}, checked out {ref} instead")
        return

    logger.warning("Could not return to original branch")


@contextmanager
def preserved_checkout(repo):
    """
    Context manager that returns the dataset checkout to its starting point.

    Yields:
        CheckoutState; ``restored`` is set on exit and is False when the
        original branch or commit could not be checked out again.

    Raises:
        ConcurrentWalkError: If another walk is active on the same checkout
    """
    key = str(Path(repo.path).resolve())
    with _active_lock:
        if key in _active_walks:
            raise ConcurrentWalkError(f"A history walk is already running on {key}")
        _active_walks.add(key)

    try:
        try:
            stashed = repo.stash_push(STASH_MESSAGE)
        except TrackerError as e:
            logger.debug(f"Nothing stashed: {e}")
            stashed = False
        if stashed:
            logger.info("Stashed uncommitted changes")

        state = CheckoutState(_record_position(repo))
        state.stashed = stashed

        try:
            yield state
        finally:
            _restore(repo, state)
            if state.stashed:
                try:
                    repo.stash_pop()
                    logger.info("Restored stashed changes")
                except TrackerError as e:
                    logger.warning(f"Could not restore stashed changes: {e}")
    finally:
        with _active_lock:
            _active_walks.discard(key)


def read_snapshot(markdown_dir: Path, username: str, country: str, commit: Commit) -> Snapshot:
    """Read the user's rank in every category from the currently checked-out files."""
    snapshot = Snapshot(commit_hash=commit.hash, commit_date=commit.date, country=country)
    for category in CATEGORIES:
        entry = read_user_rank(ranking_file(markdown_dir, category, country), username)
        if entry is not None:
            snapshot.entries[category] = entry
    return snapshot


def collect_snapshots(
    repo,
    markdown_dir: Path,
    username: str,
    country: str,
    commits: list[Commit],
) -> WalkResult:
    """
    Build one snapshot per commit that can be checked out.

    A commit that fails to check out is logged and skipped. The checkout is
    restored before returning, on success and on error.

    Args:
        repo: GitRepository of the dataset checkout
        markdown_dir: Ranking markdown root inside that checkout
        username: GitHub username to look up
        country: Country whose rankings are read
        commits: Commits to visit, in order

    Returns:
        WalkResult with the snapshots in visit order and the restore outcome
    """
    snapshots = []

    with preserved_checkout(repo) as state:
        for commit in commits:
            logger.info(f"Analyzing commit {commit.short_hash} from {commit.date.isoformat()}")
            try:
                repo.checkout(commit.hash)
            except TrackerError as e:
                logger.warning(f"Could not analyze commit {commit.hash}: {e}")
                continue

            snapshots.append(read_snapshot(markdown_dir, username, country, commit))

    return WalkResult(
        snapshots=snapshots,
        restored=state.restored,
        restore_target=state.restore_target,
    )
