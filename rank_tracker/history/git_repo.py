"""
Git access for the ranking dataset checkout.

A thin wrapper around the git executable. Every call goes through
run_git(); a non-zero exit raises GitCommandError.
"""

import subprocess
from datetime import datetime
from pathlib import Path

from rank_tracker.config import GIT_TIMEOUT_SECONDS
from rank_tracker.exceptions import GitCommandError
from rank_tracker.models import Commit
from rank_tracker.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)

# Fields separated by NUL so subjects can never break parsing
LOG_FORMAT = "%H%x00%aI"


class GitRepository:
    """Git operations on one working tree."""

    def __init__(self, path: Path, timeout_s: int = GIT_TIMEOUT_SECONDS):
        self.path = Path(path)
        self.timeout_s = timeout_s

    def __repr__(self) -> str:
        return f"GitRepository({str(self.path)!r})"

    def run_git(self, args: list[str], check: bool = True) -> subprocess.CompletedProcess:
        """Run ``git <args>`` in the working tree."""
        logger.debug(f"git {' '.join(args)} (cwd={self.path})")
        try:
            proc = subprocess.run(
                ["git", *args],
                cwd=str(self.path),
                capture_output=True,
                text=True,
                timeout=self.timeout_s,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            raise GitCommandError(args, -1, str(e)) from e

        if check and proc.returncode != 0:
            raise GitCommandError(args, proc.returncode, proc.stderr)
        return proc

    def is_repository(self) -> bool:
        if not self.path.is_dir():
            return False
        proc = self.run_git(["rev-parse", "--is-inside-work-tree"], check=False)
        return proc.returncode == 0 and proc.stdout.strip() == "true"

    def log(self, max_count: int) -> list[Commit]:
        """Most recent commits reachable from HEAD, newest first. Empty before the first commit."""
        head = self.run_git(["rev-parse", "--verify", "--quiet", "HEAD"], check=False)
        if head.returncode != 0 and self.is_repository():
            return []
        proc = self.run_git(["log", f"--max-count={max_count}", f"--format={LOG_FORMAT}"])

        commits = []
        for line in proc.stdout.splitlines():
            if not line.strip():
                continue
            commit_hash, _, date_str = line.partition("\x00")
            commits.append(Commit(hash=commit_hash, date=datetime.fromisoformat(date_str.strip())))
        return commits

    def current_branch(self) -> str | None:
        """Name of the checked-out branch, or None when HEAD is detached."""
        proc = self.run_git(["symbolic-ref", "--quiet", "--short", "HEAD"], check=False)
        if proc.returncode != 0:
            return None
        return proc.stdout.strip() or None

    def head_commit(self) -> str:
        return self.run_git(["rev-parse", "HEAD"]).stdout.strip()

    def checkout(self, ref: str) -> None:
        self.run_git(["checkout", "--quiet", ref])

    def stash_count(self) -> int:
        proc = self.run_git(["stash", "list"])
        return len([line for line in proc.stdout.splitlines() if line.strip()])

    def stash_push(self, message: str) -> bool:
        """
        Stash local modifications.

        Returns:
            True if a new stash entry was created, False if there was nothing to stash
        """
        before = self.stash_count()
        self.run_git(["stash", "push", "-m", message])
        return self.stash_count() > before

    def stash_pop(self) -> None:
        self.run_git(["stash", "pop"])


def ensure_dataset(path: Path, remote_url: str) -> GitRepository:
    """
    Clone the ranking dataset into ``path`` if it is not there yet.

    Args:
        path: Where the dataset checkout should live
        remote_url: Git URL to clone from

    Returns:
        GitRepository for the checkout

    Raises:
        GitCommandError: If the clone fails
    """
    repo = GitRepository(path)
    if repo.is_repository():
        return repo

    if path.exists() and any(path.iterdir()):
        raise GitCommandError(["clone", remote_url, str(path)], -1, f"{path} exists and is not a git checkout")

    logger.info(f"Cloning ranking dataset from {remote_url} into {path}...")
    path.parent.mkdir(parents=True, exist_ok=True)
    GitRepository(path.parent).run_git(["clone", remote_url, str(path.resolve())])
    logger.info("  Clone complete")
    return repo
