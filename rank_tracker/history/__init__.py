"""
Dataset History

Modules:
- git_repo: Git access for the dataset checkout
- commits: Commit selection for a lookback window
- walker: Per-commit snapshot collection with guaranteed restore
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "GitRepository":
        from rank_tracker.history.git_repo import GitRepository
        return GitRepository
    if name == "get_commits_for_time_range":
        from rank_tracker.history.commits import get_commits_for_time_range
        return get_commits_for_time_range
    if name == "collect_snapshots":
        from rank_tracker.history.walker import collect_snapshots
        return collect_snapshots
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
