"""
Progress Aggregation

Modules:
- aggregator: Earliest-vs-latest rank and value changes per category
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "calculate_progress_summary":
        from rank_tracker.progress.aggregator import calculate_progress_summary
        return calculate_progress_summary
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
