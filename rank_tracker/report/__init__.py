"""
Progress Reports

Modules:
- console: Terminal report
- charts: Plotly HTML report
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "format_progress_report":
        from rank_tracker.report.console import format_progress_report
        return format_progress_report
    if name == "build_progress_figure":
        from rank_tracker.report.charts import build_progress_figure
        return build_progress_figure
    if name == "write_progress_report":
        from rank_tracker.report.charts import write_progress_report
        return write_progress_report
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
