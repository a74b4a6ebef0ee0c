"""
Plain-text progress report for the terminal.
"""

from rank_tracker.config import (
    CATEGORIES,
    CATEGORY_ICONS,
    CATEGORY_LABELS,
    CATEGORY_UNITS,
    SNAPSHOT_PREVIEW_ROWS,
)
from rank_tracker.models import ProgressRecord, ProgressSummary, Snapshot
from rank_tracker.utils import format_country

DIRECTION_SYMBOLS = {"up": "⬆️", "down": "⬇️", "flat": "➡️"}


def describe_rank_change(rank_change: int) -> str:
    if rank_change > 0:
        return f"improved by {rank_change}"
    if rank_change < 0:
        return f"declined by {abs(rank_change)}"
    return "no change"


def format_category(category: str, record: ProgressRecord) -> list[str]:
    label = CATEGORY_LABELS[category].upper()
    lines = [f"{CATEGORY_ICONS[category]} {label} RANKING:"]

    if not record.has_data:
        lines.append(f"   ⚠️  No {label.lower()} ranking data found")
        return lines

    symbol = DIRECTION_SYMBOLS[record.direction]
    lines.append(
        f"   Rank: #{record.start_rank} → #{record.end_rank} {symbol} "
        f"({describe_rank_change(record.rank_change)})"
    )
    sign = '+' if record.count_change >= 0 else ''
    lines.append(f"   Count: {sign}{record.count_change} {CATEGORY_UNITS[category]}")
    return lines


def _rank_cell(snapshot: Snapshot, category: str) -> str:
    rank = snapshot.rank(category)
    return f"#{rank:>3}" if rank is not None else "  - "


def format_snapshot_table(snapshots: list[Snapshot], limit: int = SNAPSHOT_PREVIEW_ROWS) -> list[str]:
    if not snapshots:
        return []

    lines = [
        "📈 HISTORICAL SNAPSHOTS:",
        "   Date       | Followers | Public | Total  | Commit",
        "   -----------|-----------|--------|--------|----------",
    ]
    for snapshot in snapshots[:limit]:
        lines.append(
            f"   {snapshot.commit_date.date().isoformat()} | "
            f"{_rank_cell(snapshot, CATEGORIES[0]):<9} | "
            f"{_rank_cell(snapshot, CATEGORIES[1]):<6} | "
            f"{_rank_cell(snapshot, CATEGORIES[2]):<6} | "
            f"{snapshot.commit_hash[:8]}"
        )
    if len(snapshots) > limit:
        lines.append(f"   ... and {len(snapshots) - limit} more snapshots")
    return lines


def format_progress_report(summary: ProgressSummary) -> str:
    """Render a ProgressSummary as the multi-line terminal report."""
    lines = [
        "=" * 60,
        f"📊 PROGRESS REPORT FOR @{summary.username.upper()}",
        "=" * 60,
        f"🌍 Country: {format_country(summary.country)}",
        f"📅 Period: {summary.days_analyzed} days ({summary.commits_analyzed} commits analyzed)",
        "",
    ]

    for category in CATEGORIES:
        lines += format_category(category, summary.progress[category])
        lines.append("")

    lines += format_snapshot_table(summary.snapshots)

    if not summary.restored:
        lines += [
            "",
            f"⚠️  Dataset checkout left at {summary.restore_target or 'an unknown position'}; "
            "it could not be returned to its original branch",
        ]

    return "\n".join(lines)
