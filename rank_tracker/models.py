"""
Data model for ranking snapshots and progress summaries.

All objects here are derived views built during one tracking run; nothing
is persisted between runs.
"""

from dataclasses import dataclass, field
from datetime import datetime

import pandas as pd

from rank_tracker.config import CATEGORIES, FOLLOWERS, PUBLIC_CONTRIBUTIONS, TOTAL_CONTRIBUTIONS


@dataclass(frozen=True)
class RankEntry:
    """A user's position and metric value in one ranking table."""
    rank: int
    value: int


@dataclass(frozen=True)
class TableRow:
    """One data row of a ranking table. username/value are None when unreadable."""
    rank: int
    username: str | None
    value: int | None


@dataclass(frozen=True)
class Commit:
    hash: str
    date: datetime

    @property
    def short_hash(self) -> str:
        return self.hash[:8]


@dataclass
class Snapshot:
    """The user's rankings as recorded at one dataset commit."""
    commit_hash: str
    commit_date: datetime
    country: str
    entries: dict[str, RankEntry] = field(default_factory=dict)

    def rank(self, category: str) -> int | None:
        entry = self.entries.get(category)
        return entry.rank if entry else None

    def value(self, category: str) -> int | None:
        entry = self.entries.get(category)
        return entry.value if entry else None

    @property
    def is_valid(self) -> bool:
        """True when at least one category produced a rank."""
        return any(self.rank(category) is not None for category in CATEGORIES)

    def to_dict(self) -> dict:
        row = {
            'commit_hash': self.commit_hash,
            'commit_date': self.commit_date.isoformat(),
            'country': self.country,
        }
        for category in CATEGORIES:
            row[f'{category}_rank'] = self.rank(category)
            row[f'{category}_value'] = self.value(category)
        return row


@dataclass(frozen=True)
class ProgressRecord:
    """
    Change in one category between the earliest and latest valid snapshot.

    rank_change is start_rank - end_rank, so a positive number means the user
    climbed. count_change is end_value - start_value. Both are 0 when either
    endpoint is missing.
    """
    rank_change: int = 0
    count_change: int = 0
    start_rank: int | None = None
    end_rank: int | None = None
    start_value: int | None = None
    end_value: int | None = None

    @property
    def has_data(self) -> bool:
        return self.start_rank is not None and self.end_rank is not None

    @property
    def direction(self) -> str:
        if self.rank_change > 0:
            return "up"
        if self.rank_change < 0:
            return "down"
        return "flat"

    def to_dict(self) -> dict:
        return {
            'rank_change': self.rank_change,
            'count_change': self.count_change,
            'start_rank': self.start_rank,
            'end_rank': self.end_rank,
            'start_value': self.start_value,
            'end_value': self.end_value,
        }


@dataclass
class WalkResult:
    """Snapshots collected by a history walk plus the outcome of restoring the checkout."""
    snapshots: list[Snapshot]
    restored: bool = True
    restore_target: str | None = None


@dataclass
class ProgressSummary:
    username: str
    country: str
    days_analyzed: int
    commits_analyzed: int
    progress: dict[str, ProgressRecord]
    snapshots: list[Snapshot]
    restored: bool = True
    restore_target: str | None = None

    @property
    def followers_progress(self) -> ProgressRecord:
        return self.progress[FOLLOWERS]

    @property
    def public_contributions_progress(self) -> ProgressRecord:
        return self.progress[PUBLIC_CONTRIBUTIONS]

    @property
    def total_contributions_progress(self) -> ProgressRecord:
        return self.progress[TOTAL_CONTRIBUTIONS]

    def to_dict(self) -> dict:
        return {
            'username': self.username,
            'country': self.country,
            'days_analyzed': self.days_analyzed,
            'commits_analyzed': self.commits_analyzed,
            'progress': {c: r.to_dict() for c, r in self.progress.items()},
            'snapshots': [s.to_dict() for s in self.snapshots],
            'restored': self.restored,
            'restore_target': self.restore_target,
        }


def snapshots_to_frame(snapshots: list[Snapshot]) -> pd.DataFrame:
    """
    Flatten snapshots into a DataFrame, one row per commit, oldest first.

    Columns: commit_hash, commit_date, country, and <category>_rank /
    <category>_value for every category (nullable integers).
    """
    columns = ['commit_hash', 'commit_date', 'country']
    for category in CATEGORIES:
        columns += [f'{category}_rank', f'{category}_value']

    df = pd.DataFrame([s.to_dict() for s in snapshots], columns=columns)
    if df.empty:
        return df

    df['commit_date'] = pd.to_datetime(df['commit_date'], utc=True)
    for col in columns[3:]:
        df[col] = df[col].astype('Int64')

    return df.sort_values('commit_date').reset_index(drop=True)
