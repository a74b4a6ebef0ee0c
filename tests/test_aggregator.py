"""
Tests for progress aggregation.
"""

from datetime import datetime, timedelta, timezone

import pytest

from rank_tracker.config import CATEGORIES, FOLLOWERS, PUBLIC_CONTRIBUTIONS, TOTAL_CONTRIBUTIONS
from rank_tracker.exceptions import NoValidDataError
from rank_tracker.models import ProgressRecord, RankEntry, Snapshot
from rank_tracker.progress.aggregator import (
    calculate_count_change,
    calculate_progress_summary,
    calculate_rank_change,
)

BASE = datetime(2025, 6, 1, tzinfo=timezone.utc)


def snapshot(day, **entries):
    """snapshot(3, followers=(5, 100)) -> Snapshot on BASE + 3 days."""
    return Snapshot(
        commit_hash=f"{day:040x}",
        commit_date=BASE + timedelta(days=day),
        country="wonderland",
        entries={category: RankEntry(*pair) for category, pair in entries.items()},
    )


class TestCalculateRankChange:
    """Tests for calculate_rank_change function."""

    def test_improvement_is_positive(self):
        assert calculate_rank_change(5, 3) == 2

    def test_decline_is_negative(self):
        assert calculate_rank_change(3, 8) == -5

    def test_missing_start(self):
        assert calculate_rank_change(None, 3) == 0

    def test_missing_end(self):
        assert calculate_rank_change(5, None) == 0


class TestCalculateCountChange:
    """Tests for calculate_count_change function."""

    def test_growth(self):
        assert calculate_count_change(100, 140) == 40

    def test_loss(self):
        assert calculate_count_change(140, 100) == -40

    def test_missing_endpoint(self):
        assert calculate_count_change(None, 140) == 0


class TestCalculateProgressSummary:
    """Tests for calculate_progress_summary function."""

    def test_alice_in_wonderland(self):
        snapshots = [
            snapshot(6, followers=(3, 140)),
            snapshot(3, followers=(4, 120)),
            snapshot(0, followers=(5, 100)),
        ]
        summary = calculate_progress_summary("alice", "wonderland", 7, snapshots)

        assert summary.followers_progress == ProgressRecord(
            rank_change=2, count_change=40, start_rank=5, end_rank=3, start_value=100, end_value=140,
        )
        assert summary.username == "alice"
        assert summary.country == "wonderland"
        assert summary.days_analyzed == 7
        assert summary.commits_analyzed == 3

    def test_uses_endpoints_not_steps(self):
        snapshots = [
            snapshot(0, followers=(5, 100)),
            snapshot(1, followers=(50, 10)),
            snapshot(2, followers=(4, 110)),
        ]
        summary = calculate_progress_summary("alice", "wonderland", 7, snapshots)
        assert summary.followers_progress.rank_change == 1
        assert summary.followers_progress.count_change == 10

    def test_single_snapshot_has_zero_deltas(self):
        summary = calculate_progress_summary(
            "alice", "wonderland", 7,
            [snapshot(0, followers=(5, 100), public_contributions=(9, 50), total_contributions=(7, 80))],
        )
        for category in CATEGORIES:
            record = summary.progress[category]
            assert record.rank_change == 0
            assert record.count_change == 0
            assert record.start_rank == record.end_rank

    def test_no_valid_snapshots_raises(self):
        with pytest.raises(NoValidDataError):
            calculate_progress_summary("alice", "wonderland", 7, [snapshot(0), snapshot(1)])

    def test_empty_list_raises(self):
        with pytest.raises(NoValidDataError):
            calculate_progress_summary("alice", "wonderland", 7, [])

    def test_invalid_snapshots_are_ignored_for_endpoints(self):
        snapshots = [
            snapshot(0),
            snapshot(1, followers=(5, 100)),
            snapshot(2, followers=(3, 140)),
            snapshot(3),
        ]
        summary = calculate_progress_summary("alice", "wonderland", 7, snapshots)
        assert summary.followers_progress.start_rank == 5
        assert summary.followers_progress.end_rank == 3
        assert summary.commits_analyzed == 2
        assert len(summary.snapshots) == 4

    def test_snapshots_are_sorted_oldest_first(self):
        snapshots = [snapshot(2, followers=(3, 140)), snapshot(0, followers=(5, 100))]
        summary = calculate_progress_summary("alice", "wonderland", 7, snapshots)
        assert [s.commit_date for s in summary.snapshots] == sorted(s.commit_date for s in snapshots)

    def test_missing_endpoint_category_has_zero_delta(self):
        snapshots = [
            snapshot(0, followers=(5, 100)),
            snapshot(1, followers=(3, 140), public_contributions=(2, 900)),
        ]
        summary = calculate_progress_summary("alice", "wonderland", 7, snapshots)

        public = summary.progress[PUBLIC_CONTRIBUTIONS]
        assert public.rank_change == 0
        assert public.count_change == 0
        assert public.start_rank is None
        assert public.end_rank == 2
        assert not public.has_data

        total = summary.progress[TOTAL_CONTRIBUTIONS]
        assert total == ProgressRecord()

    def test_is_idempotent(self):
        snapshots = [
            snapshot(0, followers=(5, 100), total_contributions=(9, 1000)),
            snapshot(4, followers=(3, 140), total_contributions=(8, 1100)),
        ]
        first = calculate_progress_summary("alice", "wonderland", 7, snapshots)
        second = calculate_progress_summary("alice", "wonderland", 7, snapshots)
        assert first.progress == second.progress


class TestProgressRecord:
    """Tests for ProgressRecord helpers."""

    def test_direction(self):
        assert ProgressRecord(rank_change=2).direction == "up"
        assert ProgressRecord(rank_change=-1).direction == "down"
        assert ProgressRecord().direction == "flat"

    def test_followers_accessor(self):
        summary = calculate_progress_summary("alice", "wonderland", 7, [snapshot(0, followers=(1, 10))])
        assert summary.followers_progress is summary.progress[FOLLOWERS]
