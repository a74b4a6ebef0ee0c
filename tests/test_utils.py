"""
Tests for shared utilities.
"""

import logging

import pandas as pd
import pytest

from rank_tracker.utils import (
    atomic_write_csv,
    atomic_write_text,
    format_country,
    setup_logging,
    validate_request,
    validate_theme,
)


class TestValidateRequest:
    """Tests for validate_request."""

    def test_accepts_defaults(self):
        validate_request("alice", 7, 10)

    @pytest.mark.parametrize("username", ["", "   ", "a b", "a/b", "<alice>"])
    def test_rejects_bad_usernames(self, username):
        with pytest.raises(ValueError):
            validate_request(username, 7, 10)

    def test_rejects_zero_days(self):
        with pytest.raises(ValueError, match="Days"):
            validate_request("alice", 0, 10)

    def test_rejects_too_many_commits(self):
        with pytest.raises(ValueError, match="Max commits"):
            validate_request("alice", 7, 10_000)


class TestValidateTheme:
    """Tests for validate_theme."""

    def test_known_themes(self):
        validate_theme("dark")
        validate_theme("light")

    def test_unknown_theme(self):
        with pytest.raises(ValueError, match="Allowed values: dark, light"):
            validate_theme("neon")


class TestFormatCountry:
    """Tests for format_country."""

    def test_underscores_become_spaces(self):
        assert format_country("bosnia_and_herzegovina") == "BOSNIA AND HERZEGOVINA"


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_single_handler(self):
        logger = setup_logging("rank_tracker.tests.logging")
        setup_logging("rank_tracker.tests.logging")
        assert len(logger.handlers) == 1

    def test_level(self):
        logger = setup_logging("rank_tracker.tests.level", level=logging.DEBUG)
        assert logger.level == logging.DEBUG


class TestAtomicWrites:
    """Tests for atomic file writes."""

    def test_csv(self, tmp_path):
        path = tmp_path / "nested" / "out.csv"
        atomic_write_csv(pd.DataFrame({"rank": [1, 2]}), path, index=False)
        assert path.read_text(encoding="utf-8").splitlines() == ["rank", "1", "2"]
        assert list(path.parent.iterdir()) == [path]

    def test_text(self, tmp_path):
        path = tmp_path / "report.html"
        atomic_write_text("<html></html>", path)
        assert path.read_text(encoding="utf-8") == "<html></html>"

    def test_failed_write_leaves_no_temp_file(self, tmp_path):
        class Boom:
            def to_csv(self, *args, **kwargs):
                raise RuntimeError("disk full")

            def __len__(self):
                return 0

        with pytest.raises(RuntimeError):
            atomic_write_csv(Boom(), tmp_path / "out.csv")
        assert list(tmp_path.iterdir()) == []
