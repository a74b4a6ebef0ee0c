"""
Tests for locating a user's country from the followers rankings.
"""

from rank_tracker.config import FOLLOWERS, MARKDOWN_SUBPATH, PUBLIC_CONTRIBUTIONS, TOTAL_CONTRIBUTIONS
from rank_tracker.ingestion.country_locator import find_user_country, ranking_file
from rank_tracker.utils import profile_link_pattern

from conftest import ranking_markdown, write_rankings


class TestProfileLinkPattern:
    """Tests for profile_link_pattern."""

    def test_matches_exact_link(self):
        assert profile_link_pattern("alice").search('<a href="https://github.com/alice">')

    def test_case_insensitive(self):
        assert profile_link_pattern("ALICE").search('<a href="https://github.com/alice">')

    def test_no_prefix_match(self):
        assert profile_link_pattern("ali").search('<a href="https://github.com/alice">') is None

    def test_escapes_regex_characters(self):
        assert profile_link_pattern("a.b").search('<a href="https://github.com/axb">') is None


class TestRankingFile:
    """Tests for ranking_file."""

    def test_layout(self, tmp_path):
        path = ranking_file(tmp_path, FOLLOWERS, "wonderland")
        assert path == tmp_path / "followers" / "wonderland.md"


class TestFindUserCountry:
    """Tests for find_user_country function."""

    def test_finds_country(self, tmp_path):
        write_rankings(tmp_path, {
            (FOLLOWERS, "oz"): ranking_markdown([("dorothy", "10")]),
            (FOLLOWERS, "wonderland"): ranking_markdown([("alice", "100")]),
        })
        markdown_dir = tmp_path / MARKDOWN_SUBPATH
        assert find_user_country(markdown_dir, "alice", ["oz", "wonderland"]) == "wonderland"

    def test_first_country_in_list_order_wins(self, tmp_path):
        write_rankings(tmp_path, {
            (FOLLOWERS, "oz"): ranking_markdown([("alice", "10")]),
            (FOLLOWERS, "wonderland"): ranking_markdown([("alice", "100")]),
        })
        markdown_dir = tmp_path / MARKDOWN_SUBPATH
        assert find_user_country(markdown_dir, "alice", ["wonderland", "oz"]) == "wonderland"
        assert find_user_country(markdown_dir, "alice", ["oz", "wonderland"]) == "oz"

    def test_lookup_is_case_insensitive(self, tmp_path):
        write_rankings(tmp_path, {(FOLLOWERS, "wonderland"): ranking_markdown([("Alice", "100")])})
        assert find_user_country(tmp_path / MARKDOWN_SUBPATH, "alice", ["wonderland"]) == "wonderland"

    def test_missing_files_are_skipped(self, tmp_path):
        write_rankings(tmp_path, {(FOLLOWERS, "wonderland"): ranking_markdown([("alice", "100")])})
        countries = ["atlantis", "el_dorado", "wonderland"]
        assert find_user_country(tmp_path / MARKDOWN_SUBPATH, "alice", countries) == "wonderland"

    def test_only_followers_ranking_is_consulted(self, tmp_path):
        write_rankings(tmp_path, {
            (FOLLOWERS, "wonderland"): ranking_markdown([("bob", "100")]),
            (PUBLIC_CONTRIBUTIONS, "wonderland"): ranking_markdown([("alice", "900")]),
            (TOTAL_CONTRIBUTIONS, "wonderland"): ranking_markdown([("alice", "950")]),
        })
        assert find_user_country(tmp_path / MARKDOWN_SUBPATH, "alice", ["wonderland"]) is None

    def test_not_found(self, tmp_path):
        write_rankings(tmp_path, {(FOLLOWERS, "wonderland"): ranking_markdown([("alice", "100")])})
        assert find_user_country(tmp_path / MARKDOWN_SUBPATH, "mallory", ["wonderland"]) is None

    def test_missing_markdown_tree(self, tmp_path):
        assert find_user_country(tmp_path / "nowhere", "alice") is None
