"""
Ranking Markdown Ingestion

Modules:
- markdown_table: Parse a ranking table and look up a user's rank
- country_locator: Find the country whose rankings list a user
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "find_user_rank":
        from rank_tracker.ingestion.markdown_table import find_user_rank
        return find_user_rank
    if name == "parse_ranking_table":
        from rank_tracker.ingestion.markdown_table import parse_ranking_table
        return parse_ranking_table
    if name == "find_user_country":
        from rank_tracker.ingestion.country_locator import find_user_country
        return find_user_country
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
