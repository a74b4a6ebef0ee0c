"""
Country Locator

Finds which country's rankings a user belongs to by scanning the followers
ranking of each country in COUNTRIES order. Only the followers ranking is
consulted: a user listed solely in a contributions ranking is not located.
"""

from pathlib import Path
from typing import Iterable

from rank_tracker.config import COUNTRIES, LOCATOR_CATEGORY, MARKDOWN_SUFFIX
from rank_tracker.utils import setup_logging, profile_link_pattern

# --- Module Logger ---
logger = setup_logging(__name__)


def ranking_file(markdown_dir: Path, category: str, country: str) -> Path:
    """Path of one category/country ranking file."""
    return markdown_dir / category / f"{country}{MARKDOWN_SUFFIX}"


def find_user_country(
    markdown_dir: Path,
    username: str,
    countries: Iterable[str] = COUNTRIES,
) -> str | None:
    """
    Return the first country whose followers ranking links to the user.

    This is a containment test on the raw text (case-insensitive), not a
    table parse. Missing or unreadable files are skipped.

    Args:
        markdown_dir: Root of the ranking markdown tree
        username: GitHub username to locate
        countries: Countries to scan, in order

    Returns:
        Country slug, or None if no followers ranking mentions the user
    """
    pattern = profile_link_pattern(username)

    for country in countries:
        path = ranking_file(markdown_dir, LOCATOR_CATEGORY, country)
        try:
            content = path.read_text(encoding='utf-8')
        except FileNotFoundError:
            continue
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Skipping unreadable {path}: {e}")
            continue

        if pattern.search(content):
            return country

    return None
