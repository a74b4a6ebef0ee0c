"""
Ranking Table Extractor

Parses the HTML table embedded in a ranking markdown file (one category,
one country) and looks up a user's rank and metric value in it.

Rank is positional: every data row (a row with at least one <td> cell)
takes the next rank, whether or not its profile link can be read. Rows
without cells (the header, stray markup) take no rank.

Usage:
    from rank_tracker.ingestion.markdown_table import find_user_rank
    entry = find_user_rank(content, "octocat")
"""

from pathlib import Path

from rank_tracker.models import RankEntry, TableRow
from rank_tracker.utils import (
    setup_logging,
    TABLE_START_RE,
    CELL_RE,
    PROFILE_LINK_RE,
    CELL_TEXT_RE,
    parse_count,
)

# --- Module Logger ---
logger = setup_logging(__name__)


def parse_ranking_table(content: str) -> list[TableRow] | None:
    """
    Parse a ranking markdown document into ranked rows.

    Args:
        content: Raw markdown text of one category/country file

    Returns:
        List of TableRow in table order, or None if the document has no
        ranking table. An empty list means the table exists but has no rows.
    """
    m_table = TABLE_START_RE.search(content)
    if not m_table:
        return None

    # First chunk is the <table> opener, the header row has no <td> and is skipped below
    chunks = content[m_table.start():].split('<tr>')[1:]

    rows = []
    rank = 0
    for chunk in chunks:
        if not CELL_RE.search(chunk):
            continue
        rank += 1

        m_user = PROFILE_LINK_RE.search(chunk)
        username = m_user.group(1) if m_user else None

        cells = CELL_TEXT_RE.findall(chunk)
        value = parse_count(cells[-1]) if cells else None

        rows.append(TableRow(rank=rank, username=username, value=value))

    return rows


def find_user_rank(content: str, username: str) -> RankEntry | None:
    """
    Look up a user's rank and value in a ranking markdown document.

    The username comparison is exact (case-sensitive). The value comes from
    the last plain-text cell of the matching row, with thousands separators
    removed.

    Returns:
        RankEntry, or None if there is no table, the user is not listed, or
        the matching row has no readable value.
    """
    rows = parse_ranking_table(content)
    if rows is None:
        return None

    for row in rows:
        if row.username != username:
            continue
        if row.value is None:
            logger.debug(f"Row #{row.rank} for @{username} has no readable value")
            return None
        return RankEntry(rank=row.rank, value=row.value)

    return None


def read_user_rank(path: Path, username: str) -> RankEntry | None:
    """
    Read a ranking file from disk and look up a user in it.

    A missing or unreadable file is logged and treated as "not found".
    """
    try:
        content = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read {path}: {e}")
        return None

    return find_user_rank(content, username)
