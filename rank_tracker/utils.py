"""
Shared utilities for the GitHub rank tracker.

This module provides common functions used across multiple modules
to avoid code duplication.
"""

import logging
import re
import shutil
import tempfile
from pathlib import Path

from rank_tracker.config import ALLOWED_THEMES, MAX_COMMITS, MAX_DAYS

# --- Shared Regex Patterns for Ranking Markdown ---
# Table header: <table> <tr> <th>#</th> (whitespace between tags is free-form)
TABLE_START_RE = re.compile(r"<table>\s*<tr>\s*<th>#</th>")

# Data cell opening tag: <td> or <td align="...">
CELL_RE = re.compile(r"<td[\s>]")

# Profile link: <a href="https://github.com/username"
PROFILE_LINK_RE = re.compile(r'<a href="https://github\.com/([^"]+)"')

# Plain-text cell content: <td ...>text</td>
CELL_TEXT_RE = re.compile(r"<td[^>]*>([^<]+)</td>")

# Integer with optional thousands separators: 12,345
NUMBER_RE = re.compile(r"^\s*([0-9][0-9,]*)\s*$")


def profile_link_pattern(username: str) -> re.Pattern:
    """Build a case-insensitive pattern matching a profile link to ``username``."""
    return re.compile(
        r'<a href="https://github\.com/' + re.escape(username) + '"',
        re.IGNORECASE,
    )


def parse_count(text: str) -> int | None:
    """Parse '12,345' into 12345. Returns None for anything that is not a plain count."""
    m = NUMBER_RE.match(text)
    if not m:
        return None
    return int(m.group(1).replace(",", ""))


def format_country(country: str) -> str:
    """'united_states' -> 'UNITED STATES'."""
    return country.replace("_", " ").upper()


# --- Logging Setup ---
def setup_logging(name: str | None = None, level: int = logging.INFO) -> logging.Logger:
    """
    Configure and return a logger with consistent formatting.

    Args:
        name: Logger name (usually __name__ from the calling module)
        level: Logging level (default: INFO)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


# --- File Operations ---
def _atomic_write(path: Path, suffix: str, write) -> None:
    """Write to a temp file in the target folder, then move it into place."""
    path.parent.mkdir(parents=True, exist_ok=True)

    tmp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            mode='w',
            delete=False,
            suffix=suffix,
            dir=path.parent,  # Same filesystem for atomic move
            encoding='utf-8',
        ) as tmp:
            tmp_path = Path(tmp.name)
            write(tmp)

        shutil.move(str(tmp_path), str(path))

    except Exception:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise


def atomic_write_csv(df, path: Path, **kwargs) -> None:
    """
    Write a DataFrame to CSV atomically using a temporary file.

    This prevents a half-written export if the write is interrupted.

    Args:
        df: pandas DataFrame to write
        path: Destination path for the CSV file
        **kwargs: Additional arguments to pass to df.to_csv()
    """
    logger = setup_logging(__name__)
    _atomic_write(path, '.csv', lambda fh: df.to_csv(fh, **kwargs))
    logger.debug(f"Atomically wrote {len(df)} rows to {path}")


def atomic_write_text(text: str, path: Path) -> None:
    """Write a text document (HTML report, JSON summary) atomically."""
    logger = setup_logging(__name__)
    _atomic_write(path, path.suffix or '.tmp', lambda fh: fh.write(text))
    logger.debug(f"Atomically wrote {len(text):,} characters to {path}")


# --- Validation ---
def validate_request(username: str, days: int, max_commits: int) -> None:
    """
    Validate tracking request parameters.

    Args:
        username: GitHub username to track
        days: Lookback window in days
        max_commits: Maximum number of commits to inspect

    Raises:
        ValueError: If any parameter is out of range
    """
    if not username or not username.strip():
        raise ValueError("Username is required")
    if any(ch in username for ch in '"<>/ '):
        raise ValueError(f"Invalid username: '{username}'")
    if not 1 <= days <= MAX_DAYS:
        raise ValueError(f"Days must be between 1 and {MAX_DAYS}, got {days}")
    if not 1 <= max_commits <= MAX_COMMITS:
        raise ValueError(f"Max commits must be between 1 and {MAX_COMMITS}, got {max_commits}")


def validate_theme(theme: str) -> None:
    """
    Validate that a report theme name is allowed.

    Raises:
        ValueError: If theme is not in ALLOWED_THEMES
    """
    if theme not in ALLOWED_THEMES:
        raise ValueError(
            f"Invalid theme: '{theme}'. "
            f"Allowed values: {', '.join(sorted(ALLOWED_THEMES))}"
        )


__all__ = [
    # Logging
    'setup_logging',
    # File operations
    'atomic_write_csv',
    'atomic_write_text',
    # Validation
    'validate_request',
    'validate_theme',
    # Ranking markdown parsing
    'TABLE_START_RE',
    'CELL_RE',
    'PROFILE_LINK_RE',
    'CELL_TEXT_RE',
    'profile_link_pattern',
    'parse_count',
    'format_country',
]
