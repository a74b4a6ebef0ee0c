"""
GitHub Rank Tracker - Core Package

This package contains the core modules for:
- Ranking markdown parsing and country lookup (rank_tracker.ingestion)
- Dataset history traversal (rank_tracker.history)
- Progress aggregation (rank_tracker.progress)
- Terminal and HTML reports (rank_tracker.report)
- Shared configuration and utilities
"""

from rank_tracker.config import *
