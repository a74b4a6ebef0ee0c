"""
Visual progress report built with Plotly.

One row of indicator cards (rank change per category) above one line chart
per category showing the raw value over time. Charts are only drawn for
categories with at least two snapshots carrying a value.
"""

from datetime import date
from pathlib import Path

import plotly.graph_objects as go
from plotly.subplots import make_subplots

from rank_tracker.config import (
    ACCENT_COLORS,
    CATEGORIES,
    CATEGORY_ICONS,
    CATEGORY_LABELS,
    DARK_THEME,
    LIGHT_THEME,
    OUTPUT_FOLDER,
)
from rank_tracker.models import ProgressRecord, ProgressSummary, snapshots_to_frame
from rank_tracker.utils import atomic_write_text, format_country, setup_logging, validate_theme

# --- Module Logger ---
logger = setup_logging(__name__)

SYSTEM_FONT = '-apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif'


def get_theme_colors(theme: str = "dark") -> dict:
    validate_theme(theme)
    return {**ACCENT_COLORS, **(DARK_THEME if theme == "dark" else LIGHT_THEME)}


def rank_caption(record: ProgressRecord) -> str:
    if not record.has_data:
        return "No data"
    return f"#{record.start_rank} → #{record.end_rank}"


def chartable_categories(summary: ProgressSummary) -> list[str]:
    """Categories with at least two snapshots that carry a value."""
    df = snapshots_to_frame(summary.snapshots)
    if df.empty:
        return []
    return [c for c in CATEGORIES if df[f'{c}_value'].notna().sum() >= 2]


def apply_plotly_style(fig, colors: dict):
    """Apply consistent fonts, colors and grid styling to a report figure."""
    fig.update_layout(
        paper_bgcolor=colors["background"],
        plot_bgcolor=colors["background"],
        font=dict(family=SYSTEM_FONT, size=14, color=colors["text"]),
        hoverlabel=dict(font=dict(family=SYSTEM_FONT, size=13)),
        showlegend=False,
    )
    fig.update_xaxes(gridcolor=colors["grid"], zeroline=False)
    fig.update_yaxes(gridcolor=colors["grid"], zeroline=False)
    return fig


def build_progress_figure(summary: ProgressSummary, theme: str = "dark") -> go.Figure:
    """
    Build the progress report figure.

    Args:
        summary: Result of a tracking run
        theme: "dark" or "light"

    Returns:
        Plotly Figure
    """
    colors = get_theme_colors(theme)
    charted = chartable_categories(summary)
    has_charts = bool(charted)

    fig = make_subplots(
        rows=2 if has_charts else 1,
        cols=3,
        specs=[[{"type": "indicator"} for _ in CATEGORIES]]
        + ([[{"type": "xy"} for _ in CATEGORIES]] if has_charts else []),
        row_heights=[0.35, 0.65] if has_charts else None,
        vertical_spacing=0.15,
        subplot_titles=(
            [""] * 3 + [f"{CATEGORY_ICONS[c]} {CATEGORY_LABELS[c]}" for c in CATEGORIES]
            if has_charts else None
        ),
    )

    for col, category in enumerate(CATEGORIES, start=1):
        record = summary.progress[category]
        fig.add_trace(
            go.Indicator(
                mode="number+delta",
                value=record.end_rank if record.has_data else None,
                number=dict(prefix="#", font=dict(size=36)),
                delta=dict(
                    reference=record.start_rank,
                    increasing=dict(color=colors["down"]),  # A larger rank number is a decline
                    decreasing=dict(color=colors["up"]),
                ) if record.has_data else None,
                title=dict(
                    text=(
                        f"{CATEGORY_ICONS[category]} {CATEGORY_LABELS[category].upper()}"
                        f"<br><span style='font-size:0.8em;color:{colors['muted']}'>{rank_caption(record)}</span>"
                    )
                ),
            ),
            row=1,
            col=col,
        )

    if has_charts:
        df = snapshots_to_frame(summary.snapshots)
        for col, category in enumerate(CATEGORIES, start=1):
            if category not in charted:
                continue
            df_chart = df[df[f'{category}_value'].notna()]
            fig.add_trace(
                go.Scatter(
                    x=df_chart['commit_date'],
                    y=df_chart[f'{category}_value'].astype(int),
                    mode="lines+markers",
                    line=dict(color=colors[category], width=3),
                    customdata=df_chart[f'{category}_rank'].astype('float'),
                    hovertemplate='%{x|%b %d, %Y}<br>%{y:,}<br>Rank #%{customdata}<extra></extra>',
                ),
                row=2,
                col=col,
            )

    apply_plotly_style(fig, colors)
    fig.update_layout(
        title=dict(
            text=(
                f"GitHub Progress Report<br><sup>@{summary.username} • "
                f"{format_country(summary.country)} • {summary.days_analyzed} days analyzed</sup>"
            ),
            x=0.5,
        ),
        height=600 if has_charts else 320,
        width=900,
        margin=dict(l=40, r=40, t=100, b=60),
    )
    fig.add_annotation(
        text=f"Generated by GitHub User Rank Tracker • {date.today().isoformat()}",
        x=0.5, y=-0.12, xref="paper", yref="paper", showarrow=False,
        font=dict(size=11, color=colors["muted"]),
    )
    return fig


def write_progress_report(
    summary: ProgressSummary,
    output_folder: Path = OUTPUT_FOLDER,
    theme: str = "dark",
) -> Path:
    """
    Write the progress report as a standalone HTML file.

    Returns:
        Path to ``<output_folder>/<username>-rank-progress.html``
    """
    fig = build_progress_figure(summary, theme=theme)
    path = Path(output_folder) / f"{summary.username}-rank-progress.html"
    atomic_write_text(fig.to_html(include_plotlyjs="cdn", full_html=True), path)
    logger.info(f"Progress report saved to: {path}")
    return path
