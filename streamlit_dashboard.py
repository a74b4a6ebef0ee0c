import streamlit as st
import pandas as pd
from pathlib import Path

from rank_tracker.config import (
    CATEGORIES,
    CATEGORY_ICONS,
    CATEGORY_LABELS,
    CATEGORY_UNITS,
    DATASET_REMOTE_URL,
    DEFAULT_DATASET_PATH,
    DEFAULT_DAYS,
    DEFAULT_MAX_COMMITS,
    MAX_COMMITS,
    MAX_DAYS,
)
from rank_tracker.exceptions import TrackerError, UserNotFoundError, NoCommitsError, NoValidDataError
from rank_tracker.history.git_repo import ensure_dataset
from rank_tracker.models import snapshots_to_frame
from rank_tracker.report.charts import build_progress_figure
from rank_tracker.tracker import UserProgressTracker
from rank_tracker.utils import format_country

# --- Page Configuration ---
st.set_page_config(
    page_title="GitHub Rank Tracker",
    page_icon="📈",
    layout="wide",
    initial_sidebar_state="collapsed"
)


# --- Data Loading Functions ---
@st.cache_data(ttl=3600, show_spinner=False)
def load_progress(dataset_path, username, days, max_commits):
    """Run a tracking pass. Cached so reruns of the page do not walk the history again."""
    tracker = UserProgressTracker(Path(dataset_path))
    return tracker.track_user_progress(username, days, max_commits)


def get_theme_name():
    """'light' when Streamlit runs with the light base theme, otherwise 'dark'."""
    try:
        if st.get_option("theme.base") == "light":
            return "light"
    except Exception:
        pass
    return "dark"


def format_delta(value, unit):
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:,} {unit}"


def render_progress_cards(summary):
    """One st.metric per category: end rank, with rank change as the delta."""
    columns = st.columns(len(CATEGORIES))
    for col, category in zip(columns, CATEGORIES):
        record = summary.progress[category]
        label = f"{CATEGORY_ICONS[category]} {CATEGORY_LABELS[category]}"
        with col:
            if not record.has_data:
                st.metric(label, "No data")
                continue
            st.metric(
                label,
                f"#{record.end_rank}",
                delta=f"{record.rank_change:+d} ranks" if record.rank_change else "no change",
                delta_color="normal" if record.rank_change else "off",
            )
            st.caption(
                f"#{record.start_rank} → #{record.end_rank} · "
                f"{format_delta(record.count_change, CATEGORY_UNITS[category])}"
            )


def render_snapshot_table(summary):
    df = snapshots_to_frame(summary.snapshots)
    if df.empty:
        return
    df_display = pd.DataFrame({
        "Date": df["commit_date"].dt.strftime("%Y-%m-%d %H:%M"),
        "Commit": df["commit_hash"].str[:8],
    })
    for category in CATEGORIES:
        df_display[f"{CATEGORY_LABELS[category]} Rank"] = df[f"{category}_rank"]
        df_display[CATEGORY_LABELS[category]] = df[f"{category}_value"]

    st.dataframe(df_display, use_container_width=True, hide_index=True)
    st.download_button(
        "Download snapshots (CSV)",
        data=df.to_csv(index=False),
        file_name=f"{summary.username}-snapshots.csv",
        mime="text/csv",
    )


# --- Main App ---
def main():
    st.title("📈 GitHub Rank Tracker")
    st.caption("Follow a user's country ranking across the history of the top-github-users dataset.")

    # Deep link: ?user=octocat
    default_user = st.query_params.get("user", "")

    with st.form("track_form"):
        col_user, col_days, col_commits = st.columns([2, 1, 1])
        with col_user:
            username = st.text_input("GitHub username", value=default_user).strip()
        with col_days:
            days = st.number_input("Days", min_value=1, max_value=MAX_DAYS, value=DEFAULT_DAYS)
        with col_commits:
            max_commits = st.number_input("Max commits", min_value=1, max_value=MAX_COMMITS, value=DEFAULT_MAX_COMMITS)
        dataset_path = st.text_input("Dataset checkout", value=str(DEFAULT_DATASET_PATH))
        setup = st.checkbox("Clone the dataset if it is missing", value=False)
        submitted = st.form_submit_button("Track", type="primary")

    if not submitted or not username:
        if submitted:
            st.warning("Please enter a GitHub username.")
        return

    st.query_params["user"] = username

    try:
        if setup:
            with st.spinner("Cloning ranking dataset..."):
                ensure_dataset(Path(dataset_path), DATASET_REMOTE_URL)
        with st.spinner(f"Walking dataset history for @{username}..."):
            summary = load_progress(dataset_path, username, int(days), int(max_commits))
    except UserNotFoundError as e:
        st.error(f"{e}. Only the followers rankings are searched to find a user's country.")
        return
    except (NoCommitsError, NoValidDataError) as e:
        st.warning(str(e))
        return
    except TrackerError as e:
        st.error(f"Tracking failed: {e}")
        return

    st.subheader(f"@{summary.username} · {format_country(summary.country)}")
    st.caption(f"{summary.days_analyzed} days · {summary.commits_analyzed} commits analyzed")

    if not summary.restored:
        st.warning(
            f"The dataset checkout could not be returned to its original branch "
            f"(left at {summary.restore_target or 'an unknown position'})."
        )

    render_progress_cards(summary)

    fig = build_progress_figure(summary, theme=get_theme_name())
    fig.update_layout(width=None)
    st.plotly_chart(fig, use_container_width=True, config={'displayModeBar': False, 'scrollZoom': False})

    st.markdown("#### Historical Snapshots")
    render_snapshot_table(summary)


if __name__ == "__main__":
    main()
