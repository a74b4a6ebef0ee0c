"""
Central configuration for the GitHub rank tracker.

All shared constants and configuration values should be defined here
to avoid duplication and ensure consistency across modules.
"""

from pathlib import Path

# --- Project Paths ---
PROJECT_ROOT = Path(__file__).parent.parent
DEFAULT_DATASET_PATH = PROJECT_ROOT / "dataset"
OUTPUT_FOLDER = PROJECT_ROOT / "output"

# Location of the ranking markdown inside the dataset checkout:
# <dataset>/<MARKDOWN_SUBPATH>/<category>/<country>.md
MARKDOWN_SUBPATH = Path("src") / "top-github-users" / "markdown"
MARKDOWN_SUFFIX = ".md"

# Remote of the public ranking dataset (only used by the optional bootstrap)
DATASET_REMOTE_URL = "https://github.com/gayanvoice/top-github-users.git"

# --- Ranking Categories ---
FOLLOWERS = "followers"
PUBLIC_CONTRIBUTIONS = "public_contributions"
TOTAL_CONTRIBUTIONS = "total_contributions"
CATEGORIES = (FOLLOWERS, PUBLIC_CONTRIBUTIONS, TOTAL_CONTRIBUTIONS)

# Country membership is decided from this category only
LOCATOR_CATEGORY = FOLLOWERS

CATEGORY_LABELS = {
    FOLLOWERS: "Followers",
    PUBLIC_CONTRIBUTIONS: "Public Contributions",
    TOTAL_CONTRIBUTIONS: "Total Contributions",
}
CATEGORY_UNITS = {
    FOLLOWERS: "followers",
    PUBLIC_CONTRIBUTIONS: "contributions",
    TOTAL_CONTRIBUTIONS: "contributions",
}
CATEGORY_ICONS = {
    FOLLOWERS: "👥",
    PUBLIC_CONTRIBUTIONS: "🔓",
    TOTAL_CONTRIBUTIONS: "📊",
}

# --- Countries (scan order) ---
COUNTRIES = (
    "afghanistan", "albania", "algeria", "andorra", "angola", "argentina", "armenia",
    "australia", "austria", "azerbaijan", "bahrain", "bangladesh", "belarus", "belgium",
    "benin", "bhutan", "bolivia", "bosnia_and_herzegovina", "botswana", "brazil",
    "bulgaria", "burkina_faso", "burundi", "cambodia", "cameroon", "canada", "chad",
    "chile", "china", "colombia", "congo", "croatia", "cuba", "cyprus", "czechia",
    "denmark", "dominican_republic", "ecuador", "egypt", "el_salvador", "estonia",
    "ethiopia", "finland", "france", "georgia", "germany", "ghana", "greece",
    "guatemala", "honduras", "hong_kong", "hungary", "iceland", "india", "indonesia",
    "iran", "iraq", "ireland", "israel", "italy", "jamaica", "japan", "jordan",
    "kazakhstan", "kenya", "kuwait", "laos", "latvia", "lebanon", "lithuania",
    "luxembourg", "madagascar", "malawi", "malaysia", "maldives", "mali", "malta",
    "mauritania", "mauritius", "mexico", "moldova", "mongolia", "montenegro", "morocco",
    "myanmar", "namibia", "nepal", "netherlands", "new_zealand", "nicaragua", "nigeria",
    "norway", "oman", "pakistan", "palestine", "panama", "paraguay", "peru",
    "philippines", "poland", "portugal", "qatar", "romania", "russia", "rwanda",
    "san_marino", "saudi_arabia", "senegal", "serbia", "sierra_leone", "singapore",
    "slovakia", "slovenia", "south_africa", "south_korea", "spain", "sri_lanka", "sudan",
    "sweden", "switzerland", "syria", "taiwan", "tanzania", "thailand", "tunisia",
    "turkey", "uganda", "ukraine", "united_arab_emirates", "united_kingdom",
    "united_states", "uruguay", "uzbekistan", "venezuela", "vietnam", "yemen", "zambia",
    "zimbabwe",
)

# --- Request Defaults ---
DEFAULT_DAYS = 7  # Lookback window
DEFAULT_MAX_COMMITS = 10  # Most recent commits considered
MAX_DAYS = 3650
MAX_COMMITS = 500

# When no commit falls inside the window, use this many recent commits instead
FALLBACK_COMMIT_COUNT = 3

# --- Git Configuration ---
FALLBACK_BRANCHES = ("main", "master")  # Tried in order when restore fails
STASH_MESSAGE = "Auto-stash for user progress tracking"
GIT_TIMEOUT_SECONDS = 120

# --- Report Configuration ---
SNAPSHOT_PREVIEW_ROWS = 5  # Snapshots printed by the console report
ALLOWED_THEMES = frozenset({"dark", "light"})

ACCENT_COLORS = {
    "up": "#22c55e",
    "down": "#ef4444",
    "flat": "#6b7280",
    FOLLOWERS: "#22c55e",
    PUBLIC_CONTRIBUTIONS: "#3b82f6",
    TOTAL_CONTRIBUTIONS: "#f59e0b",
}
DARK_THEME = {
    "background": "#0f172a",
    "card": "#1e293b",
    "text": "#f8fafc",
    "muted": "#94a3b8",
    "grid": "rgba(148, 163, 184, 0.2)",
}
LIGHT_THEME = {
    "background": "#ffffff",
    "card": "#f1f5f9",
    "text": "#0f172a",
    "muted": "#475569",
    "grid": "rgba(71, 85, 105, 0.2)",
}
