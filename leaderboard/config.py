"""
Central configuration for the Dealership Leaderboard.

All shared constants and configuration values should be defined here
to avoid duplication and ensure consistency across modules.
"""

from pathlib import Path

# --- Project Paths ---
PROJECT_ROOT = Path(__file__).parent.parent
OUTPUT_FOLDER = PROJECT_ROOT / "public"
DEFAULT_OUTPUT_PATH = OUTPUT_FOLDER / "index.html"

# --- Remote Source ---
# Published Google Sheet (File > Share > Publish to web > CSV)
SHEET_CSV_URL = (
    "https://docs.google.com/spreadsheets/d/e/"
    "2PACX-1vSLR7bXsB-PSdKArkvh4vrTP3QCXg9SkvXL7wYD49VFomRw0UqmQiXeRxkJJ0Ei7Fpo8rz5UgT25gCw"
    "/pub?gid=1152586903&single=true&output=csv"
)

# Tried in order. Empty prefix = direct request, others get the encoded URL appended.
PROXY_PREFIXES = (
    "",
    "https://corsproxy.io/?",
    "https://api.allorigins.win/raw?url=",
)

CSV_DELIMITER = ","

# --- Refresh ---
REFRESH_INTERVAL_SECONDS = 3600  # one hour

# --- Column Aliases (first non-empty wins) ---
FIRST_NAME_FIELDS = ("First Name", "First name", "First")
LAST_NAME_FIELDS = ("Last Name", "Last name", "Last")
GROUP_FIELDS = ("Dealership", "Dealer", "Company")
SCORE_FIELDS = ("Total Score", "Score", "Total")

# --- Display ---
PAGE_TITLE = "Leaderboard"
DISPLAY_SURFACE_ID = "leaderboard-body"

# Rank badge palette: (background, border, text)
RANK_BADGE_COLORS = {
    1: ("#3893B7", "#21A4D2", "#FCF7EF"),
    2: ("#E8F4F8", "#3893B7", "#3893B7"),
    3: ("#FCF7EF", "#21A4D2", "#21A4D2"),
}
DEFAULT_BADGE_COLORS = ("#3893B7", "#21A4D2", "#FCF7EF")

# Score badge colors, same for every rank
SCORE_BADGE_COLOR = "#21A4D2"
SCORE_BADGE_BACKGROUND = "#E8F4F8"
SCORE_BADGE_BORDER = "#21A4D2"
