from datetime import datetime, timedelta

import streamlit as st

from leaderboard.config import (
    SHEET_CSV_URL,
    REFRESH_INTERVAL_SECONDS,
    PAGE_TITLE,
)
from leaderboard.display.renderer import format_score
from leaderboard.display.surface import HtmlPage, PAGE_CSS
from leaderboard.ingestion.fetcher import fetch_csv
from leaderboard.ranking.transform import entries_to_frame
from leaderboard.refresh import refresh_leaderboard

# --- Page Configuration ---
st.set_page_config(
    page_title=PAGE_TITLE,
    page_icon="🏆",
    layout="centered",
    initial_sidebar_state="collapsed"
)

# Utility classes used by the row markup (the static page gets these from Tailwind)
CUSTOM_CSS = f"""
<style>
{PAGE_CSS}
.leaderboard-table td, .leaderboard-table th {{ padding: 0.5rem; }}
.text-center {{ text-align: center; }}
.text-left {{ text-align: left; }}
.flex {{ display: flex; }}
.flex-col {{ flex-direction: column; }}
.font-semibold {{ font-weight: 600; }}
.font-medium {{ font-weight: 500; }}
.font-bold {{ font-weight: 700; }}
.font-normal {{ font-weight: 400; }}
.text-xs {{ font-size: 0.75rem; }}
.text-gray-500 {{ color: #6B7280; }}
.text-gray-600 {{ color: #4B5563; }}
.text-gray-800 {{ color: #1F2937; }}
.rounded-full {{ border-radius: 9999px; }}
.border-2 {{ border-width: 2px; border-style: solid; }}
.hidden {{ display: none; }}
@media (min-width: 640px) {{
    .sm\\:hidden {{ display: none; }}
    .sm\\:table-cell {{ display: table-cell; }}
}}
</style>
"""


# --- Data Loading Functions ---
@st.cache_data(ttl=REFRESH_INTERVAL_SECONDS, show_spinner="Fetching leaderboard...")
def load_sheet_csv(url):
    """Fetch the published sheet; cached for one refresh interval."""
    return fetch_csv(url), datetime.now()


def get_page():
    """Session-held page so a failed refresh keeps the last good table."""
    if "leaderboard_page" not in st.session_state:
        st.session_state.leaderboard_page = HtmlPage(title=PAGE_TITLE)
        st.session_state.leaderboard_entries = None
        st.session_state.leaderboard_updated = None
    return st.session_state.leaderboard_page


@st.fragment(run_every=timedelta(seconds=REFRESH_INTERVAL_SECONDS))
def leaderboard_panel():
    page = get_page()

    if st.button("🔄 Refresh now"):
        load_sheet_csv.clear()

    fetched = {}

    def fetch(url):
        text, fetched['at'] = load_sheet_csv(url)
        return text

    entries = refresh_leaderboard(page, url=SHEET_CSV_URL, fetch=fetch)
    if entries is not None:
        st.session_state.leaderboard_entries = entries
        st.session_state.leaderboard_updated = fetched['at']

    entries = st.session_state.leaderboard_entries
    if entries is None:
        st.info("Leaderboard data is not available yet. It will appear after the next successful refresh.")
        return

    df = entries_to_frame(entries)
    col1, col2, col3 = st.columns(3)
    col1.metric("Participants", len(df))
    col2.metric("Top Score", f"{format_score(float(df['score'].max()))}%" if not df.empty else "—")
    col3.metric("Average Score", f"{df['score'].mean():.1f}%" if not df.empty else "—")

    st.html(page.table_html())

    updated = st.session_state.leaderboard_updated
    if updated is not None:
        st.caption(f"Last updated: {updated:%Y-%m-%d %H:%M}")

    st.download_button(
        "Download Leaderboard CSV",
        data=df.to_csv(index=False),
        file_name="leaderboard.csv",
        mime="text/csv",
        on_click="ignore",
    )


# --- Main App ---
def main():
    st.html(CUSTOM_CSS)
    st.title(f"🏆 {PAGE_TITLE}")
    leaderboard_panel()


main()
