# app.py
import pandas as pd
import streamlit as st

from ca_leaderboard.logger import setup_logger
from ca_leaderboard.scoring import build_leaderboard, leaderboard_table
from ca_leaderboard.sources import load_sources
from config import (
    APP_TITLE,
    CERTIFICATES_URL,
    ERROR_MESSAGE,
    LOADING_MESSAGE,
    POINTS_PER_CERTIFICATION,
    REFERRAL_DATA_SOURCE,
    request_timeout,
)

st.set_page_config(page_title=APP_TITLE, page_icon="🏆", layout="wide")

logger = setup_logger("ca_leaderboard")


def load_leaderboard() -> pd.DataFrame:
    markdown, directory = load_sources(CERTIFICATES_URL, REFERRAL_DATA_SOURCE, request_timeout())
    return leaderboard_table(build_leaderboard(markdown, directory))


def render_leaderboard(table: pd.DataFrame):
    if table.empty:
        st.info("No certifications yet. Once referrals submit certificates, scores will appear here.")
        return

    st.dataframe(table, hide_index=True)

    c1, c2 = st.columns(2)
    with c1:
        csv = table.to_csv(index=False).encode("utf-8")
        st.download_button("Download Leaderboard (CSV)", csv, "leaderboard.csv", "text/csv")
    with c2:
        html = table.to_html(index=False, table_id="leaderboardTable", na_rep="")
        st.download_button("Download Leaderboard (HTML)", html, "leaderboard.html", "text/html")


def main():
    st.title(APP_TITLE)
    st.caption(
        f"Every referral who completes certification and gets a PR merged earns you "
        f"{POINTS_PER_CERTIFICATION} points. The highest score wins."
    )

    slot = st.empty()
    slot.info(LOADING_MESSAGE)

    try:
        table = load_leaderboard()
    except Exception:
        logger.exception("Error fetching leaderboard data")
        slot.error(ERROR_MESSAGE)
        return

    with slot.container():
        render_leaderboard(table)


if __name__ == "__main__":
    main()
