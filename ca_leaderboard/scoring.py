# ca_leaderboard/scoring.py
import logging
from typing import Dict, List

import pandas as pd

from ca_leaderboard.markdown_table import REFERRAL_CODE, parse_markdown_table
from config import POINTS_PER_CERTIFICATION

logger = logging.getLogger(__name__)

NAME = "Name"
CERTIFICATIONS = "Number of Certifications"
LEADERBOARD_COLUMNS = [NAME, REFERRAL_CODE, CERTIFICATIONS]
TABLE_COLUMNS = ["Rank", NAME, REFERRAL_CODE, CERTIFICATIONS, "Score"]


def owners_by_code(directory: Dict[str, str]) -> Dict[str, str]:
    """Invert name -> code. On duplicate codes the first name in directory order wins."""
    owners: Dict[str, str] = {}
    for name, code in directory.items():
        owners.setdefault(code, name)
    return owners


def compute_leaderboard(rows: List[Dict[str, str]], directory: Dict[str, str]) -> pd.DataFrame:
    """Tally certifications per referral code, sorted by count (desc, stable)."""
    df = pd.DataFrame(rows)
    if df.empty or REFERRAL_CODE not in df.columns:
        return pd.DataFrame(columns=LEADERBOARD_COLUMNS)

    # sort=False keeps codes in first-encounter order for the stable sort below
    counts = df.groupby(REFERRAL_CODE, sort=False).size()

    owners = owners_by_code(directory)
    lb = pd.DataFrame({
        NAME: [owners.get(code) for code in counts.index],
        REFERRAL_CODE: list(counts.index),
        CERTIFICATIONS: counts.astype(int).to_list(),
    })

    unnamed = lb[NAME].isna().sum()
    if unnamed:
        logger.info("%d referral code(s) not found in the referral directory", unnamed)

    lb = lb.sort_values(CERTIFICATIONS, ascending=False, kind="stable").reset_index(drop=True)
    return lb[LEADERBOARD_COLUMNS]


def leaderboard_table(lb: pd.DataFrame) -> pd.DataFrame:
    """Add 1-based Rank and Score (certifications x points) for display."""
    table = lb.copy()
    table.insert(0, "Rank", range(1, len(table) + 1))
    table["Score"] = table[CERTIFICATIONS] * POINTS_PER_CERTIFICATION
    return table[TABLE_COLUMNS]


def build_leaderboard(markdown: str, directory: Dict[str, str]) -> pd.DataFrame:
    rows = parse_markdown_table(markdown)
    logger.info("Parsed %d certification rows", len(rows))
    return compute_leaderboard(rows, directory)
