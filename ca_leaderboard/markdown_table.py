# ca_leaderboard/markdown_table.py
"""
Parser for the pipe-delimited markdown table of certification submissions.

- The first line is the header row; the second is the markdown separator.
- Rows whose cell count differs from the header are dropped.
- When a "Referral Code" column exists, rows with an empty code are dropped.
- Returns plain dicts (column -> trimmed cell) in the order rows appear.
"""

import logging
import re
from typing import Dict, List

logger = logging.getLogger(__name__)

REFERRAL_CODE = "Referral Code"

# e.g. "|---|---|", "| :-: | --: |", "-|-"
_SEPARATOR_RE = re.compile(r"^\|?\s*:?-+:?\s*(\|\s*:?-+:?\s*)*\|?$")


def is_separator(line: str) -> bool:
    line = line.strip()
    return line.startswith("|---") or bool(_SEPARATOR_RE.match(line))


def split_cells(line: str) -> List[str]:
    """Split a table line on '|' and trim cells, dropping the edge cells of leading/trailing pipes."""
    line = line.strip()
    cells = [c.strip() for c in line.split("|")]
    if line.startswith("|"):
        cells = cells[1:]
    if line.endswith("|") and len(line) > 1:
        cells = cells[:-1]
    return cells


def parse_markdown_table(markdown: str) -> List[Dict[str, str]]:
    """Return the valid data rows of a markdown table as dicts keyed by header."""
    lines = markdown.split("\n")
    if not lines[0].strip():
        return []

    headers = split_cells(lines[0])
    has_referral_code = REFERRAL_CODE in headers

    body = lines[1:]
    # A missing separator must not swallow the first data row.
    if body and is_separator(body[0]):
        body = body[1:]

    rows: List[Dict[str, str]] = []
    for lineno, raw in enumerate(body, start=len(lines) - len(body) + 1):
        line = raw.strip()
        if not line or is_separator(line):
            continue

        cells = split_cells(line)
        if len(cells) != len(headers):
            logger.debug("Dropping line %d: %d cells, expected %d", lineno, len(cells), len(headers))
            continue

        row = dict(zip(headers, cells))
        if has_referral_code and not row[REFERRAL_CODE]:
            logger.debug("Dropping line %d: empty referral code", lineno)
            continue

        rows.append(row)

    return rows
