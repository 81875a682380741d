# ca_leaderboard/sources.py
"""
Fetches the two inputs of the leaderboard.

- The certificate table is markdown text served over HTTP.
- The referral directory is a JSON object (name -> referral code), read from
  a local file or an http(s) URL.
- load_sources() runs both fetches concurrently; the first failure wins and
  the other result is discarded.
"""

import json
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Dict, Optional, Tuple

import requests

logger = logging.getLogger(__name__)


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def fetch_markdown(url: str, timeout: Optional[float] = None) -> str:
    resp = requests.get(url, timeout=timeout)
    resp.raise_for_status()
    logger.info("Fetched %d characters of markdown from %s", len(resp.text), url)
    return resp.text


def fetch_referral_directory(source: str, timeout: Optional[float] = None) -> Dict[str, str]:
    """Load the ambassador name -> referral code map from a path or URL."""
    if _is_url(source):
        resp = requests.get(source, timeout=timeout)
        resp.raise_for_status()
        data = resp.json()
    else:
        data = json.loads(Path(source).read_text(encoding="utf-8"))

    if not isinstance(data, dict):
        raise ValueError(f"Referral data at {source} must be a JSON object, got {type(data).__name__}")

    logger.info("Loaded %d referral codes from %s", len(data), source)
    return data


def load_sources(
    table_url: str,
    directory_source: str,
    timeout: Optional[float] = None,
) -> Tuple[str, Dict[str, str]]:
    """Fetch (markdown, directory) in parallel. Raises the first fetch error."""
    pool = ThreadPoolExecutor(max_workers=2, thread_name_prefix="leaderboard-fetch")
    try:
        markdown_fut = pool.submit(fetch_markdown, table_url, timeout)
        directory_fut = pool.submit(fetch_referral_directory, directory_source, timeout)
        for fut in as_completed([markdown_fut, directory_fut]):
            if fut.exception() is not None:
                raise fut.exception()

        return markdown_fut.result(), directory_fut.result()
    finally:
        # Don't block on a straggler once the outcome is decided.
        pool.shutdown(wait=False, cancel_futures=True)
