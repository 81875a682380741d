# config.py
import os

# --- IMPORTANT: EDIT THESE FOR YOUR PROGRAM ---
# Markdown table of certification submissions (must contain a "Referral Code" column).
CERTIFICATES_URL = os.getenv(
    "CERTIFICATES_URL",
    "https://raw.githubusercontent.com/GSSoC24/Postman-Challenge/main/add-your-certificate.md",
)
# JSON object of ambassador name -> referral code. Local path or http(s) URL.
REFERRAL_DATA_SOURCE = os.getenv("REFERRAL_DATA_SOURCE", "static/referral_data.json")

# Scoring system
POINTS_PER_CERTIFICATION = 50

# Optional: Name your competition
APP_TITLE = "Campus Ambassador Leaderboard"

LOADING_MESSAGE = "Loading leaderboard..."
ERROR_MESSAGE = "Failed to load leaderboard data"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Seconds per fetch; bounds how long a hung host can hold a fetch thread.
DEFAULT_REQUEST_TIMEOUT = 30.0


def request_timeout() -> float:
    """Return the HTTP timeout in seconds (env REQUEST_TIMEOUT overrides the default)."""
    # Read at call time so the environment can change between reruns.
    raw = os.getenv("REQUEST_TIMEOUT")
    if not raw:
        return DEFAULT_REQUEST_TIMEOUT
    return float(raw)
