"""
Runtime settings for the LIKE matcher and the evaluation service.

Values come from the environment (optionally seeded from a local .env file).
"""

import os

from dotenv import load_dotenv

load_dotenv()

# Number of compiled matchers the evaluation service keeps per process.
LIKE_PATTERN_CACHE_SIZE: int = int(os.getenv("LIKE_PATTERN_CACHE_SIZE", "1024"))

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# Escape character escape_like() uses when the caller does not pass one.
LIKE_DEFAULT_ESCAPE: str = os.getenv("LIKE_DEFAULT_ESCAPE", "\\")
