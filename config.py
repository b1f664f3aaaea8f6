# config.py
import os
from dotenv import load_dotenv

# Load local .env file if present
load_dotenv()


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# --- Logging ---
LOG_LEVEL = os.getenv("STORE_LOG_LEVEL", "WARNING").upper()
# No log file unless a directory is given
LOG_DIR = os.getenv("STORE_LOG_DIR") or None

# --- Store ---
LOW_STOCK_THRESHOLD = _int_env("STORE_LOW_STOCK_THRESHOLD", 5)
CURRENCY_SYMBOL = os.getenv("STORE_CURRENCY", "$")
