"""
StockMaster - Settings
========================
Environment-driven settings. Every value has a development default so
the console runs without any environment set up, except the model API
key, which is only needed once a command is actually interpreted.
"""

import os
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
# BASE_DIR = project root (where pyproject.toml lives)
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Storage ───────────────────────────────────────────────────
STORE_PATH = Path(
    os.environ.get("STOCKMASTER_STORE_PATH", BASE_DIR / "stockmaster_store.json")
)

PRODUCTS_KEY = "stockmaster_products"
LOGS_KEY = "stockmaster_logs"

# ── Inventory ─────────────────────────────────────────────────
DEFAULT_CATEGORY = "General"
DEFAULT_MIN_STOCK = int(os.environ.get("STOCKMASTER_DEFAULT_MIN_STOCK", "10"))

# ── Interpreter (hosted language model) ───────────────────────
API_KEY = (
    os.environ.get("STOCKMASTER_API_KEY")
    or os.environ.get("GEMINI_API_KEY")
    or os.environ.get("API_KEY", "")
)
MODEL_ID = os.environ.get("STOCKMASTER_MODEL", "gemini-2.5-flash")
API_BASE = os.environ.get(
    "STOCKMASTER_API_BASE", "https://generativelanguage.googleapis.com/v1beta"
)
# Seconds. The interpreter call is never retried.
REQUEST_TIMEOUT = float(os.environ.get("STOCKMASTER_TIMEOUT", "30"))

# ── Logging ───────────────────────────────────────────────────
LOG_LEVEL = os.environ.get("STOCKMASTER_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
