"""
config.py
---------
Central configuration module. Loads environment variables from the .env
file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── Storage ───────────────────────────────────────────────
# A SQLite file path (or ":memory:"), or a postgresql:// connection string.
DATABASE_LOCATION: str = os.getenv("DATABASE_LOCATION", "users.db")
