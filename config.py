"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── PostgreSQL ────────────────────────────────────────────
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
DB_NAME: str = os.getenv("DB_NAME", "mqtt")
DB_USER: str = os.getenv("DB_USER", "mqtt_user")
DB_PASS: str = os.getenv("DB_PASS", "")

# Seconds to wait for the server to accept a connection.
DB_CONNECT_TIMEOUT: int = int(os.getenv("DB_CONNECT_TIMEOUT", "10"))

# Server-side limit per statement, 0 disables it.
DB_STATEMENT_TIMEOUT_MS: int = int(os.getenv("DB_STATEMENT_TIMEOUT_MS", "0"))

# ── Schema ledger ─────────────────────────────────────────
SCHEMA_VERSION_NAME: str = os.getenv("SCHEMA_VERSION_NAME", "initial")
SCHEMA_VERSION_NUMBER: int = int(os.getenv("SCHEMA_VERSION_NUMBER", "1"))

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE: str = os.getenv("LOG_FILE", "")
LOG_BACKUP_COUNT: int = int(os.getenv("LOG_BACKUP_COUNT", "7"))
