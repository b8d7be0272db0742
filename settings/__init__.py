"""Application settings."""

import os
from pathlib import Path

# Storage
DATA_DIR = Path(os.getenv("SUMMARY_DATA_DIR", "/data"))
USERS_FILE = Path(os.getenv("SUMMARY_USERS_FILE", str(DATA_DIR / "authorized-users.json")))

# Cache
CACHE_BACKEND = os.getenv("SUMMARY_CACHE_BACKEND", "filesystem")  # filesystem | memory | duckdb
CACHE_ROOT = Path(os.getenv("SUMMARY_CACHE_ROOT", str(DATA_DIR / "cache")))
CACHE_DB_PATH = os.getenv("SUMMARY_CACHE_DB_PATH", str(DATA_DIR / "summary-cache.duckdb"))
CACHE_TTL = int(os.getenv("SUMMARY_CACHE_TTL_MS", str(5 * 60 * 1000))) / 1000
CACHE_CONTROL = "public, max-age=60"

# Access
REQUIRE_AUTHORIZED_DOMAIN = os.getenv("REQUIRE_AUTHORIZED_DOMAIN", "true").lower() == "true"
ADMIN_USER = os.getenv("ADMIN_USER", "admin")
ADMIN_PASS = os.getenv("ADMIN_PASS", "secret")

# Upstream
UPSTREAM_TIMEOUT = float(os.getenv("UPSTREAM_TIMEOUT", "6"))
UPSTREAM_RETRIES = int(os.getenv("UPSTREAM_RETRIES", "2"))
UPSTREAM_BACKOFF = float(os.getenv("UPSTREAM_BACKOFF", "0.3"))
MAX_PAGES = int(os.getenv("MAX_PAGES", "250"))
MAX_ITEMS = int(os.getenv("MAX_ITEMS", "10000"))

# Caller-side deadlines
GATE_TIMEOUT = float(os.getenv("GATE_TIMEOUT", "15"))
SUMMARY_DEADLINE = float(os.getenv("SUMMARY_DEADLINE", "25"))

# Logging
LOG_DIR = Path(os.getenv("LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
