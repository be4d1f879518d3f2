"""Root conftest — shared test configuration."""

import os

# Settings are read at import time of certtrack.main; never point tests at a real DB
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///:memory:",
)
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_FORMAT", "text")
