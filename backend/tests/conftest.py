"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real database or a deployment's .env origin
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("FRONTEND_URL", "http://localhost:5173")
os.environ.setdefault("MESSAGE_LOCALE", "en")
