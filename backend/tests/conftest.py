"""Shared test configuration."""

import os
import tempfile
from pathlib import Path

# Point the engine at a throwaway SQLite file before zoo_app is imported.
_TEST_DB = Path(tempfile.gettempdir()) / "zoo_app_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{_TEST_DB}"
os.environ.setdefault("APP_ENV", "test")
