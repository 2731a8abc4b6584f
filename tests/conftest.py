"""Shared test configuration.

Environment variables must be in place before any ``leaveflow`` module is
imported because the database engine is built at import time.
"""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / f"leaveflow_test_{os.getpid()}.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ.setdefault("APP_TIMEZONE", "UTC")

from leaveflow.config import reset_settings_cache  # noqa: E402

reset_settings_cache()
