"""Root conftest: loads .env.test and pins the local timezone before any module imports."""
from __future__ import annotations

import os
import time
from pathlib import Path

_env_test = Path(__file__).resolve().parent / ".env.test"
if _env_test.exists():
    for line in _env_test.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        key, _, value = line.partition("=")
        os.environ.setdefault(key.strip(), value.strip())

# Display times are rendered in local time; make them deterministic.
os.environ["TZ"] = "UTC"
if hasattr(time, "tzset"):
    time.tzset()
