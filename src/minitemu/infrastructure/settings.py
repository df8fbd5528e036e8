"""Central configuration for the MiniTemu shell.

Values come from the environment (or a ``.env`` file in the working
directory) and fall back to the defaults below.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _optional_path(raw: str | None) -> Path | None:
    return Path(raw).expanduser() if raw else None


class Settings:
    """Central configuration for the MiniTemu shell."""

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("MINITEMU_LOG_LEVEL", "WARNING").upper()
    LOG_FILE: Path | None = _optional_path(os.getenv("MINITEMU_LOG_FILE"))

    # --- Catalog ---
    CURRENCY: str = os.getenv("MINITEMU_CURRENCY", "USD")
