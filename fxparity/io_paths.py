from __future__ import annotations

"""Centralized path utilities for the project.

These provide absolute `Path` objects to key directories, avoiding
hard-coded relative paths in the runner, the UI and the plotting code.
"""

from pathlib import Path


# The `fxparity` package is one level below the project root
PROJECT_ROOT = Path(__file__).resolve().parents[1]

CONFIG_DIR = PROJECT_ROOT / "config"
OUTPUT_DIR = PROJECT_ROOT / "output"
LOGS_DIR = PROJECT_ROOT / "logs"

DEFAULT_SETTINGS_PATH = CONFIG_DIR / "settings.yaml"
