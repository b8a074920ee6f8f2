"""Defaults read from the environment."""

from __future__ import annotations

import os

SORT_ATTRIBUTES = os.environ.get("SVGEDIT_SORT_ATTRIBUTES", "0") == "1"
"""If rendered elements list their attributes in sorted order."""
