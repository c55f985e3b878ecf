#!/usr/bin/env python3
"""Builds dist/index.html from menu/menu.yml.

Same as ``build-menu``; kept here so the page can be rebuilt from a checkout
without installing the package.
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from menu_builder.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
