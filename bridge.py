#!/usr/bin/env python3
"""
Markup Bridge - legacy color codes and tag markup, reconciled

Simple usage:
    python bridge.py convert "&cHello &#fcfcfcWorld"
    python bridge.py convert "<bold>hi</bold> &cworld" --runs
    python bridge.py scan "<red>a</red> &lb"
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from markup_bridge.cli import app

if __name__ == "__main__":
    app()
