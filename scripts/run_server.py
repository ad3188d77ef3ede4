#!/usr/bin/env python3
"""Run the tool server over stdio."""

from __future__ import annotations

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from tool_server.main import main


if __name__ == "__main__":
    sys.exit(main())
