#!/usr/bin/env python3
"""Print the descriptors of the default tools without starting the transport."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from tool_server.tools.builtin import get_default_tools
from tool_server.tools.registry import ToolRegistry
from tool_server.utils.logging import configure_logging


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="List the tools served by default")
    parser.add_argument(
        "--names-only",
        action="store_true",
        help="Print only tool names",
    )
    args = parser.parse_args()

    configure_logging("WARNING")

    registry = ToolRegistry()
    registry.initialize(get_default_tools())

    if args.names_only:
        for i, name in enumerate(registry.tool_names, 1):
            print(f"{i:2d}. {name}")
        return

    descriptors = [descriptor.to_dict() for descriptor in registry.list_descriptors()]
    print(json.dumps(descriptors, indent=2))


if __name__ == "__main__":
    main()
