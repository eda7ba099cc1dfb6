"""
Inspect the tool set an agent would receive.

Usage:
    python -m agent_tools
    python -m agent_tools --surface discord
    python -m agent_tools --config config/tools.yaml --schemas
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from .builder import build
from .config.parser import ConfigParser
from .config.schema import BuildContext
from .config.settings import get_settings
from .exceptions import ConfigError
from .tools.catalog import create_default_registry


def main(argv: list[str] | None = None) -> int:
    """Print the built tool set as JSON."""
    parser = argparse.ArgumentParser(description="Show the agent tool set")
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="YAML file with sandbox and agent tool policy",
    )
    parser.add_argument(
        "--surface", "-s",
        default=None,
        help="Conversational surface (discord, slack, whatsapp, ...)",
    )
    parser.add_argument(
        "--schemas",
        action="store_true",
        help="Print full parameter schemas instead of names",
    )
    args = parser.parse_args(argv)

    load_dotenv(Path.cwd() / ".env")
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.config:
            context = ConfigParser(args.config).load(surface=args.surface)
        else:
            context = BuildContext(surface=args.surface)
    except (ConfigError, FileNotFoundError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    tools = build(create_default_registry(settings=settings), context)

    if args.schemas:
        payload = [
            {"name": t.name, "description": t.description, "parameters": t.parameters}
            for t in tools
        ]
    else:
        payload = [t.name for t in tools]
    print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
