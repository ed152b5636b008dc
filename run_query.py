#!/usr/bin/env python3
"""
Command-line script to query the shadcn/ui component reference.

Usage:
    python run_query.py list
    python run_query.py details button
    python run_query.py examples accordion -o accordion_examples.json
    python run_query.py search dialog -v

Endpoints and timeout come from the environment (SHADCN_DOCS_URL,
SHADCN_FETCH_TIMEOUT, ...) and so does the log level (SHADCN_LOG_LEVEL);
a .env file is loaded automatically.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Load .env file automatically
from dotenv import load_dotenv
load_dotenv()

from shadcn_docs.exceptions import InvalidInputError, ShadcnDocsError
from shadcn_docs.logger import level_from_env, resolve_level
from shadcn_docs.service import ComponentDocsService, to_payload
from shadcn_docs.settings import Settings


def main():
    parser = argparse.ArgumentParser(
        description="Query shadcn/ui component docs"
    )
    parser.add_argument(
        "command",
        choices=["list", "details", "examples", "search"],
        help="Query to run"
    )
    parser.add_argument(
        "argument",
        nargs="?",
        help="Component name (details, examples) or search query (search)"
    )
    parser.add_argument(
        "--output", "-o",
        help="Output JSON file (default: print to stdout)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose logging (same as --log-level debug)"
    )
    parser.add_argument(
        "--log-level",
        help="Log level name or number (default: $SHADCN_LOG_LEVEL, else info)"
    )

    args = parser.parse_args()

    try:
        log_level = logging.DEBUG if args.verbose else resolve_level(
            args.log_level, default=level_from_env()
        )
    except ValueError as e:
        parser.error(str(e))
    service = ComponentDocsService(settings=Settings.from_env(), log_level=log_level)

    try:
        if args.command == "list":
            result = service.list_components()
        elif args.command == "details":
            result = service.get_component_details(args.argument)
        elif args.command == "examples":
            result = service.get_component_examples(args.argument)
        else:
            result = service.search_components(args.argument)

    except ShadcnDocsError as e:
        print(json.dumps(e.to_response(), indent=2), file=sys.stderr)
        sys.exit(2 if isinstance(e, InvalidInputError) else 1)

    output_json = json.dumps(to_payload(result), indent=2)

    if args.output:
        Path(args.output).write_text(output_json)
        print(f"Result saved to: {args.output}", file=sys.stderr)
    else:
        print(output_json)


if __name__ == "__main__":
    main()
