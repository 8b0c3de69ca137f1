#!/usr/bin/env python3
"""Validate a dialogue script and summarise what would become slides.

Usage:
    python scripts/parse_script.py scripts/panel.txt
    python scripts/parse_script.py scripts/panel.txt --json workspace/parsed_script.json
    python scripts/parse_script.py scripts/panel.txt --analysis-out workspace/analysis.json
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from src.analysis.fallback import fallback_analysis
from src.parsers import parse_script_file
from src.utils.file_utils import ensure_directory, save_json

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


def main():
    parser = argparse.ArgumentParser(description="Parse and validate a dialogue script")
    parser.add_argument("script", type=Path, help="Script path (.txt, .md, .text, .script)")
    parser.add_argument("--json", type=Path, default=None,
                        help="Write the full parse result as JSON")
    parser.add_argument("--analysis-out", type=Path, default=None,
                        help="Write a rule-based analysis (per-speaker themes) as JSON")
    args = parser.parse_args()

    if not args.script.exists():
        print(f"Error: Script not found: {args.script}", file=sys.stderr)
        sys.exit(1)

    try:
        result = parse_script_file(args.script)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    front = result.front_matter
    print(f"Script: {args.script.name}")
    print(f"  Type: {front.type.name.title()}")
    print(f"  Topic: {front.topic or '(none)'}")
    print(f"  Categories: {', '.join(front.categories) or '(none)'}")
    print(f"  Speakers: {', '.join(f'{s.name} [{s.role}]' for s in result.metadata.speakers)}")
    print(f"  Lines: {result.metadata.valid_lines}/{result.metadata.total_lines} parsed")
    print(f"  Valid: {result.is_valid}")
    for error in result.errors:
        print(f"  line {error.line}: {error.message}: {error.content}")

    if args.json:
        save_json(result.model_dump(mode="json"), args.json)
        print(f"Parse result written to: {args.json}")

    if args.analysis_out:
        ensure_directory(args.analysis_out.parent)
        fallback_analysis(result).save(args.analysis_out)
        print(f"Analysis written to: {args.analysis_out}")

    if not result.is_valid:
        sys.exit(1)


if __name__ == "__main__":
    main()
