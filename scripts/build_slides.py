#!/usr/bin/env python3
"""Build a PowerPoint presentation from a dialogue script and a slide template.

Usage:
    # Built-in preset:
    python scripts/build_slides.py scripts/panel.txt -o output.pptx --preset soft-blue

    # Template extracted with extract_template.py:
    python scripts/build_slides.py scripts/panel.txt -o output.pptx --template templates/lecture.yaml

    # Per-speaker colors (rule-based, or from an analysis JSON file):
    python scripts/build_slides.py scripts/panel.txt -o output.pptx --themed
    python scripts/build_slides.py scripts/panel.txt -o output.pptx --analysis workspace/analysis.json
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from src.analysis.fallback import fallback_analysis
from src.parsers import parse_script_file
from src.pptx_engine.deck_builder import DeckBuilder
from src.pptx_engine.template_registry import TEMPLATE_PRESETS, get_template_by_id
from src.schemas.analysis_schema import AnalysisResult
from src.schemas.slide_template import SlideTemplate

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


def main():
    preset_ids = [t.id for t in TEMPLATE_PRESETS]

    parser = argparse.ArgumentParser(description="Build PPTX from a dialogue script")
    parser.add_argument("script", type=Path, help="Path to the script file (.txt, .md, .text, .script)")
    parser.add_argument("-o", "--output", type=Path, default=Path("output.pptx"),
                        help="Output PPTX path (default: output.pptx)")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--template", type=Path, default=None,
                        help="Template YAML path")
    source.add_argument("--preset", choices=preset_ids, default="blank",
                        help="Built-in template id (default: blank)")
    theming = parser.add_mutually_exclusive_group()
    theming.add_argument("--themed", action="store_true",
                         help="Color each speaker's slides with a rule-based palette")
    theming.add_argument("--analysis", type=Path, default=None,
                         help="Analysis JSON with per-speaker themes and visuals")
    parser.add_argument("--asset-dir", type=Path, default=None,
                        help="Directory for relative image paths (default: script directory)")
    parser.add_argument("--allow-invalid", action="store_true",
                        help="Build even when the script fails validation")
    args = parser.parse_args()

    # Validate inputs
    if not args.script.exists():
        print(f"Error: Script not found: {args.script}", file=sys.stderr)
        sys.exit(1)

    try:
        parse_result = parse_script_file(args.script)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if not parse_result.is_valid and not args.allow_invalid:
        print(
            f"Error: Script is not valid ({parse_result.metadata.valid_lines}/"
            f"{parse_result.metadata.total_lines} lines parsed)",
            file=sys.stderr,
        )
        for error in parse_result.errors[:10]:
            print(f"  line {error.line}: {error.content}", file=sys.stderr)
        sys.exit(1)

    if args.template:
        if not args.template.exists():
            print(f"Error: Template not found: {args.template}", file=sys.stderr)
            sys.exit(1)
        template = SlideTemplate.from_yaml(args.template)
    else:
        template = get_template_by_id(args.preset)

    analysis = None
    if args.analysis:
        if not args.analysis.exists():
            print(f"Error: Analysis not found: {args.analysis}", file=sys.stderr)
            sys.exit(1)
        analysis = AnalysisResult.load(args.analysis)
    elif args.themed:
        analysis = fallback_analysis(parse_result)

    builder = DeckBuilder(asset_dir=args.asset_dir or args.script.parent)
    result_path = builder.build(parse_result, template, args.output, analysis=analysis)

    print(f"Presentation generated: {result_path}")
    print(f"Slides: {len(parse_result.slides) + 1} (1 cover, {len(parse_result.slides)} content)")
    print(f"Template: {template.name}")
    if parse_result.errors:
        print(f"Skipped lines: {len(parse_result.errors)}")


if __name__ == "__main__":
    main()
