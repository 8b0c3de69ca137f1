#!/usr/bin/env python3
"""Extract a slide template (background, text styles) from PPTX files.

Usage:
    # From a single file:
    python scripts/extract_template.py templates/lecture.pptx -o templates/lecture.yaml

    # From a directory (one YAML per file):
    python scripts/extract_template.py templates/ -o extracted/
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from src.pptx_engine.template_extractor import (
    InvalidContainerError,
    extract_template_from_file,
)
from src.pptx_engine.template_registry import resolve_unique_name
from src.utils.file_utils import ensure_directory, find_pptx_files

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


def _report(result, output: Path) -> None:
    template = result.template
    print(f"\nTemplate saved to: {output}")
    print(f"  Name: {template.name}")
    print(f"  Background: {template.background.color}")
    for element in template.elements:
        style = element.primary_style
        if style is not None:
            print(
                f"  {element.name.value}: {style.font_family} {style.font_size:g}pt "
                f"{style.font_color} w{style.font_weight}"
            )
    if result.is_partial:
        print("  Partial extraction:")
        for warning in result.warnings:
            print(f"    - {warning}")


def main():
    parser = argparse.ArgumentParser(description="Extract slide templates from PPTX files")
    parser.add_argument("source", type=Path,
                        help="Source .pptx file or directory of .pptx files")
    parser.add_argument("-o", "--output", type=Path, default=None,
                        help="Output YAML path (file source) or directory (directory source)")
    args = parser.parse_args()

    if not args.source.exists():
        print(f"Error: Not found: {args.source}", file=sys.stderr)
        sys.exit(1)

    if args.source.is_file():
        output = args.output or args.source.with_suffix(".yaml")
        try:
            result = extract_template_from_file(args.source)
        except (InvalidContainerError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        ensure_directory(output.parent)
        result.template.to_yaml(output)
        _report(result, output)
        return

    pptx_files = find_pptx_files(args.source)
    if not pptx_files:
        print(f"No .pptx files found in {args.source}", file=sys.stderr)
        sys.exit(0)

    out_dir = ensure_directory(args.output or args.source)
    used_names: list[str] = []
    failures = 0
    print(f"Extracting templates from {len(pptx_files)} files...")
    for path in pptx_files:
        try:
            result = extract_template_from_file(path)
        except (InvalidContainerError, ValueError) as e:
            print(f"Error: {path.name}: {e}", file=sys.stderr)
            failures += 1
            continue
        name = resolve_unique_name(result.template.name, used_names)
        used_names.append(name)
        output = out_dir / f"{name}.yaml"
        result.template.to_yaml(output)
        _report(result, output)

    if failures:
        sys.exit(1)


if __name__ == "__main__":
    main()
