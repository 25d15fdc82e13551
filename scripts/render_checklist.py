#!/usr/bin/env python3
"""Render a taxonomy checklist from a JSON file of terms.

The terms file holds a list of objects with id, parent, slug and name.

Usage:
    python scripts/render_checklist.py terms.json --taxonomy genre --selected 5
    python scripts/render_checklist.py terms.json --mode select --flat
    python scripts/render_checklist.py terms.json --registered region --selected 3,7
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.taxonomies.checklist import render_taxonomy_checklist, render_terms_checklist
from src.taxonomies.registry import get_taxonomy_registry
from src.taxonomies.schemas import RenderMode, Term


def parse_selected(value: str) -> list[int]:
    """Parse a comma-separated list of term ids."""
    if not value:
        return []
    try:
        return [int(part) for part in value.split(",") if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected comma-separated term ids, got: {value}")


def load_terms(path: Path) -> list[Term]:
    with open(path, "r") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError("Terms file must contain a JSON list")
    return [Term.model_validate(item) for item in data]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render taxonomy terms as a radio checklist or select options"
    )
    parser.add_argument("terms_file", type=Path, help="JSON file with a list of terms")
    parser.add_argument(
        "--registered",
        type=str,
        help="Use a registered taxonomy's mode and hierarchy settings",
    )
    parser.add_argument("--taxonomy", type=str, default="", help="Taxonomy name (default: category)")
    parser.add_argument(
        "--selected",
        type=parse_selected,
        default=[],
        help="Comma-separated ids of selected terms",
    )
    parser.add_argument(
        "--mode",
        choices=[m.value for m in RenderMode],
        default=RenderMode.RADIO.value,
        help="Input element to render",
    )
    parser.add_argument(
        "--flat",
        action="store_true",
        help="Submit term slugs instead of ids",
    )
    parser.add_argument("--disabled", action="store_true", help="Render inputs disabled")
    parser.add_argument(
        "--checked-ontop",
        action="store_true",
        help="List selected terms first",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=0,
        help="0 = unlimited, -1 = flat, N = at most N levels",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        terms = load_terms(args.terms_file)
    except (OSError, ValueError, ValidationError) as e:
        print(f"Error: Could not read terms from {args.terms_file}: {e}", file=sys.stderr)
        return 1

    if args.registered:
        taxonomy = get_taxonomy_registry().get(args.registered)
        if taxonomy is None:
            print(f"Error: Taxonomy not found: {args.registered}", file=sys.stderr)
            return 1
        html = render_taxonomy_checklist(
            taxonomy,
            terms,
            selected_ids=args.selected,
            disabled=args.disabled,
            checked_ontop=True if args.checked_ontop else None,
            max_depth=args.max_depth,
        )
    else:
        html = render_terms_checklist(
            terms,
            taxonomy=args.taxonomy,
            selected_ids=args.selected,
            input_element=RenderMode(args.mode),
            hierarchical=not args.flat,
            disabled=args.disabled,
            checked_ontop=args.checked_ontop,
            max_depth=args.max_depth,
        )

    sys.stdout.write(html)
    return 0


if __name__ == "__main__":
    sys.exit(main())
