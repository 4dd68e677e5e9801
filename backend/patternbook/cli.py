"""
Command line interface for browsing and running the catalog.

    python -m patternbook list --category structural
    python -m patternbook show composite --format yaml
    python -m patternbook run builder
    python -m patternbook suggest "I need undo for editor actions"
    python -m patternbook render --output CATALOG.md
    python -m patternbook validate --strict
"""

import argparse
import json
import sys
from typing import List, Optional

import yaml

from patternbook import __version__
from patternbook.patterns import PatternCategory, get_pattern_registry, run_demo
from patternbook.renderer import render_catalog_markdown
from patternbook.validation import validate_catalog


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="patternbook",
        description="Catalog of classic object-oriented design pattern examples",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                            # List every pattern by category
  %(prog)s show singleton --format yaml    # Show one catalog entry
  %(prog)s run composite                   # Run an illustration
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    list_parser = subparsers.add_parser("list", help="List patterns")
    list_parser.add_argument("--category", choices=[c.value for c in PatternCategory], help="Only this category")

    show_parser = subparsers.add_parser("show", help="Show a catalog entry")
    show_parser.add_argument("pattern_id", help="Pattern ID to show")
    show_parser.add_argument("--format", choices=["json", "yaml"], default="json", help="Output format")

    run_parser = subparsers.add_parser("run", help="Run a pattern's illustration")
    run_parser.add_argument("pattern_id", help="Pattern ID to run")

    suggest_parser = subparsers.add_parser("suggest", help="Suggest patterns for a design problem")
    suggest_parser.add_argument("context", help="Description of the design problem")
    suggest_parser.add_argument("--max-results", type=_positive_int, default=5, help="Maximum suggestions")

    render_parser = subparsers.add_parser("render", help="Render the catalog as markdown")
    render_parser.add_argument("--output", help="Output file (default: stdout)")

    validate_parser = subparsers.add_parser("validate", help="Validate the catalog")
    validate_parser.add_argument("--strict", action="store_true", help="Treat warnings as failures")

    return parser.parse_args(argv)


def _unknown(pattern_id: str) -> int:
    print(f"Unknown pattern: {pattern_id}", file=sys.stderr)
    return 1


def cmd_list(args: argparse.Namespace) -> int:
    registry = get_pattern_registry()
    categories = [PatternCategory(args.category)] if args.category else list(PatternCategory)
    for category in categories:
        print(f"{category.value.capitalize()}:")
        for pattern in registry.get_by_category(category):
            print(f"  {pattern.id:<26} {pattern.name}")
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    pattern = get_pattern_registry().get(args.pattern_id)
    if not pattern:
        return _unknown(args.pattern_id)
    data = pattern.to_dict()
    if args.format == "yaml":
        print(yaml.safe_dump(data, default_flow_style=False, sort_keys=False), end="")
    else:
        print(json.dumps(data, indent=2))
    return 0


def cmd_run(args: argparse.Namespace) -> int:
    pattern = get_pattern_registry().get(args.pattern_id)
    if not pattern:
        return _unknown(args.pattern_id)
    run = run_demo(pattern)
    print(run.output, end="")
    if not run.succeeded:
        print(f"Demo failed: {run.error}", file=sys.stderr)
        return 1
    print(f"-> {json.dumps(run.result)}")
    return 0


def cmd_suggest(args: argparse.Namespace) -> int:
    suggestions = get_pattern_registry().suggest_patterns(args.context, args.max_results)
    if not suggestions:
        print("No matching patterns")
    for pattern in suggestions:
        print(f"{pattern.id:<26} {pattern.description}")
    return 0


def cmd_render(args: argparse.Namespace) -> int:
    markdown = render_catalog_markdown(get_pattern_registry().list_all())
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(markdown)
        print(f"Wrote {args.output}")
    else:
        print(markdown, end="")
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    result = validate_catalog(get_pattern_registry().list_all(), strict=args.strict)
    print(result.get_summary())
    for issue in result.issues:
        print(f"  [{issue.severity.value}] {issue.code}: {issue.message}")
    return 0 if result.is_valid else 1


COMMANDS = {
    "list": cmd_list,
    "show": cmd_show,
    "run": cmd_run,
    "suggest": cmd_suggest,
    "render": cmd_render,
    "validate": cmd_validate,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    return COMMANDS[args.command](args)
