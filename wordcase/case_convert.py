"""Convert text to camelCase, PascalCase, kebab-case, dot.case, or snake_case.

Values are taken from the command line, or read line by line from stdin when
none are given. Each converted value is printed on its own line.
"""

import argparse
import logging
import sys
from collections.abc import Iterable, Sequence
from typing import Any

import yaml

from wordcase.case_style import CaseStyle, parse_case_style
from wordcase.convert import convert, convert_all
from wordcase.load_config import load_config
from wordcase.sample_conversions import SAMPLE_CONVERSIONS

logger = logging.getLogger(__name__)


def run_examples(strip_accents: bool = True) -> int:
    """Print every built-in sample next to its expected output."""
    failures = 0
    for text, style, expected in SAMPLE_CONVERSIONS:
        result = convert(text, style, strip_accents=strip_accents)
        print(f"{text} -> {result}  (expected: {expected})")
        if result != expected:
            failures += 1
            logger.warning("Mismatch for %r as %s", text, style.value)
    if failures:
        print(f"{failures} of {len(SAMPLE_CONVERSIONS)} samples did not match")
        return 1
    return 0


def _read_values(
    values: Sequence[str], stream: Iterable[str], skip_blank: bool
) -> list[str]:
    """Use positional values, or fall back to lines from the given stream."""
    if values:
        return list(values)
    lines = [line.rstrip("\r\n") for line in stream]
    if skip_blank:
        lines = [line for line in lines if line.strip()]
    return lines


def _resolve_style(args: argparse.Namespace, config: dict[str, Any]) -> CaseStyle:
    try:
        return parse_case_style(args.style or config["default_style"])
    except ValueError as e:
        raise SystemExit(str(e)) from e


def run_conversion(args: argparse.Namespace) -> int:
    """Load config and convert every requested value."""
    try:
        config = load_config(args.config)
    except (ValueError, yaml.YAMLError) as e:
        raise SystemExit(f"Invalid config: {e}") from e

    strip_accents = bool(config["normalization"]["strip_diacritics"])
    if args.keep_diacritics:
        strip_accents = False

    if args.examples:
        return run_examples(strip_accents)

    style = _resolve_style(args, config)
    values = _read_values(
        args.values, sys.stdin, bool(config["batch"]["skip_blank_lines"])
    )
    for result in convert_all(values, style, strip_accents=strip_accents):
        print(result)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the case conversion command."""
    ap = argparse.ArgumentParser(
        description="Convert text between camel, pascal, kebab, dot and snake case.",
    )
    ap.add_argument(
        "values",
        nargs="*",
        help="Values to convert (default: read lines from stdin)",
    )
    ap.add_argument(
        "-s",
        "--style",
        choices=[s.value for s in CaseStyle],
        help="Output case style (default: default_style from config, kebab)",
    )
    ap.add_argument(
        "--keep-diacritics",
        action="store_true",
        help="Do not strip accents before splitting words",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--examples",
        action="store_true",
        help="Print the built-in sample conversions and check them",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    return run_conversion(args)


if __name__ == "__main__":
    raise SystemExit(main())
