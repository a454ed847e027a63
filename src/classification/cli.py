"""
Classification CLI - Classify strings as roman or arabic number form.
"""

import argparse
import json
import sys
import logging
from pathlib import Path
from typing import List, Optional

from src.infrastructure.logging import setup_logging
from .classifier import NumberFormClassifier
from .config import ClassifierConfig, parse_strategy, resolve_classifier_config
from .number_form import ClassificationStrategy
from .reporting import ReportGenerator

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(
        description="Number form classifier (roman vs arabic)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Classify arguments with the default pattern strategy
  python -m src.classification.cli XLII 42 12X

  # Use the parse strategy and print JSON
  python -m src.classification.cli --strategy parse --json 12X -7

  # Classify a file, one input per line, and write reports
  python -m src.classification.cli --file inputs.txt --output ./reports
""",
    )

    parser.add_argument(
        "inputs",
        nargs="*",
        help="Strings to classify (read from stdin if none and no --file)",
    )
    parser.add_argument(
        "--file",
        help="File with one input per line",
    )
    parser.add_argument(
        "--config",
        help="YAML classifier configuration file or preset name (pattern, parse, pattern-ci)",
    )
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in ClassificationStrategy],
        help="Classification strategy (overrides --config; default: pattern)",
    )
    parser.add_argument(
        "--ignore-case",
        action="store_true",
        help="Accept lowercase roman letters (pattern strategy only)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full report as JSON",
    )
    parser.add_argument(
        "--output",
        help="Directory for JSON and Markdown reports",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    return parser


def resolve_config(args: argparse.Namespace) -> ClassifierConfig:
    """Build the classifier config from --config and command-line overrides."""
    config = resolve_classifier_config(args.config) if args.config else ClassifierConfig()

    if args.strategy:
        config.strategy = parse_strategy(args.strategy)
    if args.ignore_case:
        config.ignore_case = True

    config.validate()
    return config


def read_inputs(args: argparse.Namespace) -> List[str]:
    """Collect inputs from arguments, --file, or stdin."""
    inputs = list(args.inputs)

    if args.file:
        path = Path(args.file)
        if not path.exists():
            raise FileNotFoundError(f"Input file not found: {path}")
        inputs.extend(path.read_text(encoding="utf-8").splitlines())

    if not inputs and not args.file:
        inputs = sys.stdin.read().splitlines()

    return inputs


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the classification CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    try:
        config = resolve_config(args)
        inputs = read_inputs(args)
    except (OSError, ValueError) as e:
        logger.error(str(e))
        return 1

    classifier = NumberFormClassifier(config)
    report = classifier.classify_all(inputs)

    if args.json:
        print(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
    else:
        for result in report.results:
            marker = " *" if result.disagrees else ""
            print(f"{result.text}\t{result.form.value}{marker}")

    if args.output:
        reporter = ReportGenerator(args.output)
        paths = reporter.generate_all(report)
        logger.info(f"JSON report: {paths['json']}")
        logger.info(f"Markdown report: {paths['markdown']}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
