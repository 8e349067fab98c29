"""
Command-line interface for the OpenAPI specification scorer.
Supports structural validation and quality reports (console, Markdown or HTML).
"""

import argparse
import asyncio
import logging
import time
from typing import List, Optional

from .models.errors import SpecScoreError
from .services.config_loader import config
from .services.config_manager import _setup_logging, _show_environment_info
from .services.output_formatter import (
    _print_scoring_result,
    _print_validation_failure,
    _print_validation_success,
)
from .services.report_writer import write_html_report, write_markdown_report
from .services.scorer import score_source
from .services.spec_validator import validate_spec

# Configure logging with basicConfig
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s,p%(process)s,{%(filename)s:%(lineno)d},%(levelname)s,%(message)s",
)

logger = logging.getLogger(__name__)

REPORT_FORMATS = ("console", "markdown", "html")
FILE_REPORT_FORMATS = ("markdown", "html")


# -----------------------------------------------------------------------------
# Argument Private Functions
# -----------------------------------------------------------------------------

def _create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="spec-score",
        description="Validate OpenAPI specifications and score them against a quality rubric.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate a local YAML file
  spec-score validate my-api.yaml

  # Validate a specification served over HTTP
  spec-score validate https://example.com/api/openapi.json

  # Print a scoring report to the console
  spec-score report my-api.yaml

  # Write a Markdown or HTML report
  spec-score report my-api.yaml --format markdown --output report.md
  spec-score report my-api.yaml -f html -o report.html
        """,
    )

    # Add utility arguments
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--show-env", action="store_true", help="Show environment configuration")

    subparsers = parser.add_subparsers(dest="command", metavar="command")

    validate_parser = subparsers.add_parser(
        "validate", help="Validate an OpenAPI specification"
    )
    validate_parser.add_argument("source", help="OpenAPI specification file or URL")

    report_parser = subparsers.add_parser(
        "report", help="Generate a quality report for an OpenAPI specification"
    )
    report_parser.add_argument("source", help="OpenAPI specification file or URL")
    report_parser.add_argument(
        "-f",
        "--format",
        choices=REPORT_FORMATS,
        default=config.get_str("default_report_format", "console"),
        help="Report format (default: %(default)s)",
    )
    report_parser.add_argument(
        "-o", "--output", help="Output file path (required for markdown and html)"
    )

    return parser


def _validate_report_arguments(args: argparse.Namespace) -> bool:
    """Check that file-based report formats have a destination."""
    if args.format in FILE_REPORT_FORMATS and not args.output:
        logger.error(f"Output file path is required for {args.format} format")
        print("❌ Output file path is required for markdown and html formats")
        print("   Use: --output <file> or -o <file>")
        return False
    return True


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


# -----------------------------------------------------------------------------
# Command Private Functions
# -----------------------------------------------------------------------------

async def _run_validate(args: argparse.Namespace) -> bool:
    """Validate a specification and print the outcome."""
    start = time.perf_counter()
    logger.info(f"🔍 Validating OpenAPI specification: {args.source}")

    result = await validate_spec(args.source)
    if result.is_valid:
        _print_validation_success(result, _elapsed_ms(start))
        return True

    _print_validation_failure(result, _elapsed_ms(start))
    return False


async def _run_report(args: argparse.Namespace) -> bool:
    """Score a specification and render the report in the requested format."""
    if not _validate_report_arguments(args):
        return False

    start = time.perf_counter()
    logger.info(f"📊 Generating {args.format} report for OpenAPI specification: {args.source}")

    try:
        result = await score_source(args.source)

        if args.format == "markdown":
            path = write_markdown_report(result, args.output, _elapsed_ms(start))
            print(f"📄 Markdown report generated: {path}")
        elif args.format == "html":
            path = write_html_report(result, args.output, _elapsed_ms(start))
            print(f"🌐 HTML report generated: {path}")
        else:
            _print_scoring_result(result, _elapsed_ms(start))

        logger.info(f"✅ Report completed: {result.total_score}/100 ({result.grade.value})")
        return True

    except SpecScoreError as e:
        logger.error(f"❌ Report generation failed: {e.describe()}")
        print(f"❌ Unexpected error during report generation: {e.describe()}")
        return False
    except OSError as e:
        logger.error(f"❌ Failed to write report: {e}")
        print(f"❌ Failed to write report: {e}")
        return False


# =============================================================================
# PUBLIC FUNCTIONS & CLASSES
# =============================================================================

async def main_cli(argv: Optional[List[str]] = None) -> bool:
    """Main CLI entrypoint for the OpenAPI specification scorer."""
    try:
        # Parse command line arguments
        parser = _create_argument_parser()
        args = parser.parse_args(argv)

        # Setup logging
        _setup_logging(args.verbose)

        # Handle utility commands
        if args.show_env:
            _show_environment_info()
            return True

        if args.command == "validate":
            return await _run_validate(args)
        if args.command == "report":
            return await _run_report(args)

        logger.error("No command specified. Use 'validate' or 'report'.")
        parser.print_help()
        return False

    except KeyboardInterrupt:
        logger.info("❌ Operation cancelled by user")
        print(f"\n❌ Operation cancelled by user")
        return False
    except Exception as e:
        logger.error(f"❌ CLI operation failed: {e}")
        print(f"❌ CLI operation failed: {e}")
        return False


def cli_main() -> None:
    """Sync entry point wrapper for the CLI."""
    success = asyncio.run(main_cli())
    raise SystemExit(0 if success else 1)


if __name__ == "__main__":
    cli_main()
