"""
adfbridge CLI - Convert between markdown, Jira ADF and plain text.

Usage:
    # Markdown to ADF JSON
    adfbridge --markdown description.md

    # ADF JSON (e.g. an issue description) to plain text
    adfbridge --adf description.json

    # Field report for an issue fetched with ?expand=names
    adfbridge --report PROJ-123.json

    # Read from stdin
    cat notes.md | adfbridge --markdown -

Environment Variables (optional):
    ADFBRIDGE_MARKDOWN_PRESET: markdown-it preset (commonmark, default, zero)
    ADFBRIDGE_HARD_BREAKS: Treat newlines in paragraphs as hard breaks
    ADFBRIDGE_DATE_FORMAT: strftime format for dates (default %Y-%m-%d %H:%M)
    ADFBRIDGE_LOCAL_TIME: Convert timestamps to local time (default true)
    ADFBRIDGE_EXTRA_NOISE_FIELDS: Comma-separated extra field-id fragments to hide
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from ..adapters.config import EnvironmentConfigProvider
from ..adapters.formatters import (
    ADFFormatter,
    FieldReportRenderer,
    FieldValueFormatter,
    NoiseClassifier,
)
from ..adapters.parsers import MarkdownTokenSource
from ..core.exceptions import AdfBridgeError, ConfigurationError, InputError
from ..core.ports.config_provider import AppConfig
from .exit_codes import ExitCode
from .output import Console


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="adfbridge",
        description="Convert between markdown, Jira ADF and plain text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument(
        "--markdown", "-m",
        type=str,
        help="Markdown file to convert to ADF JSON ('-' for stdin)",
    )
    mode.add_argument(
        "--adf", "-a",
        type=str,
        help="ADF JSON file to flatten to plain text ('-' for stdin)",
    )
    mode.add_argument(
        "--report", "-r",
        type=str,
        help="Jira issue JSON file to render as a field report ('-' for stdin)",
    )

    parser.add_argument(
        "--preset",
        type=str,
        help="markdown-it preset (or set ADFBRIDGE_MARKDOWN_PRESET)",
    )
    parser.add_argument(
        "--hard-breaks",
        action="store_true",
        default=None,
        help="Treat single newlines as hard breaks",
    )
    parser.add_argument(
        "--date-format",
        type=str,
        help="strftime format for dates (or set ADFBRIDGE_DATE_FORMAT)",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        help="Path to .env file (default: ./.env)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        default=None,
        help="Disable colored status output",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        default=None,
        help="Enable verbose logging",
    )

    return parser


def run(args: argparse.Namespace, console: Optional[Console] = None) -> int:
    """
    Run the CLI with parsed arguments.

    Returns:
        Process exit code
    """
    overrides = {k: v for k, v in vars(args).items() if k != "env_file"}

    try:
        provider = EnvironmentConfigProvider(env_file=args.env_file, cli_overrides=overrides)
        errors = provider.validate()
        if errors:
            raise ConfigurationError("; ".join(errors))
        config = provider.load()
    except ConfigurationError as e:
        console = console or Console()
        console.error(f"Configuration error: {e}")
        return ExitCode.CONFIG_ERROR

    console = console or Console(color=config.color, verbose=config.verbose)
    setup_logging(config.verbose)
    logger = logging.getLogger("main")
    console.debug(f"Configuration loaded from {provider.name}")

    try:
        if config.markdown_path:
            output = _markdown_to_adf(config)
        elif config.adf_path:
            output = _adf_to_text(config)
        else:
            output = _render_report(config)
    except InputError as e:
        console.error(str(e))
        return ExitCode.INPUT_ERROR
    except AdfBridgeError as e:
        logger.error(str(e))
        console.error(str(e))
        return ExitCode.ERROR

    console.print(output)
    return ExitCode.SUCCESS


def main(argv: Optional[list[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        return int(run(args))
    except KeyboardInterrupt:
        return ExitCode.INTERRUPTED


# -----------------------------------------------------------------------------
# Modes
# -----------------------------------------------------------------------------

def _markdown_to_adf(config: AppConfig) -> str:
    token_source = MarkdownTokenSource(
        preset=config.conversion.markdown_preset,
        hard_breaks=config.conversion.hard_breaks,
    )
    formatter = ADFFormatter(token_source=token_source)
    document = formatter.format_text(_read_text(config.markdown_path))
    return json.dumps(document, indent=2, ensure_ascii=False)


def _adf_to_text(config: AppConfig) -> str:
    document = _read_json(config.adf_path)
    return ADFFormatter().extract_text(document).strip()


def _render_report(config: AppConfig) -> str:
    classifier = NoiseClassifier(extra_field_fragments=config.render.extra_noise_fields)
    formatter = FieldValueFormatter(
        classifier=classifier,
        date_format=config.render.date_format,
        local_time=config.render.local_time,
    )
    issue = _read_json(config.report_path)
    if not isinstance(issue, dict):
        raise InputError("Issue JSON must be an object", source=config.report_path)
    return FieldReportRenderer(formatter=formatter).render(issue)


def _read_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise InputError(f"Cannot read {path}", source=path, cause=e)
    except UnicodeDecodeError as e:
        raise InputError(f"{path} is not valid UTF-8", source=path, cause=e)


def _read_json(path: str) -> Any:
    raw = _read_text(path)
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise InputError(f"{path} is not valid JSON", source=path, cause=e)
