"""
CredScan CLI

Command-line interface for scanning local files.

Commands:
    credscan creds FILES...          - Find user:pass credential patterns
    credscan search QUERY FILES...   - Find lines containing a literal query
    credscan init                    - Create a default config file
"""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

import click


def _safe_echo(text: str = "", **kwargs) -> None:
    """Echo text, handling Unicode issues on Windows consoles."""
    try:
        click.echo(text, **kwargs)
    except UnicodeEncodeError:
        safe = text.encode(sys.stdout.encoding or "utf-8", errors="replace").decode(
            sys.stdout.encoding or "utf-8", errors="replace"
        )
        click.echo(safe, **kwargs)

from credscan import __version__
from credscan.core.config import (
    CONFIG_FILENAME,
    OUTPUT_FORMATS,
    CredScanConfig,
    generate_default_config,
)
from credscan.core.errors import ConfigError
from credscan.core.report import ScanResult, ScanStatus
from credscan.core.request import CredentialScan, QueryScan, ScanRequest
from credscan.core.session import Workspace
from credscan.reporting.console import ConsoleReporter
from credscan.reporting.html_reporter import HTMLReporter
from credscan.reporting.json_reporter import JSONReporter
from credscan.reporting.sarif import SARIFReporter

logger = logging.getLogger(__name__)

# Exit codes
EXIT_MATCHES_FOUND = 1
EXIT_USAGE = 2


@click.group()
@click.version_option(version=__version__, prog_name="CredScan")
def cli() -> None:
    """
    CredScan - Local credential and text scanner

    Load text files and search them for user:pass credential patterns
    or for any literal text, with every occurrence highlighted.
    """
    pass


def _scan_options(func):
    """Options shared by the scanning commands."""
    options = [
        click.argument(
            "files", nargs=-1, type=click.Path(exists=True, dir_okay=False, path_type=Path)
        ),
        click.option("--format", "-f", "output_format", type=click.Choice(list(OUTPUT_FORMATS)),
                     default=None, help="Output format (default: console)."),
        click.option("--output", "-o", "output_file", type=click.Path(), default=None,
                     help="Write report to a file."),
        click.option("--config", "config_path", type=click.Path(path_type=Path), default=None,
                     help=f"Path to {CONFIG_FILENAME} configuration file."),
        click.option("--redact", is_flag=True,
                     help="Mask passwords in credential matches."),
        click.option("--fail-on-match", is_flag=True,
                     help="Exit with status 1 when anything is found."),
        click.option("--verbose", "-v", count=True, help="Increase log verbosity (-v, -vv)."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


# ═══════════════════════════════════════════════════════
#  credscan creds
# ═══════════════════════════════════════════════════════
@cli.command()
@_scan_options
def creds(files: tuple[Path, ...], **options) -> None:
    """Scan FILES for user@domain:password credential patterns.

    Examples:

        credscan creds dump.txt

        credscan creds *.txt --format json --output creds.json --redact
    """
    _run(CredentialScan(), files, **options)


# ═══════════════════════════════════════════════════════
#  credscan search
# ═══════════════════════════════════════════════════════
@cli.command()
@click.argument("query")
@_scan_options
def search(query: str, files: tuple[Path, ...], **options) -> None:
    """Find lines in FILES that contain QUERY (literal, case-sensitive).

    Examples:

        credscan search password config.ini

        credscan search "a.b*c" notes.txt --format html --output results.html
    """
    _run(QueryScan(query), files, **options)


# ═══════════════════════════════════════════════════════
#  credscan init
# ═══════════════════════════════════════════════════════
@cli.command()
@click.option("--path", "-p", "target_path", type=click.Path(), default=".",
              help="Directory to create the config file in.")
def init(target_path: str) -> None:
    """Create a default .credscan.yaml."""
    target = Path(target_path).resolve()
    target.mkdir(parents=True, exist_ok=True)

    config_file = target / CONFIG_FILENAME

    if config_file.exists():
        _safe_echo(click.style(f"  [!] {config_file} already exists, skipping.", fg="yellow"))
        return

    config_file.write_text(generate_default_config(), encoding="utf-8")
    _safe_echo(click.style(f"  [+] Created {config_file}", fg="green"))
    _safe_echo("")
    _safe_echo("  Run 'credscan creds FILES...' to start scanning.")


# ── Helpers ──

def _configure_logging(config_level: str, verbose: int) -> None:
    level = getattr(logging, config_level, logging.WARNING)
    if verbose >= 2:
        level = min(level, logging.DEBUG)
    elif verbose == 1:
        level = min(level, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


async def _load_and_scan(
    workspace: Workspace, files: tuple[Path, ...], request: ScanRequest
) -> ScanResult:
    await workspace.load(files)
    return await workspace.scan(request)


def _run(
    request: ScanRequest,
    files: tuple[Path, ...],
    output_format: Optional[str],
    output_file: Optional[str],
    config_path: Optional[Path],
    redact: bool,
    fail_on_match: bool,
    verbose: int,
) -> None:
    try:
        config = CredScanConfig.load(config_path)
    except ConfigError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc

    _configure_logging(config.log_level, verbose)

    # CLI flags override config
    fmt = output_format or config.output.format
    out_file = output_file or config.output.file
    mask = redact or config.display.redact

    workspace = Workspace(encoding=config.decoding.encoding, errors=config.decoding.errors)
    result = asyncio.run(_load_and_scan(workspace, files, request))

    # ── Report ──
    if fmt == "json":
        text = JSONReporter(redact=mask).report(result, workspace.failures, output_file=out_file)
        if not out_file:
            _safe_echo(text)
    elif fmt == "sarif":
        text = SARIFReporter(redact=mask).report(result, output_file=out_file)
        if not out_file:
            _safe_echo(text)
    elif fmt == "html":
        text = HTMLReporter(redact=mask).report(result, workspace.failures, output_file=out_file)
        if not out_file:
            _safe_echo(text)
    else:
        ConsoleReporter(redact=mask).report(result, workspace.failures, loaded=len(workspace.records))
        if out_file:
            # Also write JSON when console + output file
            JSONReporter(redact=mask).report(result, workspace.failures, output_file=out_file)

    if out_file:
        logger.info("Report written to %s", out_file)

    # ── Exit code ──
    if result.status in (ScanStatus.NO_FILES_LOADED, ScanStatus.INVALID_QUERY):
        sys.exit(EXIT_USAGE)
    if fail_on_match and result.found:
        sys.exit(EXIT_MATCHES_FOUND)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
