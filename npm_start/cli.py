"""CLI entry point: npm-start-detect.

Runs detection against a workspace the way a buildpack harness would:

    npm-start-detect /workspace          # human-readable plan
    npm-start-detect /workspace --json   # plan as JSON

Exit codes: 0 detected, 100 undetected, 1 error.
"""

from __future__ import annotations

import json
import sys

import click

from npm_start.detect import NpmStartDetector
from npm_start.exceptions import NpmStartError
from npm_start.logging import setup_logging
from npm_start.models import DetectContext
from npm_start.path_parser import EnvProjectPathParser

EXIT_DETECTED = 0
EXIT_ERROR = 1
EXIT_UNDETECTED = 100


@click.command()
@click.argument("working_dir", default=".", type=click.Path(file_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print the build plan as JSON")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
@click.option(
    "--log-format",
    type=click.Choice(["console", "json"]),
    default=None,
    help="Log renderer (default: NPM_START_LOG_FORMAT or console)",
)
def main(working_dir: str, as_json: bool, verbose: bool, log_format: str | None) -> None:
    """Detect whether WORKING_DIR is launched with `npm start`."""
    setup_logging("DEBUG" if verbose else None, log_format)

    detector = NpmStartDetector(EnvProjectPathParser())
    try:
        result = detector.detect(DetectContext(working_dir=working_dir))
    except NpmStartError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_ERROR)

    if result.plan is None:
        click.echo(f"npm-start: not detected ({result.kind.value})", err=True)
        sys.exit(EXIT_UNDETECTED)

    if as_json:
        click.echo(json.dumps(result.plan.to_dict(), indent=2))
    else:
        for req in result.plan.requires:
            flags = ", ".join(k for k, v in sorted(req.metadata.items()) if v)
            click.echo(f"{req.name} ({flags})" if flags else req.name)
    sys.exit(EXIT_DETECTED)
