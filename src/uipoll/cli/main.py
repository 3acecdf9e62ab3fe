"""uipoll CLI - Main entry point.

Exit codes:
    0: Target found
    1: Target not found
    2: Configuration or argument error
    3: Runtime error
"""

import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from ..engine import MatchResult
from ..exceptions import ConfigurationError, InvalidArgumentError, UipollRuntimeException
from ..find import RecognitionPoller, create_poller
from ..logging import setup_logging
from ..model import Region

# Exit codes
EXIT_FOUND = 0
EXIT_NOT_FOUND = 1
EXIT_CONFIG_ERROR = 2
EXIT_RUNTIME_ERROR = 3


class RegionParamType(click.ParamType):
    """Click parameter accepting ``x,y,width,height``."""

    name = "region"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Region:
        if isinstance(value, Region):
            return value
        try:
            return Region.parse(value)
        except ValueError as e:
            self.fail(str(e), param, ctx)


REGION = RegionParamType()


def _describe(result: MatchResult) -> str:
    x, y = result.center
    description = f"found at ({x}, {y}) size={result.width}x{result.height} confidence={result.confidence:.2f}"
    if result.text:
        description += f" text={result.text!r}"
    return description


def _run(operation: Callable[[], Any]) -> None:
    """Run a poller operation and exit with the matching code."""
    try:
        result = operation()
    except (InvalidArgumentError, ConfigurationError) as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(EXIT_CONFIG_ERROR)
    except (UipollRuntimeException, OSError) as e:
        click.echo(f"Runtime error: {e}", err=True)
        sys.exit(EXIT_RUNTIME_ERROR)

    if isinstance(result, MatchResult):
        click.echo(_describe(result))
        sys.exit(EXIT_FOUND)
    if result is True:
        click.echo("found")
        sys.exit(EXIT_FOUND)

    click.echo("not found")
    sys.exit(EXIT_NOT_FOUND)


def _build_poller(ctx: click.Context, **overrides: Any) -> RecognitionPoller:
    try:
        return create_poller(**overrides)
    except (ConfigurationError, ValueError) as e:
        click.echo(f"Configuration error: {e}", err=True)
        ctx.exit(EXIT_CONFIG_ERROR)
    except (UipollRuntimeException, ImportError) as e:
        click.echo(f"Runtime error: {e}", err=True)
        ctx.exit(EXIT_RUNTIME_ERROR)


@click.group()
@click.version_option(package_name="uipoll", prog_name="uipoll")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool) -> None:
    """Poll the screen for images and text."""
    if verbose:
        setup_logging(level="DEBUG", structured=False)


@main.command("find-image")
@click.argument("image_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--region", "-r", type=REGION, help="Search region as x,y,width,height")
@click.option("--timeout", "-t", type=float, help="Timeout in seconds")
@click.option("--interval", "-i", type=float, help="Delay between attempts in seconds")
@click.option("--click", "do_click", is_flag=True, help="Click the match when found")
@click.pass_context
def find_image(
    ctx: click.Context,
    image_path: Path,
    region: Region | None,
    timeout: float | None,
    interval: float | None,
    do_click: bool,
) -> None:
    """Wait for IMAGE_PATH to appear on screen."""
    poller = _build_poller(ctx)
    finder = poller.find_image_and_click if do_click else poller.find_image
    _run(lambda: finder(image_path, region=region, timeout=timeout, interval=interval))


@main.command("find-text")
@click.argument("keyword")
@click.option("--region", "-r", type=REGION, help="OCR region as x,y,width,height")
@click.option("--attempts", "-a", type=click.IntRange(min=1), help="Number of OCR attempts")
@click.option("--interval", "-i", type=float, help="Delay between attempts in seconds")
@click.option("--click", "do_click", is_flag=True, help="Click the text when found")
@click.pass_context
def find_text(
    ctx: click.Context,
    keyword: str,
    region: Region | None,
    attempts: int | None,
    interval: float | None,
    do_click: bool,
) -> None:
    """Look for KEYWORD (case-insensitive substring) with OCR."""
    poller = _build_poller(ctx)
    finder = poller.find_text_and_click if do_click else poller.find_text
    _run(lambda: finder(keyword, region=region, attempts=attempts, interval=interval))


@main.command("main-ui")
@click.option(
    "--marker",
    "-m",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Marker image that identifies the main UI (overrides UIPOLL_MAIN_UI_MARKER)",
)
@click.pass_context
def main_ui(ctx: click.Context, marker: Path | None) -> None:
    """Check whether the application is showing its main UI."""
    poller = _build_poller(ctx, main_ui_marker=marker)
    _run(poller.is_in_main_ui)


if __name__ == "__main__":
    main()
