"""deskshot CLI - Main entry point.

Captures monitors or a region of the screen and writes a PNG file, or PNG
bytes to standard output.

Exit codes:
    0: Success
    1: Capture failed
    2: Invalid input or configuration
    3: Output or runtime error
"""

import sys
from pathlib import Path
from typing import NoReturn

import click

from .. import __version__
from ..base_exceptions import ConfigurationError, DeskshotException
from ..capture import ScreenCapturer
from ..capture_exceptions import CaptureException, InvalidRegion
from ..hal.config import HALConfig, get_config
from ..hal.interfaces.screen_capture import Monitor
from ..logging import setup_logging_from_env
from ..model import CaptureRequest, Region
from ..output import CompressionLevel, default_filename, encode_to, open_in_viewer, write_to_file

# Exit codes
EXIT_SUCCESS = 0
EXIT_CAPTURE_FAILED = 1
EXIT_INPUT_ERROR = 2
EXIT_RUNTIME_ERROR = 3

EPILOG = """\b
Compression levels:
  -r     Raw, no compression (fastest, largest)
  -c     Fast compression (default)
  -cc    Balanced compression
  -ccc   Best compression (slowest, smallest)

\b
Examples:
  deskshot                          # All monitors, fast compression
  deskshot capture.png              # Capture to a specific file
  deskshot -ccc                     # Best compression
  deskshot -v                       # Capture and open in viewer
  deskshot --stdout | feh -         # Pipe to an image viewer
  deskshot -m 1                     # Only monitor 1
  deskshot --region 100,100,500,400 # Region (x,y,width,height)
  deskshot -d :0                    # Force the display (for cron)
  deskshot --list                   # List available monitors
"""


def compression_from_flags(raw: bool, compress: int, default: str = "fast") -> CompressionLevel:
    """Map the -r/-c flags to a compression level.

    Args:
        raw: -r given; wins over any -c
        compress: Number of -c flags
        default: Level name used when neither flag is given

    Returns:
        CompressionLevel
    """
    if raw:
        return CompressionLevel.NONE
    if compress == 0:
        return CompressionLevel.coerce(default)
    return CompressionLevel.coerce(min(compress, int(CompressionLevel.BEST)))


def resolve_output_path(
    output_arg: str | None, output_opt: str | None, config: HALConfig
) -> Path:
    """Pick the output file: positional argument, then -o, then a timestamped name."""
    chosen = output_arg or output_opt
    if chosen:
        return Path(chosen)
    return Path(config.screenshot_dir) / default_filename(config.filename_prefix)


def format_monitor(monitor: Monitor) -> str:
    b = monitor.bounds
    return f"  {monitor.index}: {monitor.display_name} ({b.width}x{b.height} at {b.x},{b.y})"


def _fail(error: Exception, code: int) -> NoReturn:
    click.echo(f"Error: {error}", err=True)
    sys.exit(code)


@click.command(epilog=EPILOG, context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="deskshot")
@click.argument("output_arg", metavar="[OUTPUT]", required=False, type=click.Path(dir_okay=False))
@click.option("--monitor", "-m", default=-1, show_default=True, help="Monitor index (-1 = all)")
@click.option("--region", help="Region to capture: x,y,width,height")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    help="Output filename (default: screenshot_TIMESTAMP.png)",
)
@click.option("--display", "-d", default="", help="X11 display (default: $DISPLAY or :0)")
@click.option("--list", "-l", "list_only", is_flag=True, help="List available monitors")
@click.option("--compress", "-c", count=True, help="Compression: -c fast, -cc balanced, -ccc best")
@click.option("--raw", "-r", is_flag=True, help="No compression (fastest, largest files)")
@click.option("--view", "-v", is_flag=True, help="Open the screenshot in the default viewer")
@click.option("--stdout", "to_stdout", is_flag=True, help="Write PNG to stdout (for piping)")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
def main(
    output_arg: str | None,
    monitor: int,
    region: str | None,
    output: str | None,
    display: str,
    list_only: bool,
    compress: int,
    raw: bool,
    view: bool,
    to_stdout: bool,
    verbose: bool,
) -> None:
    """Fast screenshot utility.

    Captures all monitors, a single monitor or a region of the screen and
    saves it as PNG. Works without a desktop session (e.g. from cron) by
    falling back to display :0.
    """
    setup_logging_from_env(level="DEBUG" if verbose else None)

    try:
        config = get_config()
    except ConfigurationError as e:
        _fail(e, EXIT_INPUT_ERROR)

    capturer = ScreenCapturer(config=config)

    try:
        if list_only:
            monitors = capturer.list_monitors(display)
            strategy = capturer.strategy_name(display)
            click.echo(f"Available monitors ({len(monitors)}) via {strategy}:")
            for m in monitors:
                click.echo(format_monitor(m))
            return

        request = CaptureRequest(
            monitor_index=monitor,
            region=Region.from_string(region) if region else None,
            display_override=display,
        )
        level = compression_from_flags(raw, compress, config.default_compression)

        image = capturer.capture(request)

        if to_stdout:
            stream = click.get_binary_stream("stdout")
            encode_to(image, level, stream)
            stream.flush()
            return

        path = write_to_file(image, level, resolve_output_path(output_arg, output, config))
        click.echo(f"Screenshot saved: {path}")

        if view:
            open_in_viewer(path)

    except (InvalidRegion, ConfigurationError) as e:
        _fail(e, EXIT_INPUT_ERROR)
    except CaptureException as e:
        _fail(e, EXIT_CAPTURE_FAILED)
    except DeskshotException as e:
        _fail(e, EXIT_RUNTIME_ERROR)


if __name__ == "__main__":
    main()
