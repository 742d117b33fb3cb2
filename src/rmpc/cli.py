"""rmpc command-line entry point."""

import argparse
import ipaddress
import logging
import sys
from importlib.metadata import PackageNotFoundError, version

import mpd
import shtab

from rmpc import commands, settings
from rmpc.lib.client import PlayerError, mpd_connection
from rmpc.settings import LOG_FORMAT, LOG_LEVEL, MPD_PORT

logger = logging.getLogger(__name__)


def get_version() -> str:
    try:
        return version("rmpc")
    except PackageNotFoundError:
        return "unknown"


def port_number(value: str) -> int:
    """argparse type for a TCP port."""
    try:
        port = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port: {value!r}")
    if not 0 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"port out of range: {port}")
    return port


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser.

    Returns:
        The argument parser
    """
    parser = argparse.ArgumentParser(
        prog="rmpc",
        description="Command-line client for the Music Player Daemon",
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {get_version()}"
    )
    parser.add_argument(
        "-i", "--ip",
        type=ipaddress.ip_address,
        default=None,
        help="IP address of your MPD server (default: $MPD_HOST or 127.0.0.1)",
    )
    parser.add_argument(
        "-p", "--port",
        type=port_number,
        default=MPD_PORT,
        help="Port of your MPD server (default: %(default)s)",
    )
    shtab.add_argument_to(
        parser,
        option_string="--shell-completion",
        help="Print a shell completion script and exit",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run (default: status)")

    subparsers.add_parser("status", help="Show player status")
    subparsers.add_parser("toggle", help="Toggle play/pause")
    subparsers.add_parser("play", help="Start playback")
    subparsers.add_parser("stop", help="Stop playback")
    subparsers.add_parser("listall", help="List every song in the library")

    add_parser = subparsers.add_parser("add", help="Add a library song to the queue")
    add_parser.add_argument("filepath", help="Song path, relative to the music directory")

    subparsers.add_parser("stats", help="Show daemon statistics")

    queue_parser = subparsers.add_parser("queue", help="Inspect or clear the queue")
    queue_subparsers = queue_parser.add_subparsers(dest="queue_command", required=True)
    queue_subparsers.add_parser("list", help="List the queue")
    queue_subparsers.add_parser("next-track", help="Show the next song in the queue")
    queue_subparsers.add_parser("clear", help="Clear the queue")

    return parser


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Log to stderr so diagnostics stay out of rendered output."""
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def run(args: argparse.Namespace) -> None:
    """Open one connection, run the selected command, disconnect."""
    # MPD_HOST may hold a hostname; only an explicit --ip is validated
    host = str(args.ip) if args.ip is not None else settings.MPD_HOST
    with mpd_connection(host, args.port) as client:
        commands.dispatch(client, args)


def main(argv: list[str] | None = None) -> None:
    """Entry point for the rmpc command."""
    args = create_parser().parse_args(argv)
    setup_logging()

    try:
        run(args)
    except KeyboardInterrupt:
        print("\nInterrupted")
        sys.exit(130)
    except (PlayerError, mpd.MPDError, OSError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
