"""Command dispatch - one command, one or two calls to the player."""

import argparse
import logging
from pathlib import PurePosixPath
from typing import Callable

from rmpc.lib.client import NoCurrentSongError, PlayerClient
from rmpc.lib.queue import format_next_track, format_queue
from rmpc.lib.stats import format_stats
from rmpc.lib.status import format_status

logger = logging.getLogger(__name__)


def status(client: PlayerClient) -> None:
    """Print player status and the current song."""
    print(format_status(client.status(), client.current_song()), end="")


def toggle(client: PlayerClient) -> None:
    """Toggle pause, then print status."""
    client.toggle_pause()
    status(client)


def play(client: PlayerClient) -> None:
    """Start playback, then print status."""
    client.play()
    status(client)


def stop(client: PlayerClient) -> None:
    client.stop()


def listall(client: PlayerClient) -> None:
    """Print the path of every song in the library."""
    for song in client.listall():
        print(song.file)


def add(client: PlayerClient, filepath: str) -> None:
    """
    Enqueue the library song whose path equals `filepath`.

    The path is compared verbatim against the library entries, after
    normalization. A path that matches nothing is ignored.
    """
    # TODO: accept absolute paths by stripping the daemon's music_directory prefix
    target = str(PurePosixPath(filepath))
    for song in client.listall():
        if song.file == target:
            client.push(song)
            return
    logger.info("No library entry matches %s", target)


def stats(client: PlayerClient) -> None:
    print(format_stats(client.stats()), end="")


def _current_position(client: PlayerClient) -> int:
    """Zero-based queue position of the current song."""
    position = client.status().song
    if position is None:
        raise NoCurrentSongError()
    return position


def queue_list(client: PlayerClient) -> None:
    """Print the queue, marking the song that is playing."""
    position = _current_position(client)
    print(format_queue(client.queue(), position + 1), end="")


def queue_next_track(client: PlayerClient) -> None:
    position = _current_position(client)
    print(format_next_track(client.queue(), position), end="")


def queue_clear(client: PlayerClient) -> None:
    client.clear_queue()


COMMANDS: dict[str, Callable[[PlayerClient], None]] = {
    "status": status,
    "toggle": toggle,
    "play": play,
    "stop": stop,
    "listall": listall,
    "stats": stats,
}

QUEUE_COMMANDS: dict[str, Callable[[PlayerClient], None]] = {
    "list": queue_list,
    "next-track": queue_next_track,
    "clear": queue_clear,
}


def dispatch(client: PlayerClient, args: argparse.Namespace) -> None:
    """Run the command selected on the command line; `status` if none."""
    command = args.command or "status"
    logger.debug("Running command %s", command)

    if command == "add":
        add(client, args.filepath)
    elif command == "queue":
        QUEUE_COMMANDS[args.queue_command](client)
    else:
        COMMANDS[command](client)
