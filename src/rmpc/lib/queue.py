"""Play queue listing."""

from rmpc.lib.client import Song

NOW_PLAYING = "Now playing: "
NO_NEXT_TRACK = "no songs found"


def format_queue(queue: list[Song], now_position: int) -> str:
    """List the queue, marking the song at one-based `now_position`."""
    padding = " " * len(NOW_PLAYING)
    lines = []
    for position, song in enumerate(queue, start=1):
        prefix = NOW_PLAYING if position == now_position else padding
        lines.append(f"{prefix}{song.file}")
    return "".join(f"{line}\n" for line in lines)


def next_track(queue: list[Song], now_position: int) -> Song | None:
    """Song after zero-based `now_position`, or None at the end of the queue."""
    index = now_position + 1
    if index < len(queue):
        return queue[index]
    return None


def format_next_track(queue: list[Song], now_position: int) -> str:
    song = next_track(queue, now_position)
    if song is None:
        return f"{NO_NEXT_TRACK}\n"
    return f"{song.file}\n"
