"""Player status rendering."""

from datetime import timedelta

from rmpc.lib import style
from rmpc.lib.client import PlaybackState, PlayerStatus, Song

STATE_TAGS = {
    PlaybackState.PLAYING: "playing",
    PlaybackState.PAUSED: "paused",
}


def format_toggles(status: PlayerStatus) -> str:
    """Volume, repeat, random, single and consume, on one line."""
    return "".join([
        style.field("Volume", status.volume),
        style.field("Repeat", status.repeat),
        style.field("Random", status.random),
        style.field("Single", status.single),
        style.field("Consume", status.consume),
    ]) + "\n"


def format_status(status: PlayerStatus, current_song: Song | None) -> str:
    """Render the player status.

    A stopped player shows only the toggle line. Otherwise three lines:
    `artist - title`, then `[state]    #pos/len    elapsed/total`, then
    the toggle line. `pos` is one-based.
    """
    if status.state == PlaybackState.STOPPED:
        return format_toggles(status)

    song = current_song or Song(file="")
    title_line = f"{song.artist or ''} - {song.title or ''}\n"

    pos = (status.song or 0) + 1
    elapsed, total = status.time or (timedelta(0), timedelta(0))
    state_line = (
        f"[{STATE_TAGS[status.state]}]{style.FIELD_SEPARATOR}"
        f"#{pos}/{status.queue_len}{style.FIELD_SEPARATOR}"
        f"{style.duration(elapsed)}/{style.duration(total)}\n"
    )

    return title_line + state_line + format_toggles(status)
