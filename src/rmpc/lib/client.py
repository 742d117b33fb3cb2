"""MPD client - data model and a thin adapter over python-mpd2."""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Iterator, Protocol

from mpd import MPDClient

logger = logging.getLogger(__name__)


class PlayerError(Exception):
    """Player error."""
    pass


class NoCurrentSongError(PlayerError):
    """Raised when a command needs a now-playing position and there is none."""

    def __init__(self) -> None:
        super().__init__("No song is currently playing")


# --- Types ---


class PlaybackState(Enum):
    STOPPED = "stop"
    PLAYING = "play"
    PAUSED = "pause"


@dataclass(frozen=True)
class Song:
    """A song, identified by its path in the daemon's library."""

    file: str
    artist: str | None = None
    title: str | None = None
    duration: timedelta | None = None


@dataclass(frozen=True)
class PlayerStatus:
    """Snapshot of the daemon's player state.

    `song` is the zero-based queue position of the current song, if any.
    `time` is the (elapsed, total) pair for the current song, if any.
    """

    volume: int
    repeat: bool
    random: bool
    single: bool
    consume: bool
    state: PlaybackState
    song: int | None = None
    queue_len: int = 0
    time: tuple[timedelta, timedelta] | None = None


@dataclass(frozen=True)
class DaemonStats:
    artists: int
    albums: int
    songs: int
    playtime: timedelta
    uptime: timedelta
    db_update: int  # unix timestamp of the last database update
    db_playtime: timedelta


class PlayerClient(Protocol):
    """The operations the commands need from an MPD connection."""

    def status(self) -> PlayerStatus: ...

    def current_song(self) -> Song | None: ...

    def stats(self) -> DaemonStats: ...

    def queue(self) -> list[Song]: ...

    def play(self) -> None: ...

    def stop(self) -> None: ...

    def toggle_pause(self) -> None: ...

    def listall(self) -> list[Song]: ...

    def push(self, song: Song) -> None: ...

    def clear_queue(self) -> None: ...


# --- Response parsing ---


def _int(response: dict, key: str, default: int | None = None) -> int:
    raw = response.get(key)
    if raw is None:
        if default is None:
            raise PlayerError(f"Missing field in MPD response: {key}")
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise PlayerError(f"Invalid {key} in MPD response: {raw!r}") from e


def _seconds(response: dict, key: str) -> timedelta:
    return timedelta(seconds=_int(response, key))


def _flag(response: dict, key: str) -> bool:
    # `single` may also be "oneshot"
    return response.get(key, "0") != "0"


def _tag(value: str | list[str] | None) -> str | None:
    """Multi-valued tags come back from python-mpd2 as lists."""
    if isinstance(value, list):
        return ", ".join(value)
    return value


def parse_time(raw: str | None) -> tuple[timedelta, timedelta] | None:
    """Parse the `time` status field ("elapsed:total", whole seconds)."""
    if not raw:
        return None
    try:
        elapsed, total = raw.split(":", 1)
        return timedelta(seconds=int(elapsed)), timedelta(seconds=int(total))
    except ValueError as e:
        raise PlayerError(f"Invalid time in MPD response: {raw!r}") from e


def parse_status(response: dict) -> PlayerStatus:
    raw_state = response.get("state")
    try:
        state = PlaybackState(raw_state)
    except ValueError as e:
        raise PlayerError(f"Unknown playback state: {raw_state!r}") from e

    return PlayerStatus(
        volume=_int(response, "volume", -1),
        repeat=_flag(response, "repeat"),
        random=_flag(response, "random"),
        single=_flag(response, "single"),
        consume=_flag(response, "consume"),
        state=state,
        song=_int(response, "song") if "song" in response else None,
        queue_len=_int(response, "playlistlength", 0),
        time=parse_time(response.get("time")),
    )


def parse_song(response: dict) -> Song:
    duration = None
    raw_duration = response.get("duration") or response.get("time")
    if raw_duration:
        try:
            duration = timedelta(seconds=float(raw_duration))
        except (ValueError, OverflowError):
            logger.debug("Ignoring unparseable duration %r for %s", raw_duration, response.get("file"))
    return Song(
        file=response["file"],
        artist=_tag(response.get("artist")),
        title=_tag(response.get("title")),
        duration=duration,
    )


def parse_stats(response: dict) -> DaemonStats:
    return DaemonStats(
        artists=_int(response, "artists"),
        albums=_int(response, "albums"),
        songs=_int(response, "songs"),
        playtime=_seconds(response, "playtime"),
        uptime=_seconds(response, "uptime"),
        db_update=_int(response, "db_update"),
        db_playtime=_seconds(response, "db_playtime"),
    )


# --- Adapter ---


class MpdPlayer:
    """`PlayerClient` backed by a connected `mpd.MPDClient`."""

    def __init__(self, client: MPDClient) -> None:
        self.client = client

    def status(self) -> PlayerStatus:
        return parse_status(self.client.status())

    def current_song(self) -> Song | None:
        response = self.client.currentsong()
        if not response:
            return None
        return parse_song(response)

    def stats(self) -> DaemonStats:
        return parse_stats(self.client.stats())

    def queue(self) -> list[Song]:
        return [parse_song(item) for item in self.client.playlistinfo()]

    def play(self) -> None:
        self.client.play()

    def stop(self) -> None:
        self.client.stop()

    def toggle_pause(self) -> None:
        self.client.pause()

    def listall(self) -> list[Song]:
        return [parse_song(item) for item in self.client.listall() if "file" in item]

    def push(self, song: Song) -> None:
        self.client.add(song.file)

    def clear_queue(self) -> None:
        self.client.clear()


@contextmanager
def mpd_connection(host: str, port: int) -> Iterator[MpdPlayer]:
    """Context manager for an MPD connection."""
    client = MPDClient()
    logger.debug("Connecting to MPD at %s:%s", host, port)
    client.connect(host, port)
    try:
        yield MpdPlayer(client)
    finally:
        logger.debug("Disconnecting from MPD")
        client.disconnect()
