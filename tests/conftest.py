"""Shared fixtures for rmpc tests."""

import re
from datetime import timedelta
from unittest.mock import MagicMock

import pytest

from rmpc.lib.client import DaemonStats, PlaybackState, PlayerStatus, Song

ANSI_ESCAPE = re.compile(r"\033\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE.sub("", text)


class FakePlayer:
    """In-memory `PlayerClient` recording every call it receives."""

    def __init__(self, status=None, current_song=None, stats=None, queue=None, library=None):
        self._status = status
        self._current_song = current_song
        self._stats = stats
        self._queue = list(queue or [])
        self._library = list(library or [])
        self.calls: list[str] = []
        self.pushed: list[Song] = []

    def status(self):
        self.calls.append("status")
        return self._status

    def current_song(self):
        self.calls.append("current_song")
        return self._current_song

    def stats(self):
        self.calls.append("stats")
        return self._stats

    def queue(self):
        self.calls.append("queue")
        return self._queue

    def play(self):
        self.calls.append("play")

    def stop(self):
        self.calls.append("stop")

    def toggle_pause(self):
        self.calls.append("toggle_pause")

    def listall(self):
        self.calls.append("listall")
        return self._library

    def push(self, song):
        self.calls.append("push")
        self.pushed.append(song)

    def clear_queue(self):
        self.calls.append("clear_queue")
        self._queue = []


@pytest.fixture
def make_status():
    """Factory fixture for player status snapshots."""
    def _make(**kwargs):
        defaults = dict(
            volume=80,
            repeat=False,
            random=True,
            single=False,
            consume=False,
            state=PlaybackState.PLAYING,
            song=0,
            queue_len=3,
            time=(timedelta(seconds=83), timedelta(seconds=215)),
        )
        defaults.update(kwargs)
        return PlayerStatus(**defaults)
    return _make


@pytest.fixture
def songs():
    return [
        Song(file="Artist/Album/01 A.flac", artist="Artist", title="A"),
        Song(file="Artist/Album/02 B.flac", artist="Artist", title="B"),
        Song(file="Artist/Album/03 C.flac", artist="Artist", title="C"),
    ]


@pytest.fixture
def daemon_stats():
    return DaemonStats(
        artists=12,
        albums=34,
        songs=567,
        playtime=timedelta(seconds=3600),
        uptime=timedelta(seconds=90061),
        db_update=1_700_000_000,
        db_playtime=timedelta(seconds=123456),
    )


@pytest.fixture
def mock_mpd_client():
    """Mock python-mpd2 client for testing."""
    client = MagicMock()
    client.status.return_value = {}
    client.currentsong.return_value = {}
    client.playlistinfo.return_value = []
    client.listall.return_value = []
    return client
