"""Tests for status rendering."""

from datetime import timedelta

import pytest

from conftest import strip_ansi
from rmpc.lib import style
from rmpc.lib.client import PlaybackState, Song
from rmpc.lib.status import format_status, format_toggles

TOGGLES = "Volume: 80    Repeat: false    Random: true    Single: false    Consume: false    "


def test_stopped_renders_only_toggles(make_status):
    status = make_status(state=PlaybackState.STOPPED)
    output = format_status(status, Song(file="x.flac", artist="A", title="T"))

    assert strip_ansi(output) == TOGGLES + "\n"


@pytest.mark.parametrize("song,time", [
    (None, None),
    (Song(file="x.flac"), (timedelta(seconds=1), timedelta(seconds=2))),
])
def test_stopped_is_one_line(make_status, song, time):
    output = format_status(make_status(state=PlaybackState.STOPPED, song=None, time=time), song)
    assert output.count("\n") == 1


@pytest.mark.parametrize("state,tag", [
    (PlaybackState.PLAYING, "[playing]"),
    (PlaybackState.PAUSED, "[paused]"),
])
def test_active_renders_three_lines(make_status, state, tag):
    song = Song(file="x.flac", artist="Pink Floyd", title="Time")
    output = strip_ansi(format_status(make_status(state=state), song))

    assert output.splitlines() == [
        "Pink Floyd - Time",
        f"{tag}    #1/3    0:01:23/0:03:35",
        TOGGLES,
    ]


@pytest.mark.parametrize("song_index,expected", [
    (0, "#1/3"),
    (1, "#2/3"),
    (2, "#3/3"),
    (None, "#1/3"),
])
def test_position_is_one_based(make_status, song_index, expected):
    output = strip_ansi(format_status(make_status(song=song_index), Song(file="x.flac")))
    assert output.splitlines()[1].split("    ")[1] == expected


@pytest.mark.parametrize("song,title_line", [
    (None, " - "),
    (Song(file="x.flac"), " - "),
    (Song(file="x.flac", artist="Artist"), "Artist - "),
    (Song(file="x.flac", title="Title"), " - Title"),
])
def test_missing_tags_default_to_empty(make_status, song, title_line):
    output = format_status(make_status(), song)
    assert output.splitlines()[0] == title_line


def test_missing_time_renders_zero(make_status):
    output = strip_ansi(format_status(make_status(time=None), Song(file="x.flac")))
    assert output.splitlines()[1].endswith("0:00:00/0:00:00")


def test_labels_are_bold(make_status):
    output = format_toggles(make_status())
    for name in ["Volume", "Repeat", "Random", "Single", "Consume"]:
        assert style.label(name) in output
    assert style.BOLD in style.label("Volume")
    assert style.label("Volume").endswith(style.RESET)


@pytest.mark.parametrize("state", list(PlaybackState))
def test_rendering_is_idempotent(make_status, state):
    status = make_status(state=state)
    song = Song(file="x.flac", artist="A", title="T")
    assert format_status(status, song) == format_status(status, song)
