"""Daemon statistics rendering."""

import time
from datetime import timedelta

from rmpc.lib import style
from rmpc.lib.client import DaemonStats


def db_update_age(stats: DaemonStats, now: float | None = None) -> timedelta:
    """Time since the last database update, clamped at zero."""
    if now is None:
        now = time.time()
    return timedelta(seconds=max(0, int(now) - stats.db_update))


def format_stats(stats: DaemonStats, now: float | None = None) -> str:
    lines = [
        f"{style.label('Artists')}{stats.artists}",
        f"{style.label('Albums')}{stats.albums}",
        f"{style.label('Songs')}{stats.songs}",
        "",
        f"{style.label('Play Time')}{style.duration(stats.playtime)}",
        f"{style.label('Uptime')}{style.duration(stats.uptime)}",
        f"{style.label('DB Updated')}{style.duration(db_update_age(stats, now))}",
        f"{style.label('DB Play Time')}{style.duration(stats.db_playtime)}",
    ]
    return "\n".join(lines) + "\n"
