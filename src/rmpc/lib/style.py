"""Terminal styling with ANSI escape sequences."""

from datetime import timedelta

WHITE = "\033[37m"
BOLD = "\033[1m"
RESET = "\033[0m"

FIELD_SEPARATOR = "    "


def label(text: str) -> str:
    """Bold white label, e.g. `Volume: `."""
    return f"{WHITE}{BOLD}{text}: {RESET}"


def value(obj: object) -> str:
    if isinstance(obj, bool):
        return "true" if obj else "false"
    return str(obj)


def duration(delta: timedelta) -> str:
    return str(delta)


def field(name: str, obj: object) -> str:
    """One labelled `name: value` field followed by the field separator."""
    return f"{label(name)}{value(obj)}{FIELD_SEPARATOR}"
