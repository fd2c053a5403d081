"""
Choice between the in-memory and the disk-scanning distance store.
"""

from enum import Enum

from .errors import ConfigError

DEFAULT_THRESHOLD = 10000


class Mode(Enum):
    AUTO = "auto"
    MEM = "mem"
    DISK = "disk"


def parse_mode(value):
    """Convert a mode name (or Mode) to a Mode, raising ConfigError if unknown."""
    if isinstance(value, Mode):
        return value
    try:
        return Mode(str(value).strip().lower())
    except ValueError:
        choices = ", ".join(m.value for m in Mode)
        raise ConfigError(f"Unknown mode {value!r} (expected one of: {choices})") from None


def select_mode(label_count, threshold=DEFAULT_THRESHOLD, mode=Mode.AUTO):
    """
    Decide which distance store to use.

    The in-memory store needs memory proportional to the number of stored
    pairs; the disk-scanning store reads the whole input once per row.

    Args:
        label_count (int): Number of distinct labels
        threshold (int): Largest label count handled in memory under AUTO
        mode (Mode): Explicit override, or AUTO

    Returns:
        Mode: Either Mode.MEM or Mode.DISK
    """
    mode = parse_mode(mode)
    if threshold < 0:
        raise ConfigError(f"Threshold must be non-negative, got {threshold}")

    if mode is Mode.AUTO:
        return Mode.MEM if label_count <= threshold else Mode.DISK
    return mode
