"""
Tokenizing of sparse distance records.

Each record is ``<label1> <label2> <distance>`` separated by any run of
whitespace.
"""

import math
import re
from typing import NamedTuple, Optional

from .errors import FormatError

# Labels are opaque byte tokens; surrogateescape lets any byte sequence
# survive the round trip to the output file.
ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"

# Plain ASCII decimal, optionally with an exponent
DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


class Edge(NamedTuple):
    label1: str
    label2: str
    distance: float


def open_input(input_path):
    """Open the sparse input for line-by-line reading."""
    # Records end at \n only; a stray \r stays inside the line
    return open(input_path, 'r', encoding=ENCODING, errors=ENCODING_ERRORS, newline='\n')


def parse_distance(value: str) -> float:
    """
    Parse a distance field.

    Raises:
        ValueError: If the field is not a finite decimal number
    """
    if not DECIMAL_RE.fullmatch(value):
        raise ValueError(f"not a decimal number: {value}")
    distance = float(value)
    if not math.isfinite(distance):
        raise ValueError(f"distance is not finite: {value}")
    return distance


def parse_edge(line: str, line_number: Optional[int] = None, source=None) -> Edge:
    """
    Parse one input line into an Edge.

    Args:
        line: Raw line
        line_number: 1-based line number, used in error messages
        source: Input path, used in error messages

    Returns:
        The parsed Edge

    Raises:
        FormatError: If the line does not hold exactly three fields or the
            third field is not a finite number
    """
    parts = line.split()
    if len(parts) != 3:
        raise FormatError(f"expected 3 fields, found {len(parts)}",
                          path=source, line_number=line_number, line=line)

    try:
        distance = parse_distance(parts[2])
    except ValueError:
        raise FormatError(f"invalid distance {parts[2]!r}",
                          path=source, line_number=line_number, line=line) from None

    return Edge(parts[0], parts[1], distance)


def try_parse_edge(line: str) -> Optional[Edge]:
    """Lenient variant of parse_edge: returns None instead of raising."""
    parts = line.split()
    if len(parts) != 3:
        return None
    try:
        return Edge(parts[0], parts[1], parse_distance(parts[2]))
    except ValueError:
        return None
