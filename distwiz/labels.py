"""
Label discovery over the sparse input.
"""

import logging

from .errors import FormatError
from .parsing import ENCODING, ENCODING_ERRORS, open_input

logger = logging.getLogger(__name__)


def scan_for_labels(input_path, strict=False):
    """
    Collect the sorted set of labels found in the first two fields.

    Lines with fewer than two fields are skipped unless ``strict`` is set,
    in which case they raise FormatError. Whitespace-only lines are always
    ignored.

    Args:
        input_path (Path): Sparse input file
        strict (bool): Fail on lines that cannot be tokenized

    Returns:
        list: Distinct labels in byte-wise lexicographic order

    Raises:
        OSError: If the file cannot be opened or read
        FormatError: In strict mode, on a line with fewer than two fields
    """
    labels = set()
    skipped = 0

    with open_input(input_path) as f:
        for line_number, line in enumerate(f, start=1):
            parts = line.split()
            if not parts:
                continue
            if len(parts) < 2:
                if strict:
                    raise FormatError("expected at least 2 fields, found 1",
                                      path=input_path, line_number=line_number, line=line)
                skipped += 1
                continue
            labels.add(parts[0])
            labels.add(parts[1])

    if skipped:
        logger.debug(f"Skipped {skipped} malformed lines while scanning {input_path}")

    # Order by the raw input bytes, not by code point
    return sorted(labels, key=lambda label: label.encode(ENCODING, ENCODING_ERRORS))
