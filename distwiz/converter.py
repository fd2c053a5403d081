"""
Sparse pairwise distances to a dense, gzip-compressed square matrix.

Output layout: a header line with every label (sorted, tab-separated),
then one row per label in the same order. Diagonal cells are 0.0 and
pairs missing from the input are filled with 1.0.
"""

import logging
from pathlib import Path
from typing import NamedTuple

from .errors import ConfigError
from .labels import scan_for_labels
from .selector import DEFAULT_THRESHOLD, Mode, parse_mode, select_mode
from .sink import DEFAULT_COMPRESS_LEVEL, open_compressed_sink, validate_compress_level
from .stores import DiskScanningDistanceStore, InMemoryDistanceStore

logger = logging.getLogger(__name__)

DIAGONAL_DISTANCE = 0.0
DEFAULT_DISTANCE = 1.0


class ConversionSummary(NamedTuple):
    input_path: Path
    output_path: Path
    labels: int
    rows: int
    mode: Mode


def format_distance(value):
    """Format a distance with one decimal digit."""
    return f"{value:.1f}"


def build_row(label, labels, row_distances):
    """
    Build one tab-separated matrix row, without the trailing newline.

    Args:
        label (str): Row label
        labels (list): Column labels in output order
        row_distances (Mapping): Known distances of ``label``

    Returns:
        str: Row text
    """
    row = []
    for other in labels:
        if other == label:
            distance = DIAGONAL_DISTANCE
        else:
            distance = row_distances.get(other, DEFAULT_DISTANCE)
        row.append(format_distance(distance))
    return '\t'.join(row)


def emit_matrix(labels, store, sink, progress_every=1000):
    """
    Write the header and every row of the matrix.

    Each row is fetched from the store, written, and dropped before the
    next one is built.

    Args:
        labels (list): Sorted labels
        store (DistanceStore): Active distance store
        sink: Text stream to write to
        progress_every (int): Log progress every N rows (0 disables)

    Returns:
        int: Number of data rows written
    """
    sink.write('\t'.join(labels) + '\n')

    total = len(labels)
    for i, label in enumerate(labels, start=1):
        sink.write(build_row(label, labels, store.row_distances(label)) + '\n')
        if progress_every and i % progress_every == 0:
            logger.info(f"Written {i}/{total} rows")

    return total


def build_store(mode, input_path):
    """Create the distance store for an already selected mode."""
    if mode is Mode.MEM:
        return InMemoryDistanceStore.from_file(input_path)
    if mode is Mode.DISK:
        return DiskScanningDistanceStore(input_path)
    raise ConfigError(f"No distance store for mode {mode.value!r}; select a concrete mode first")


def convert(input_path, output_path, compress_level=DEFAULT_COMPRESS_LEVEL,
            mode=Mode.AUTO, threshold=DEFAULT_THRESHOLD, progress_every=1000):
    """
    Convert a sparse distance file into a dense gzip-compressed matrix.

    Args:
        input_path (Path): Sparse ``label1 label2 distance`` file
        output_path (Path): Output .gz file
        compress_level (int): GZIP level 1-9
        mode (Mode or str): auto, mem or disk
        threshold (int): Largest label count converted in memory under auto
        progress_every (int): Log progress every N rows (0 disables)

    Returns:
        ConversionSummary

    Raises:
        ConfigError: On invalid arguments, before any file is opened
        FormatError: On a malformed line while loading in memory
        OSError: If the input cannot be read or the output written
    """
    compress_level = validate_compress_level(compress_level)
    mode = parse_mode(mode)
    input_path = Path(input_path)
    output_path = Path(output_path)

    logger.info(f"Scanning labels in: {input_path}")
    labels = scan_for_labels(input_path)
    logger.info(f"Found {len(labels)} unique labels")

    selected = select_mode(len(labels), threshold=threshold, mode=mode)
    logger.info(f"Using {'in-memory' if selected is Mode.MEM else 'disk-scanning'} "
                f"distance store (mode={mode.value}, threshold={threshold})")

    # Built before the output is opened so a malformed input leaves no file behind
    store = build_store(selected, input_path)

    with open_compressed_sink(output_path, compress_level) as sink:
        rows = emit_matrix(labels, store, sink, progress_every=progress_every)

    logger.info(f"Square matrix written to: {output_path}")

    return ConversionSummary(input_path, output_path, len(labels), rows, selected)
