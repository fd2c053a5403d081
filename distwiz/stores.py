"""
Distance stores: lookups from a label pair to its sparse distance.

Both stores answer the same question, "what are the known distances of
this row?", so the matrix emitter does not care which one is active.
"""

import logging
from abc import ABC, abstractmethod
from collections import defaultdict
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from .parsing import open_input, parse_edge, try_parse_edge

logger = logging.getLogger(__name__)


class DistanceStore(ABC):
    """Symmetric, sparse label-pair lookup."""

    @abstractmethod
    def row_distances(self, label: str) -> Mapping[str, float]:
        """Return every known distance of ``label``, keyed by the other label."""

    def distance(self, label1: str, label2: str) -> Optional[float]:
        """Return the stored distance, or None if the pair is absent."""
        return self.row_distances(label1).get(label2)


class InMemoryDistanceStore(DistanceStore):
    """
    Whole input held as nested per-label dictionaries.

    Every edge is written in both directions. A pair seen again later in
    the input replaces the earlier value (last write wins), whichever
    direction either line used.
    """

    def __init__(self):
        self._rows: Dict[str, Dict[str, float]] = defaultdict(dict)

    def add(self, label1: str, label2: str, distance: float):
        self._rows[label1][label2] = distance
        self._rows[label2][label1] = distance

    @classmethod
    def from_file(cls, input_path):
        """
        Load every edge of the input.

        Raises:
            OSError: If the file cannot be opened or read
            FormatError: On the first line that is not a valid triple
        """
        store = cls()
        edges = 0

        with open_input(input_path) as f:
            for line_number, line in enumerate(f, start=1):
                if not line.strip():
                    continue
                edge = parse_edge(line, line_number=line_number, source=input_path)
                store.add(*edge)
                edges += 1

        logger.info(f"Loaded {edges} edges ({store.pair_count} distinct pairs) "
                    f"for {len(store)} labels into memory")
        return store

    def row_distances(self, label: str) -> Mapping[str, float]:
        return MappingProxyType(self._rows.get(label, {}))

    def distance(self, label1: str, label2: str) -> Optional[float]:
        row = self._rows.get(label1)
        if row is None:
            return None
        return row.get(label2)

    @property
    def pair_count(self) -> int:
        """Number of distinct unordered pairs stored."""
        directed = sum(len(row) for row in self._rows.values())
        self_pairs = sum(1 for label, row in self._rows.items() if label in row)
        return (directed + self_pairs) // 2

    def __len__(self):
        return len(self._rows)

    def __contains__(self, label):
        return label in self._rows


class DiskScanningDistanceStore(DistanceStore):
    """
    Re-reads the input once per requested row.

    Memory use is bounded by a single row. Malformed lines are skipped
    rather than reported; nothing is kept between calls.
    """

    def __init__(self, input_path):
        self.input_path = input_path

    def row_distances(self, label: str) -> Mapping[str, float]:
        distances = {}

        with open_input(self.input_path) as f:
            for line in f:
                # Cheap substring test before tokenizing the line
                if label not in line:
                    continue
                edge = try_parse_edge(line)
                if edge is None:
                    continue
                if edge.label1 == label:
                    distances[edge.label2] = edge.distance
                elif edge.label2 == label:
                    distances[edge.label1] = edge.distance

        return distances
