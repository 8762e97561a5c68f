"""Master row storage for the join aligner."""

from __future__ import annotations

from typing import Iterator

import numpy

from ..core.exceptions import RepeatedIdError, RowNotFound
from ..core.models import IsotopePattern
from ..utils.numpy import FloatArray1D, IntArray1D


class MasterRow:
    """A consolidated alignment row that accumulates at most one isotope pattern per sample.

    The row charge state is set from the first pattern and cannot change afterwards. The row
    position is tracked as the median m/z and RT of the monoisotopic peaks of all assigned
    patterns.

    :param id: the row id. Rows ids are the row index in the row store.
    :param charge: the row charge state.

    """

    def __init__(self, id: int, charge: int):
        self.id = id
        self.charge = charge
        self.max_pattern_length = 0
        self._patterns: dict[str, IsotopePattern] = dict()
        self._mz: list[float] = list()
        self._rt: list[float] = list()
        self._centroid_mz = numpy.nan
        self._centroid_rt = numpy.nan

    def __repr__(self) -> str:
        return (
            f"MasterRow(id={self.id}, charge={self.charge}, mz={self._centroid_mz:.4f}, "
            f"rt={self._centroid_rt:.2f}, n_samples={len(self._patterns)})"
        )

    @property
    def centroid_mz(self) -> float:
        """The median m/z of all assigned monoisotopic peaks."""
        return self._centroid_mz

    @property
    def centroid_rt(self) -> float:
        """The median RT of all assigned monoisotopic peaks."""
        return self._centroid_rt

    def add_pattern(self, sample_id: str, pattern: IsotopePattern) -> None:
        """Assign an isotope pattern from a sample to the row.

        :param sample_id: the id of the sample where the pattern was detected
        :param pattern: the pattern to add
        :raises RepeatedIdError: if the row already contains a pattern from the sample
        :raises ValueError: if the pattern charge state is different from the row charge state

        """
        if sample_id in self._patterns:
            raise RepeatedIdError(f"Row {self.id} already contains a pattern from sample {sample_id}.")

        if pattern.charge != self.charge:
            msg = f"Cannot add pattern with charge {pattern.charge} to row {self.id} with charge {self.charge}."
            raise ValueError(msg)

        mono = pattern.monoisotopic
        self._mz.append(mono.mz)
        self._rt.append(mono.rt)
        # full history median, O(n log n) on each insertion
        self._centroid_mz = numpy.median(self._mz).item()
        self._centroid_rt = numpy.median(self._rt).item()
        self.max_pattern_length = max(self.max_pattern_length, pattern.get_n_peaks())
        self._patterns[sample_id] = pattern

    def get_pattern(self, sample_id: str) -> IsotopePattern | None:
        """Retrieve the pattern assigned to a sample. If not found, returns ``None``."""
        return self._patterns.get(sample_id)

    def has_sample(self, sample_id: str) -> bool:
        """Check if the row contains a pattern from a sample."""
        return sample_id in self._patterns

    def list_samples(self) -> list[str]:
        """List the ids of samples with patterns assigned to the row, in assignment order."""
        return list(self._patterns)

    def get_n_samples(self) -> int:
        """Get the number of samples assigned to the row."""
        return len(self._patterns)


class MasterRowStore:
    """Store master rows in creation order.

    Rows are kept in a list and are addressed by their index, which is also used as row id.

    """

    def __init__(self) -> None:
        self._rows: list[MasterRow] = list()

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[MasterRow]:
        return iter(self._rows)

    def create_row(self, sample_id: str, pattern: IsotopePattern) -> MasterRow:
        """Create a new row using an isotope pattern as its first assignment.

        :param sample_id: the id of the sample where the pattern was detected
        :param pattern: the first pattern of the row. The row charge is set using the pattern charge.
        :return: the new row

        """
        row = MasterRow(len(self._rows), pattern.charge)
        row.add_pattern(sample_id, pattern)
        self._rows.append(row)
        return row

    def get_row(self, id: int) -> MasterRow:
        """Retrieve a row by id."""
        if not 0 <= id < len(self._rows):
            raise RowNotFound(id)
        return self._rows[id]

    def list_rows(self) -> list[MasterRow]:
        """List all rows in creation order."""
        return self._rows.copy()

    def get_n_rows(self) -> int:
        """Get the total number of rows in the store."""
        return len(self._rows)

    def get_centroids(self) -> tuple[FloatArray1D, FloatArray1D, IntArray1D]:
        """Retrieve the m/z centroid, RT centroid and charge of all rows as arrays sorted by row id."""
        mz = numpy.array([x.centroid_mz for x in self._rows], dtype=float)
        rt = numpy.array([x.centroid_rt for x in self._rows], dtype=float)
        charge = numpy.array([x.charge for x in self._rows], dtype=int)
        return mz, rt, charge
