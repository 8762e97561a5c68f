"""Conversion of master rows into alignment results."""

from __future__ import annotations

from typing import Sequence

import numpy
import pydantic

from ..core.enums import Descriptor
from ..core.exceptions import RowNotFound
from ..core.models import Peak
from ..utils.numpy import FloatArray
from .parameters import JoinAlignerParameters
from .rows import MasterRowStore


class RowAnnotation(pydantic.BaseModel):
    """Isotope pattern information shared by all aligned rows created from the same master row."""

    model_config = pydantic.ConfigDict(frozen=True)

    group: int
    """The master row id. Aligned rows with the same group belong to the same isotopic envelope."""

    charge: int
    """The master row charge state."""

    n_isotopologues: int
    """The number of peaks in the largest pattern assigned to the master row."""

    mz: float
    """The master row m/z centroid."""

    rt: float
    """The master row RT centroid."""


class AlignedRow(pydantic.BaseModel):
    """A row in the alignment result.

    Contains the peaks from the same isotopologue of a chemical species across samples.

    """

    model_config = pydantic.ConfigDict(frozen=True)

    annotation: RowAnnotation
    """The isotope pattern information of the row."""

    index: int
    """The isotopologue position in the envelope."""

    peaks: dict[str, Peak]
    """Map sample ids to peaks. Samples without a peak in this isotopologue position are not included."""

    def get_peak(self, sample_id: str) -> Peak | None:
        """Retrieve the peak of a sample. If not found, returns ``None``."""
        return self.peaks.get(sample_id)


class AlignmentResult(pydantic.BaseModel):
    """Store the aligned rows obtained from multiple samples."""

    model_config = pydantic.ConfigDict(frozen=True)

    samples: tuple[str, ...]
    """The ids of the aligned samples, in processing order."""

    rows: tuple[AlignedRow, ...]
    """The aligned rows, sorted by group and isotopologue index."""

    parameters: JoinAlignerParameters = pydantic.Field(default_factory=JoinAlignerParameters)
    """The parameters used to create the alignment."""

    def get_n_rows(self) -> int:
        """Get the number of aligned rows."""
        return len(self.rows)

    def list_samples(self) -> list[str]:
        """List the ids of the aligned samples."""
        return list(self.samples)

    def list_groups(self) -> list[int]:
        """List the ids of master rows included in the result."""
        return sorted({x.annotation.group for x in self.rows})

    def fetch_rows(self, group: int) -> list[AlignedRow]:
        """Retrieve all aligned rows created from a master row.

        :param group: the master row id
        :raises RowNotFound: if no rows with the provided group exist.

        """
        rows = [x for x in self.rows if x.annotation.group == group]
        if not rows:
            raise RowNotFound(group)
        return rows

    def get_data(self, descriptor: Descriptor | str = Descriptor.AREA) -> FloatArray:
        """Create a 2D array with descriptor values of aligned peaks.

        Each row in the array is associated with a sample and each column is associated with an
        aligned row. Missing entries are set to ``NaN``.

        :param descriptor: the peak descriptor used to fill the array.

        """
        if not isinstance(descriptor, Descriptor):
            descriptor = Descriptor(descriptor)

        data = numpy.full((len(self.samples), len(self.rows)), numpy.nan)
        sample_index = {x: k for k, x in enumerate(self.samples)}
        for j, row in enumerate(self.rows):
            for sample_id, peak in row.peaks.items():
                data[sample_index[sample_id], j] = peak.get(descriptor.value)
        return data

    def describe(self) -> dict[str, list[float]]:
        """Compute the mean m/z and RT of each aligned row, and its detection count.

        :return: a dictionary that maps descriptor names to a list of values, one for each aligned row.

        """
        descriptors = {"mz": list(), "rt": list(), "count": list()}
        for row in self.rows:
            peaks = list(row.peaks.values())
            descriptors["mz"].append(numpy.mean([x.mz for x in peaks]).item() if peaks else numpy.nan)
            descriptors["rt"].append(numpy.mean([x.rt for x in peaks]).item() if peaks else numpy.nan)
            descriptors["count"].append(float(len(peaks)))
        return descriptors


def assemble_result(
    store: MasterRowStore, sample_ids: Sequence[str], parameters: JoinAlignerParameters | None = None
) -> AlignmentResult:
    """Expand master rows into aligned rows.

    Each master row is expanded into one aligned row for each isotopologue position, up to the
    length of the largest pattern assigned to it.

    :param store: the master row store
    :param sample_ids: the ids of the aligned samples, in processing order
    :param parameters: the parameters used to build the master rows. A copy is stored in the result.
    :return: a new alignment result

    """
    rows = list()
    for master_row in store:
        annotation = RowAnnotation(
            group=master_row.id,
            charge=master_row.charge,
            n_isotopologues=master_row.max_pattern_length,
            mz=master_row.centroid_mz,
            rt=master_row.centroid_rt,
        )
        for index in range(master_row.max_pattern_length):
            peaks = dict()
            for sample_id in sample_ids:
                pattern = master_row.get_pattern(sample_id)
                if pattern is not None and index < pattern.get_n_peaks():
                    peaks[sample_id] = pattern.peaks[index]
            rows.append(AlignedRow(annotation=annotation, index=index, peaks=peaks))
    parameters = JoinAlignerParameters() if parameters is None else parameters.model_copy(deep=True)
    return AlignmentResult(samples=tuple(sample_ids), rows=tuple(rows), parameters=parameters)
