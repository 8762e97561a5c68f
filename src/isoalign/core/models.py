"""isoalign core data models."""

from __future__ import annotations

from pathlib import Path
from typing import Any
from uuid import UUID

import pydantic
from typing_extensions import Self

from ..utils.common import create_id


class IsoAlignBaseModel(pydantic.BaseModel):
    """Base model that all immutable library models inherit from."""

    id: UUID = pydantic.Field(default_factory=create_id, repr=False)
    """A unique id for the model."""

    model_config = pydantic.ConfigDict(frozen=True)


class Sample(pydantic.BaseModel):
    """Store metadata from an individual measurement."""

    id: str
    """A unique sample identifier"""

    path: Path | None = pydantic.Field(default=None, repr=False)
    """Path to the raw data file where features were extracted from."""

    group: str = ""
    """the sample group"""

    order: pydantic.NonNegativeInt = 0
    """the sample measurement order in an assay"""

    extra: dict[str, Any] | None = pydantic.Field(default=None, repr=False)
    """extra sample information"""

    @pydantic.field_serializer("path")
    def serialize_path(self, path: Path | None, _info) -> str | None:
        """Serialize path into a string."""
        return None if path is None else str(path)


class IsotopologueAnnotation(pydantic.BaseModel):
    """Store isotopologue annotation of a peak in a sample."""

    model_config = pydantic.ConfigDict(frozen=True)

    label: int = -1
    """Group peaks from the same isotopic envelope in a sample. If set to ``-1`` the peak is
    not associated with any group of isotopologues."""

    index: int = -1
    """Position of the peak in an isotopic envelope. If set to ``-1`` the peak is not associated
    with any group of isotopologues."""

    charge: int = -1
    """Peak charge state. If set to ``-1`` the charge state is not defined."""

    def is_annotated(self) -> bool:
        """Check if the peak was assigned to an isotopic envelope."""
        return self.label > -1


class Peak(IsoAlignBaseModel):
    """A chromatographic peak detected in a sample.

    Peaks are immutable. m/z and retention time values are assumed to be normalized by upstream
    processing steps, so that they are comparable across samples.

    """

    mz: pydantic.NonNegativeFloat
    """The peak m/z."""

    rt: pydantic.NonNegativeFloat
    """The peak retention time."""

    height: pydantic.NonNegativeFloat = 0.0
    """The peak height."""

    area: pydantic.NonNegativeFloat = 0.0
    """The peak area."""

    annotation: IsotopologueAnnotation = IsotopologueAnnotation()
    """Isotopologue annotation of the peak."""

    def get(self, descriptor: str) -> float:
        """Retrieve a descriptor value.

        :param descriptor: the descriptor name.
        :return: the descriptor value.
        :raises ValueError: if an invalid descriptor name is passed.

        """
        if descriptor not in ("mz", "rt", "height", "area"):
            raise ValueError(f"{descriptor} is not a valid descriptor.")
        return getattr(self, descriptor)


class IsotopePattern(IsoAlignBaseModel):
    """A group of peaks in a sample that were generated by the isotopologues of the same ion.

    The first peak is the monoisotopic peak and it is used as the pattern reference position.

    """

    peaks: tuple[Peak, ...] = pydantic.Field(min_length=1)
    """The pattern peaks, sorted by isotopologue position."""

    charge: pydantic.PositiveInt = 1
    """The charge state shared by all peaks in the pattern."""

    @property
    def monoisotopic(self) -> Peak:
        """The pattern monoisotopic peak."""
        return self.peaks[0]

    def get_n_peaks(self) -> int:
        """Retrieve the number of peaks in the pattern."""
        return len(self.peaks)

    @classmethod
    def from_peaks(cls, *peaks: Peak, charge: int = 1) -> Self:
        """Create a new pattern using peaks as positional arguments."""
        return cls(peaks=peaks, charge=charge)


class FeatureList(pydantic.BaseModel):
    """Store the peaks detected in a sample."""

    sample: Sample
    """The sample where peaks were detected."""

    peaks: list[Peak] = list()
    """The peaks detected in the sample."""

    def get_n_peaks(self) -> int:
        """Retrieve the number of peaks in the feature list."""
        return len(self.peaks)
