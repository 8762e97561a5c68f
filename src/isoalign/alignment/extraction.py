"""Isotope pattern extraction from sample feature lists."""

from __future__ import annotations

from typing import Protocol

import pydantic

from ..core.exceptions import PatternExtractionError
from ..core.models import FeatureList, IsotopePattern, Peak
from ..core.registry import Registry

extractor_registry: Registry[PatternExtractor] = Registry("extractor")


class PatternExtractor(Protocol):
    """Extractor interface for isotope patterns."""

    def extract(self, data: FeatureList) -> list[IsotopePattern]:
        """Create the list of isotope patterns of a sample."""
        ...


@extractor_registry.register
class AnnotationPatternExtractor(pydantic.BaseModel):
    """Create isotope patterns using the isotopologue annotation of peaks.

    Peaks with the same isotopologue label are grouped into a pattern and sorted using their
    isotopologue index. The pattern charge is taken from the annotation. Peaks without
    annotation are converted into single peak patterns.

    Patterns are sorted by the position of their monoisotopic peak in the feature list.

    """

    default_charge: pydantic.PositiveInt = 1
    """The charge assigned to patterns built from peaks with an undefined charge state, i.e. an
    annotation charge of ``-1`` (the default for non-annotated peaks) or ``0``. Other negative values
    are treated as negative mode charges and converted to their absolute value."""

    def extract(self, data: FeatureList) -> list[IsotopePattern]:
        """Create the list of isotope patterns of a sample.

        :param data: the sample feature list
        :raises PatternExtractionError: if peaks in an envelope have inconsistent annotations.

        """
        groups: dict[int, list[tuple[int, Peak]]] = dict()
        singletons: list[tuple[int, Peak]] = list()
        for position, peak in enumerate(data.peaks):
            if peak.annotation.is_annotated():
                groups.setdefault(peak.annotation.label, list()).append((position, peak))
            else:
                singletons.append((position, peak))

        positioned: list[tuple[int, IsotopePattern]] = list()
        for label, members in groups.items():
            members.sort(key=lambda x: x[1].annotation.index)
            self._check_envelope(data, label, [x[1] for x in members])
            position = members[0][0]
            peaks = tuple(x[1] for x in members)
            positioned.append((position, IsotopePattern(peaks=peaks, charge=self._get_charge(peaks[0]))))

        for position, peak in singletons:
            positioned.append((position, IsotopePattern(peaks=(peak,), charge=self._get_charge(peak))))

        positioned.sort(key=lambda x: x[0])
        return [x[1] for x in positioned]

    def _get_charge(self, peak: Peak) -> int:
        charge = peak.annotation.charge
        if charge in (-1, 0):
            return self.default_charge
        return abs(charge)

    @staticmethod
    def _check_envelope(data: FeatureList, label: int, peaks: list[Peak]) -> None:
        indices = [x.annotation.index for x in peaks]
        if len(set(indices)) < len(indices):
            msg = f"Repeated isotopologue index in envelope {label} of sample {data.sample.id}."
            raise PatternExtractionError(msg)

        if len({x.annotation.charge for x in peaks}) > 1:
            msg = f"Inconsistent charge state in envelope {label} of sample {data.sample.id}."
            raise PatternExtractionError(msg)


def create_extractor(extractor: PatternExtractor | str | None = None) -> PatternExtractor:
    """Create a pattern extractor.

    :param extractor: an extractor instance or the name of a registered extractor class. If ``None``,
        an :py:class:`AnnotationPatternExtractor` with default parameters is created.

    """
    if extractor is None:
        return AnnotationPatternExtractor()
    elif isinstance(extractor, str):
        return extractor_registry.create(extractor)
    return extractor


def extract_patterns(extractor: PatternExtractor, data: FeatureList) -> list[IsotopePattern]:
    """Apply an extractor to a feature list.

    :raises PatternExtractionError: if the extractor fails. The error message includes the sample id.

    """
    try:
        return list(extractor.extract(data))
    except Exception as e:
        raise PatternExtractionError(f"Failed to extract isotope patterns from sample {data.sample.id}") from e
