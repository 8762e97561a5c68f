"""Helpers classes and functions for unit tests."""

from __future__ import annotations

from isoalign.alignment.parameters import JoinAlignerParameters, RTTolerance
from isoalign.core.models import FeatureList, IsotopePattern, IsotopologueAnnotation, Peak, Sample

MZ_SPACING = 1.003355


def create_peak(mz: float, rt: float, area: float = 100.0, **kwargs) -> Peak:
    return Peak(mz=mz, rt=rt, area=area, height=area / 5, **kwargs)


def create_pattern(mz: float, rt: float, charge: int = 1, n_peaks: int = 1) -> IsotopePattern:
    peaks = [create_peak(mz + k * MZ_SPACING / charge, rt, area=100.0 / (k + 1)) for k in range(n_peaks)]
    return IsotopePattern.from_peaks(*peaks, charge=charge)


def create_feature_list(sample_id: str, *patterns: tuple[float, float, int, int], order: int = 0) -> FeatureList:
    """Create a feature list with annotated peaks.

    Each pattern is defined as a tuple of monoisotopic m/z, RT, charge and number of peaks.

    """
    peaks = list()
    for label, (mz, rt, charge, n_peaks) in enumerate(patterns):
        for k in range(n_peaks):
            annotation = IsotopologueAnnotation(label=label, index=k, charge=charge)
            peaks.append(create_peak(mz + k * MZ_SPACING / charge, rt, annotation=annotation))
    sample = Sample(id=sample_id, order=order)
    return FeatureList(sample=sample, peaks=peaks)


def create_parameters(mz_tolerance: float = 0.01, rt_tolerance: float = 5.0, mz_rt_balance: float = 10.0):
    return JoinAlignerParameters(
        mz_tolerance=mz_tolerance, rt_tolerance=RTTolerance.absolute(rt_tolerance), mz_rt_balance=mz_rt_balance
    )
