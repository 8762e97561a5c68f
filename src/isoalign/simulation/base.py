"""Base utilities for simulation of annotated feature lists."""

from __future__ import annotations

import random

import pydantic

from ..core.models import FeatureList, IsotopologueAnnotation, Peak, Sample

C13_MASS_DIFF = 1.003355
"""Mass difference between 13C and 12C."""


class AbundanceSpec(pydantic.BaseModel):
    """Define the abundance of a chemical species in a sample."""

    mean: pydantic.PositiveFloat = 100.0
    """The mean abundance of the species."""

    std: pydantic.NonNegativeFloat = 0.0
    """The abundance standard deviation."""

    prevalence: float = pydantic.Field(gt=0.0, le=1.0, default=1.0)
    """The probability of the species occurring in a sample."""

    def compute_abundance(self) -> float:
        """Get a realization of the abundance."""
        is_in_sample = random.uniform(0.0, 1.0) < self.prevalence
        c = max(0.0, random.gauss(mu=self.mean, sigma=self.std))  # force signal to be non-negative
        return c if is_in_sample else 0.0


class SimulatedPatternSpec(pydantic.BaseModel):
    r"""Define the isotope pattern of an ion in simulated samples.

    The m/z of the k-th isotopologue is computed as :math:`m_{0} + k \Delta / z`, where
    :math:`m_{0}` is the monoisotopic m/z, :math:`\Delta` is the 13C - 12C mass difference and
    :math:`z` is the charge. The abundance of each isotopologue is `decay` times the abundance
    of the previous one.

    Additive Gaussian noise is applied to each peak m/z, and to the pattern retention time. All
    peaks in a pattern share the same retention time.

    """

    mz: pydantic.PositiveFloat
    """The monoisotopic m/z."""

    rt: pydantic.PositiveFloat
    """The mean retention time."""

    charge: pydantic.PositiveInt = 1
    """The ion charge state."""

    n_isotopologues: pydantic.PositiveInt = 1
    """The number of peaks in the pattern."""

    decay: float = pydantic.Field(gt=0.0, le=1.0, default=0.5)
    """The abundance ratio between consecutive isotopologues."""

    abundance: AbundanceSpec = AbundanceSpec()
    """The abundance distribution of the species."""

    mz_std: pydantic.NonNegativeFloat = 0.0
    """Standard deviation of the m/z noise."""

    rt_std: pydantic.NonNegativeFloat = 0.0
    """Standard deviation of the retention time noise."""

    width: pydantic.PositiveFloat = 5.0
    """The peak width, used to compute the peak area from the peak height."""

    def get_mz(self) -> list[float]:
        """Compute the theoretical m/z of the pattern peaks."""
        return [self.mz + k * C13_MASS_DIFF / self.charge for k in range(self.n_isotopologues)]

    def create_peaks(self, label: int) -> list[Peak]:
        """Create a realization of the pattern peaks.

        :param label: the isotopologue label assigned to the peaks annotation.
        :return: the list of peaks. If the species is not detected in the sample, an empty list is returned.

        """
        c = self.abundance.compute_abundance()
        if c <= 0.0:
            return list()

        rt = max(0.0, random.gauss(mu=self.rt, sigma=self.rt_std))
        peaks = list()
        for k, mz in enumerate(self.get_mz()):
            height = c * self.decay**k
            annotation = IsotopologueAnnotation(label=label, index=k, charge=self.charge)
            peak = Peak(
                mz=max(0.0, random.gauss(mu=mz, sigma=self.mz_std)),
                rt=rt,
                height=height,
                area=height * self.width,
                annotation=annotation,
            )
            peaks.append(peak)
        return peaks


class SimulatedFeatureListFactory(pydantic.BaseModel):
    """Utility that creates simulated feature lists."""

    patterns: list[SimulatedPatternSpec] = list()
    """The isotope patterns to include in each simulated sample."""

    def __call__(self, id: str, **kwargs) -> FeatureList:
        """Create a new simulated feature list.

        :param id: the id for the sample
        :param kwargs: extra sample information passed to the :py:class:`isoalign.Sample` constructor.

        """
        sample = Sample(id=id, **kwargs)
        peaks = list()
        for label, spec in enumerate(self.patterns):
            peaks.extend(spec.create_peaks(label))
        return FeatureList(sample=sample, peaks=peaks)
