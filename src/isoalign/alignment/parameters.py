"""Alignment parameters."""

from __future__ import annotations

from typing import assert_never

import pydantic
from typing_extensions import Self

from ..core.enums import MSInstrument, RTToleranceMode, SeparationMode
from ..utils.numpy import FloatArray


class RTTolerance(pydantic.BaseModel):
    """Define the maximum retention time difference between a master row and an isotope pattern.

    If `mode` is set to ``absolute``, `value` is used as the tolerance. If `mode` is set to
    ``relative``, the tolerance is computed as a fraction of the mean of the compared retention
    times. In this case, `value` must be in the interval :math:`(0, 1]`.

    """

    model_config = pydantic.ConfigDict(frozen=True)

    mode: RTToleranceMode = RTToleranceMode.ABSOLUTE
    """The tolerance mode."""

    value: pydantic.PositiveFloat = 5.0
    """The absolute tolerance or the relative fraction, depending on the tolerance mode."""

    @pydantic.model_validator(mode="after")
    def check_relative_fraction(self) -> Self:
        """Check that relative tolerances are in the (0, 1] interval."""
        if self.mode is RTToleranceMode.RELATIVE and self.value > 1.0:
            raise ValueError(f"Relative RT tolerance must be in the interval (0, 1]. Got {self.value}.")
        return self

    @classmethod
    def absolute(cls, value: float) -> Self:
        """Create a new absolute tolerance."""
        return cls(mode=RTToleranceMode.ABSOLUTE, value=value)

    @classmethod
    def relative(cls, fraction: float) -> Self:
        """Create a new relative tolerance."""
        return cls(mode=RTToleranceMode.RELATIVE, value=fraction)

    def compute(self, rt1: float | FloatArray, rt2: float | FloatArray) -> float | FloatArray:
        """Compute the tolerance for a pair of retention times.

        Numpy arrays are supported and broadcasted following numpy rules.

        """
        match self.mode:
            case RTToleranceMode.ABSOLUTE:
                return self.value
            case RTToleranceMode.RELATIVE:
                return self.value * 0.5 * (rt1 + rt2)
            case _ as never:
                assert_never(never)


class JoinAlignerParameters(pydantic.BaseModel):
    """Store the join aligner parameters."""

    model_config = pydantic.ConfigDict(validate_assignment=True)

    mz_tolerance: pydantic.PositiveFloat = 0.01
    """The maximum m/z difference between a master row centroid and a pattern monoisotopic peak."""

    rt_tolerance: RTTolerance = RTTolerance()
    """The maximum RT difference between a master row centroid and a pattern monoisotopic peak."""

    mz_rt_balance: pydantic.NonNegativeFloat = 10.0
    """Weight of the m/z difference relative to the RT difference in the match score."""

    @classmethod
    def from_defaults(cls, instrument: MSInstrument, separation: SeparationMode) -> Self:
        """Create a new parameter set with sane defaults for the specified MS instrument and separation mode.

        :param instrument: The MS instrument used to measure the samples
        :param separation: The analytical method used for separation
        :return: A new parameters instance

        """
        match instrument:
            case MSInstrument.QTOF:
                mz_tolerance = 0.01
            case MSInstrument.ORBITRAP:
                mz_tolerance = 0.005
            case _ as never:
                assert_never(never)

        match separation:
            case SeparationMode.HPLC:
                rt_tolerance = RTTolerance.absolute(10.0)
            case SeparationMode.UPLC:
                rt_tolerance = RTTolerance.absolute(5.0)
            case _ as never:
                assert_never(never)

        return cls(mz_tolerance=mz_tolerance, rt_tolerance=rt_tolerance, mz_rt_balance=10.0 / mz_tolerance)
