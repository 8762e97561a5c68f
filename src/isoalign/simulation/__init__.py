"""Utilities to simulate sample feature lists."""

from .base import AbundanceSpec, SimulatedFeatureListFactory, SimulatedPatternSpec

__all__ = ["AbundanceSpec", "SimulatedFeatureListFactory", "SimulatedPatternSpec"]
