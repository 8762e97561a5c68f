"""Core data models and utilities."""

from .enums import Descriptor, MSInstrument, RTToleranceMode, SeparationMode, TaskStatus
from .models import FeatureList, IsotopePattern, IsotopologueAnnotation, Peak, Sample

__all__ = [
    "Descriptor",
    "FeatureList",
    "IsotopePattern",
    "IsotopologueAnnotation",
    "MSInstrument",
    "Peak",
    "RTToleranceMode",
    "Sample",
    "SeparationMode",
    "TaskStatus",
]
