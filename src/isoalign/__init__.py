"""isoalign: join alignment of isotope patterns across samples."""

from .alignment import AlignmentResult, AlignmentTask, JoinAlignerParameters, RTTolerance, align
from .core import FeatureList, IsotopePattern, IsotopologueAnnotation, Peak, Sample, TaskStatus

__all__ = [
    "align",
    "AlignmentResult",
    "AlignmentTask",
    "FeatureList",
    "IsotopePattern",
    "IsotopologueAnnotation",
    "JoinAlignerParameters",
    "Peak",
    "RTTolerance",
    "Sample",
    "TaskStatus",
]
