"""Cross-sample alignment of isotope patterns."""

from .assembly import AlignedRow, AlignmentResult, RowAnnotation, assemble_result
from .extraction import AnnotationPatternExtractor, PatternExtractor, extractor_registry
from .matching import MatchSummary, match_sample
from .parameters import JoinAlignerParameters, RTTolerance
from .rows import MasterRow, MasterRowStore
from .scoring import MatchScore, score, score_matrix
from .task import AlignmentTask, align

__all__ = [
    "align",
    "AlignedRow",
    "AlignmentResult",
    "AlignmentTask",
    "AnnotationPatternExtractor",
    "assemble_result",
    "extractor_registry",
    "JoinAlignerParameters",
    "MasterRow",
    "MasterRowStore",
    "match_sample",
    "MatchScore",
    "MatchSummary",
    "PatternExtractor",
    "RowAnnotation",
    "RTTolerance",
    "score",
    "score_matrix",
]
