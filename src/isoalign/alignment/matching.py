"""Greedy matching of sample isotope patterns to master rows."""

from __future__ import annotations

from logging import getLogger
from typing import Sequence

import numpy
import pydantic

from ..core.models import IsotopePattern
from .parameters import JoinAlignerParameters
from .rows import MasterRowStore
from .scoring import score_matrix

logger = getLogger(__name__)


class MatchCandidate(pydantic.BaseModel):
    """An acceptable pair of master row and sample isotope pattern."""

    model_config = pydantic.ConfigDict(frozen=True)

    row: int
    """The master row id."""

    pattern: int
    """The pattern index in the sample pattern list."""

    value: float
    """The pair score."""


class MatchSummary(pydantic.BaseModel):
    """Summary of a sample matching round."""

    sample_id: str
    """The matched sample."""

    n_patterns: int
    """The number of isotope patterns in the sample."""

    n_matched: int
    """The number of patterns assigned to existing rows."""

    n_created: int
    """The number of new rows created from unmatched patterns."""


def list_candidates(
    store: MasterRowStore, patterns: Sequence[IsotopePattern], parameters: JoinAlignerParameters
) -> list[MatchCandidate]:
    """Create the list of acceptable row and pattern pairs, sorted by descending goodness of fit.

    Pairs are sorted by ascending score. Pairs with equal scores are kept and sorted by row id and
    then by pattern index.

    :param store: the master row store
    :param patterns: the sample isotope patterns
    :param parameters: the alignment parameters
    :return: the sorted candidate list

    """
    if not len(store) or not patterns:
        return list()

    values, acceptable = score_matrix(store, patterns, parameters)
    row_index, pattern_index = numpy.nonzero(acceptable)
    candidate_values = values[row_index, pattern_index]

    # lexsort uses the last key as primary key
    order = numpy.lexsort((pattern_index, row_index, candidate_values))
    return [
        MatchCandidate(row=row_index[k].item(), pattern=pattern_index[k].item(), value=candidate_values[k].item())
        for k in order
    ]


def match_sample(
    store: MasterRowStore, sample_id: str, patterns: Sequence[IsotopePattern], parameters: JoinAlignerParameters
) -> MatchSummary:
    """Assign the isotope patterns of a sample to master rows.

    Candidate pairs are visited from best to worst match. A pair is assigned only if neither
    the row nor the pattern were claimed before in the round. Patterns that remain unclaimed
    after visiting all candidates are added to the store as new rows.

    :param store: the master row store. Updated in place.
    :param sample_id: the id of the sample where patterns were detected
    :param patterns: the sample isotope patterns
    :param parameters: the alignment parameters
    :return: a summary of the matching round

    """
    claimed_rows: set[int] = set()
    claimed_patterns: set[int] = set()

    for candidate in list_candidates(store, patterns, parameters):
        if candidate.row in claimed_rows or candidate.pattern in claimed_patterns:
            continue
        store.get_row(candidate.row).add_pattern(sample_id, patterns[candidate.pattern])
        claimed_rows.add(candidate.row)
        claimed_patterns.add(candidate.pattern)

    n_created = 0
    for k, pattern in enumerate(patterns):
        if k in claimed_patterns:
            continue
        store.create_row(sample_id, pattern)
        n_created += 1

    summary = MatchSummary(
        sample_id=sample_id, n_patterns=len(patterns), n_matched=len(claimed_patterns), n_created=n_created
    )
    logger.debug(
        f"Matched {summary.n_matched}/{summary.n_patterns} patterns from `{sample_id}`, created {n_created} rows."
    )
    return summary
