"""Scoring functions for master row and isotope pattern pairs.

The score of a row and pattern pair is a cost: the lower the value, the better the fit. Pairs
with different charge state or with m/z or RT differences greater or equal than the tolerances
are not acceptable and their score is set to ``inf``.

"""

from __future__ import annotations

from math import inf
from typing import NamedTuple, Sequence

import numpy

from ..core.models import IsotopePattern
from ..utils.numpy import BoolArray, FloatArray
from .parameters import JoinAlignerParameters
from .rows import MasterRow, MasterRowStore


class MatchScore(NamedTuple):
    """The compatibility score between a master row and an isotope pattern."""

    value: float
    """The match cost. Lower values are better matches."""

    acceptable: bool
    """``True`` if the pair is within tolerances."""


NOT_ACCEPTABLE = MatchScore(inf, False)


def score(row: MasterRow, pattern: IsotopePattern, parameters: JoinAlignerParameters) -> MatchScore:
    """Compute the match score between a row and an isotope pattern.

    :param row: the master row
    :param pattern: the candidate isotope pattern
    :param parameters: the tolerances and the m/z vs RT balance used to compute the score
    :return: the pair score

    """
    if row.charge != pattern.charge:
        return NOT_ACCEPTABLE

    mono = pattern.monoisotopic
    diff_mz = abs(row.centroid_mz - mono.mz)
    diff_rt = abs(row.centroid_rt - mono.rt)
    rt_tolerance = parameters.rt_tolerance.compute(row.centroid_rt, mono.rt)

    if diff_mz < parameters.mz_tolerance and diff_rt < rt_tolerance:
        return MatchScore(parameters.mz_rt_balance * diff_mz + diff_rt, True)
    return NOT_ACCEPTABLE


def score_matrix(
    store: MasterRowStore, patterns: Sequence[IsotopePattern], parameters: JoinAlignerParameters
) -> tuple[FloatArray, BoolArray]:
    """Compute the score of all pairs of rows and patterns.

    Values are identical to the ones computed with :py:func:`score`.

    :param store: the master row store
    :param patterns: the candidate isotope patterns
    :param parameters: the tolerances and the m/z vs RT balance used to compute the score
    :return: a tuple with two arrays with shape ``(n_rows, n_patterns)``. The first one contains the
        scores and the second one is a mask of acceptable pairs.

    """
    row_mz, row_rt, row_charge = store.get_centroids()
    pattern_mz = numpy.array([x.monoisotopic.mz for x in patterns], dtype=float)
    pattern_rt = numpy.array([x.monoisotopic.rt for x in patterns], dtype=float)
    pattern_charge = numpy.array([x.charge for x in patterns], dtype=int)

    row_mz = row_mz[:, numpy.newaxis]
    row_rt = row_rt[:, numpy.newaxis]

    diff_mz = numpy.abs(row_mz - pattern_mz)
    diff_rt = numpy.abs(row_rt - pattern_rt)
    rt_tolerance = parameters.rt_tolerance.compute(row_rt, pattern_rt)

    acceptable = (row_charge[:, numpy.newaxis] == pattern_charge) & (diff_mz < parameters.mz_tolerance)
    acceptable &= diff_rt < rt_tolerance

    values = numpy.full(acceptable.shape, inf)
    values[acceptable] = parameters.mz_rt_balance * diff_mz[acceptable] + diff_rt[acceptable]
    return values, acceptable
