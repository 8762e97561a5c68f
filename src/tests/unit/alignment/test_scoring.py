import random
from math import inf

import numpy
import pytest

from isoalign.alignment.parameters import JoinAlignerParameters, RTTolerance
from isoalign.alignment.rows import MasterRow, MasterRowStore
from isoalign.alignment.scoring import score, score_matrix

from ..helpers import create_parameters, create_pattern


def create_row(mz: float, rt: float, charge: int = 1) -> MasterRow:
    row = MasterRow(0, charge)
    row.add_pattern("sample-0", create_pattern(mz, rt, charge=charge))
    return row


@pytest.fixture
def parameters() -> JoinAlignerParameters:
    return create_parameters(mz_tolerance=0.01, rt_tolerance=5.0, mz_rt_balance=10.0)


class TestScore:
    def test_different_charge_is_not_acceptable(self, parameters):
        row = create_row(100.0, 10.0, charge=1)
        result = score(row, create_pattern(100.0, 10.0, charge=2), parameters)
        assert not result.acceptable
        assert result.value == inf

    def test_score_value(self, parameters):
        row = create_row(100.0, 10.0)
        result = score(row, create_pattern(100.005, 12.0), parameters)
        assert result.acceptable
        assert result.value == pytest.approx(10.0 * 0.005 + 2.0)

    def test_identical_position_has_zero_score(self, parameters):
        row = create_row(100.0, 10.0)
        result = score(row, create_pattern(100.0, 10.0), parameters)
        assert result.acceptable
        assert result.value == 0.0

    def test_mz_difference_lower_than_tolerance_is_acceptable(self, parameters):
        row = create_row(0.0, 10.0)
        assert score(row, create_pattern(0.0099, 10.0), parameters).acceptable

    def test_mz_difference_equal_to_tolerance_is_not_acceptable(self, parameters):
        row = create_row(0.0, 10.0)
        result = score(row, create_pattern(0.01, 10.0), parameters)
        assert not result.acceptable
        assert result.value == inf

    def test_rt_difference_equal_to_tolerance_is_not_acceptable(self, parameters):
        row = create_row(100.0, 10.0)
        assert not score(row, create_pattern(100.0, 15.0), parameters).acceptable

    def test_rt_difference_lower_than_tolerance_is_acceptable(self, parameters):
        row = create_row(100.0, 10.0)
        assert score(row, create_pattern(100.0, 14.5), parameters).acceptable

    def test_relative_rt_tolerance(self, parameters: JoinAlignerParameters):
        parameters.rt_tolerance = RTTolerance.relative(0.1)
        row = create_row(100.0, 100.0)
        # tolerance is 0.1 * 0.5 * (100.0 + 109.0) = 10.45
        assert score(row, create_pattern(100.0, 109.0), parameters).acceptable
        # tolerance is 0.1 * 0.5 * (100.0 + 112.0) = 10.6
        assert not score(row, create_pattern(100.0, 112.0), parameters).acceptable

    def test_zero_balance_ignores_mz_difference_in_value(self, parameters: JoinAlignerParameters):
        parameters.mz_rt_balance = 0.0
        row = create_row(100.0, 10.0)
        result = score(row, create_pattern(100.005, 12.0), parameters)
        assert result.value == 2.0


class TestScoreMatrix:
    @pytest.fixture
    def store(self) -> MasterRowStore:
        store = MasterRowStore()
        for k in range(20):
            mz = 100.0 + random.uniform(0.0, 0.05)
            rt = 10.0 + random.uniform(0.0, 10.0)
            store.create_row("sample-0", create_pattern(mz, rt, charge=random.choice([1, 2])))
        return store

    @pytest.fixture
    def patterns(self):
        patterns = list()
        for k in range(15):
            mz = 100.0 + random.uniform(0.0, 0.05)
            rt = 10.0 + random.uniform(0.0, 10.0)
            patterns.append(create_pattern(mz, rt, charge=random.choice([1, 2])))
        return patterns

    @pytest.mark.parametrize("rt_tolerance", [RTTolerance.absolute(3.0), RTTolerance.relative(0.2)])
    def test_score_matrix_equals_pairwise_score(self, store, patterns, parameters, rt_tolerance):
        parameters.rt_tolerance = rt_tolerance
        values, acceptable = score_matrix(store, patterns, parameters)
        assert values.shape == acceptable.shape == (len(store), len(patterns))
        for i, row in enumerate(store):
            for j, pattern in enumerate(patterns):
                expected = score(row, pattern, parameters)
                assert acceptable[i, j] == expected.acceptable
                assert values[i, j] == expected.value

    def test_score_matrix_contains_acceptable_pairs(self, store, patterns, parameters):
        _, acceptable = score_matrix(store, patterns, parameters)
        assert numpy.any(acceptable)

    def test_score_matrix_empty_store(self, patterns, parameters):
        values, acceptable = score_matrix(MasterRowStore(), patterns, parameters)
        assert values.shape == (0, len(patterns))
        assert not acceptable.any()
