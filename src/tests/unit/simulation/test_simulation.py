import pytest

from isoalign.alignment.extraction import AnnotationPatternExtractor
from isoalign.simulation import AbundanceSpec, SimulatedFeatureListFactory, SimulatedPatternSpec
from isoalign.simulation.base import C13_MASS_DIFF


class TestSimulatedPatternSpec:
    def test_get_mz_uses_charge(self):
        spec = SimulatedPatternSpec(mz=300.0, rt=10.0, charge=2, n_isotopologues=3)
        mz = spec.get_mz()
        assert len(mz) == 3
        assert mz[1] - mz[0] == pytest.approx(C13_MASS_DIFF / 2)

    def test_create_peaks_without_noise(self):
        spec = SimulatedPatternSpec(mz=300.0, rt=10.0, n_isotopologues=2, decay=0.5)
        peaks = spec.create_peaks(label=4)
        assert [x.mz for x in peaks] == spec.get_mz()
        assert all(x.rt == 10.0 for x in peaks)
        assert peaks[1].height == pytest.approx(0.5 * peaks[0].height)
        assert [x.annotation.index for x in peaks] == [0, 1]
        assert all(x.annotation.label == 4 for x in peaks)

    def test_invalid_prevalence_raises_error(self):
        with pytest.raises(ValueError):
            AbundanceSpec(prevalence=0.0)


class TestSimulatedFeatureListFactory:
    def test_create_feature_list(self, feature_list_factory: SimulatedFeatureListFactory):
        data = feature_list_factory("sample", order=3)
        assert data.sample.id == "sample"
        assert data.sample.order == 3
        assert all(x.annotation.is_annotated() for x in data.peaks)

    def test_feature_list_patterns_can_be_extracted(self):
        specs = [SimulatedPatternSpec(mz=100.0 * (k + 1), rt=10.0, n_isotopologues=2) for k in range(3)]
        factory = SimulatedFeatureListFactory(patterns=specs)
        patterns = AnnotationPatternExtractor().extract(factory("sample"))
        assert len(patterns) == 3
        assert all(x.get_n_peaks() == 2 for x in patterns)
