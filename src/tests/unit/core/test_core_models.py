import pydantic
import pytest

from isoalign.core.models import FeatureList, IsotopePattern, IsotopologueAnnotation, Peak, Sample

from ..helpers import create_pattern, create_peak


class TestPeak:
    def test_peaks_are_immutable(self):
        peak = create_peak(100.0, 10.0)
        with pytest.raises(pydantic.ValidationError):
            peak.mz = 200.0  # type: ignore

    def test_negative_mz_raises_validation_error(self):
        with pytest.raises(pydantic.ValidationError):
            Peak(mz=-1.0, rt=10.0)

    def test_peaks_have_unique_ids(self):
        assert create_peak(100.0, 10.0).id != create_peak(100.0, 10.0).id

    def test_get_descriptor(self):
        peak = create_peak(100.0, 10.0, area=50.0)
        assert peak.get("area") == 50.0
        assert peak.get("mz") == 100.0

    def test_get_invalid_descriptor_raises_value_error(self):
        peak = create_peak(100.0, 10.0)
        with pytest.raises(ValueError):
            peak.get("invalid_descriptor")

    def test_default_annotation_is_not_annotated(self):
        assert not create_peak(100.0, 10.0).annotation.is_annotated()


class TestIsotopePattern:
    def test_monoisotopic_is_first_peak(self):
        pattern = create_pattern(100.0, 10.0, n_peaks=3)
        assert pattern.monoisotopic is pattern.peaks[0]
        assert pattern.get_n_peaks() == 3

    def test_empty_pattern_raises_validation_error(self):
        with pytest.raises(pydantic.ValidationError):
            IsotopePattern(peaks=tuple(), charge=1)

    def test_non_positive_charge_raises_validation_error(self):
        with pytest.raises(pydantic.ValidationError):
            IsotopePattern.from_peaks(create_peak(100.0, 10.0), charge=0)

    def test_from_peaks_keeps_peak_order(self):
        p1 = create_peak(100.0, 10.0)
        p2 = create_peak(101.0, 10.0)
        pattern = IsotopePattern.from_peaks(p1, p2, charge=1)
        assert pattern.peaks == (p1, p2)


class TestFeatureList:
    def test_get_n_peaks(self):
        annotation = IsotopologueAnnotation(label=0, index=0, charge=1)
        peaks = [create_peak(100.0, 10.0, annotation=annotation), create_peak(200.0, 10.0)]
        data = FeatureList(sample=Sample(id="sample"), peaks=peaks)
        assert data.get_n_peaks() == 2

    def test_sample_path_serialization(self, tmp_path):
        sample = Sample(id="sample", path=tmp_path / "sample.mzML")
        assert sample.model_dump()["path"] == str(tmp_path / "sample.mzML")
