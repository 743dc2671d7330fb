import pytest

from qmf_bands.exceptions import ScaleError

from qmf_bands.sampling import DownSampler, UpSampler


@pytest.mark.parametrize("cls", [DownSampler, UpSampler])
@pytest.mark.parametrize("scale", [0, -1, 1.5, True, "2", None])
def test_invalid_scale(cls, scale):
    with pytest.raises(ScaleError) as exc_info:
        cls(scale)
    assert exc_info.value.scale is scale


class TestDownSampler:
    
    def test_phase_persists_between_calls(self):
        sampler = DownSampler(2)
        assert list(sampler.iter([1, 2, 3])) == [1, 3]
        assert sampler.phase == 1
        assert list(sampler.iter([4, 5, 6])) == [5]
        assert sampler.phase == 0
    
    def test_scale_three(self):
        sampler = DownSampler(3)
        assert list(sampler.iter(range(7))) == [0, 3, 6]
        assert list(sampler.iter([7, 8, 9])) == [9]
    
    def test_scale_one_passes_everything(self):
        sampler = DownSampler(1)
        assert list(sampler.iter("abc")) == ["a", "b", "c"]
        assert sampler.phase == 0
    
    def test_partial_group_is_not_padded(self):
        sampler = DownSampler(2)
        assert list(sampler.iter([1])) == [1]
        assert list(sampler.iter([])) == []
        assert sampler.phase == 1
        assert list(sampler.iter([2, 3])) == [3]
    
    def test_is_lazy(self):
        sampler = DownSampler(2)
        samples = sampler.iter([1, 2, 3])
        assert sampler.phase == 0
        assert next(samples) == 1
        assert sampler.phase == 1
    
    @pytest.mark.parametrize("scale", [1, 2, 3])
    @pytest.mark.parametrize("phase", [0, 1, 2])
    @pytest.mark.parametrize("num_items", [0, 1, 2, 3, 4, 7])
    def test_output_length(self, scale, phase, num_items):
        sampler = DownSampler(scale)
        sampler.phase = phase % scale
        expected = sampler.output_length(num_items)
        assert sampler.phase == phase % scale
        assert len(list(sampler.iter(range(num_items)))) == expected


class TestUpSampler:
    
    def test_phase_persists_between_calls(self):
        sampler = UpSampler(2, 0)
        samples = sampler.iter([1, 2, 3])
        assert [next(samples) for _ in range(5)] == [1, 0, 2, 0, 3]
        assert sampler.phase == 1
        
        assert list(sampler.iter([4, 5, 6])) == [0, 4, 0, 5, 0, 6, 0]
        assert sampler.phase == 0
    
    def test_default_fill_is_zero(self):
        assert list(UpSampler(2).iter([7])) == [7, 0]
    
    def test_fill_value(self):
        sampler = UpSampler(3, fill=-1)
        assert list(sampler.iter([1, 2])) == [1, -1, -1, 2, -1, -1]
    
    def test_scale_one_passes_everything(self):
        assert list(UpSampler(1).iter([1, 2, 3])) == [1, 2, 3]
    
    def test_exhausted_source_does_not_advance_phase(self):
        sampler = UpSampler(2)
        assert list(sampler.iter([])) == []
        assert sampler.phase == 0
    
    def test_fill_completes_group_even_when_source_empty(self):
        sampler = UpSampler(2)
        samples = sampler.iter([1])
        assert next(samples) == 1
        assert sampler.phase == 1
        
        # The remainder of the started group is still emitted
        assert list(sampler.iter([])) == [0]
        assert sampler.phase == 0
    
    @pytest.mark.parametrize("scale", [1, 2, 3])
    @pytest.mark.parametrize("phase", [0, 1, 2])
    @pytest.mark.parametrize("num_items", [0, 1, 2, 5])
    def test_output_length(self, scale, phase, num_items):
        sampler = UpSampler(scale)
        sampler.phase = phase % scale
        expected = sampler.output_length(num_items)
        assert len(list(sampler.iter(range(num_items)))) == expected
