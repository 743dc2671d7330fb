import numpy as np

from qmf_bands.arrays import new_band


def test_list():
    band = new_band([1.0, 2.0], iter([3.0, 4.0, 5.0]))
    assert isinstance(band, list)
    assert band == [3.0, 4.0, 5.0]


def test_tuple_gives_list():
    assert new_band((1.0,), (x for x in [2.0])) == [2.0]


def test_empty():
    assert new_band([], iter([])) == []
    band = new_band(np.zeros(0, dtype=np.float32), iter([]))
    assert band.dtype == np.float32
    assert len(band) == 0


def test_ndarray_keeps_dtype():
    like = np.zeros(4, dtype=np.float32)
    band = new_band(like, (x * 0.5 for x in [1.0, 2.0, 3.0]))
    assert isinstance(band, np.ndarray)
    assert band.dtype == np.float32
    assert np.array_equal(band, [0.5, 1.0, 1.5])
