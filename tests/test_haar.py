import pytest

from fractions import Fraction

from qmf_bands.haar import NumericFilter


class TestNumericFilter:
    
    def test_initial_memory_is_zero(self):
        f = NumericFilter(0.5, 0.5)
        assert f.previous == 0
        assert f.consume(1.0) == 0.5
    
    def test_averaging(self):
        f = NumericFilter(0.5, 0.5)
        assert [f.consume(x) for x in [1.0, 1.0, 3.0]] == [0.5, 1.0, 2.0]
        assert f.previous == 3.0
    
    def test_differencing(self):
        f = NumericFilter(1, -1)
        assert [f.consume(x) for x in [1, 2, 4]] == [1, 1, 2]
    
    @pytest.mark.parametrize("tap0,tap1,expected", [
        (1, 0, [3, 5, 7]),
        (0, 1, [0, 3, 5]),
        (2, 3, [6, 19, 29]),
    ])
    def test_taps(self, tap0, tap1, expected):
        f = NumericFilter(tap0, tap1)
        assert [f.consume(x) for x in [3, 5, 7]] == expected
    
    def test_initial_previous(self):
        f = NumericFilter(1, 1, previous=10)
        assert f.consume(1) == 11
    
    def test_generic_element_type(self):
        f = NumericFilter(Fraction(1, 3), Fraction(2, 3), Fraction(0))
        assert f.consume(Fraction(3)) == Fraction(1)
        assert f.consume(Fraction(0)) == Fraction(2)
    
    def test_repr(self):
        f = NumericFilter(1, -1)
        f.consume(5)
        assert repr(f) == "NumericFilter(1, -1, previous=5)"
