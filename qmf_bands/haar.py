"""
:py:mod:`qmf_bands.haar`: Two-tap filters
==========================================
"""

__all__ = [
    "NumericFilter",
]


class NumericFilter:
    """
    A two-tap linear filter with one sample of memory.
    
    Each call to :py:meth:`consume` computes::
    
        y = tap0*x + tap1*previous
    
    and then remembers ``x`` as ``previous``.
    
    Parameters
    ==========
    tap0, tap1 : number
        Filter coefficients. These should already be of the desired element
        type.
    previous : number
        Initial filter memory (zero for a newly built filter).
    """
    
    def __init__(self, tap0, tap1, previous=0):
        self.tap0 = tap0
        self.tap1 = tap1
        self.previous = previous
    
    def consume(self, x):
        y = self.tap0 * x + self.tap1 * self.previous
        self.previous = x
        return y
    
    def __repr__(self):
        return "{}({!r}, {!r}, previous={!r})".format(
            type(self).__name__,
            self.tap0,
            self.tap1,
            self.previous,
        )
