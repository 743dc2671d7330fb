"""
:py:mod:`qmf_bands.tables`: Haar filter coefficients
=====================================================

The filter coefficients used by each :py:class:`~qmf_bands.bands.Stage`.

The analysis pair splits a signal into a half-band low-pass (average) and
high-pass (difference) signal and the synthesis pair recombines them. Taps are
given as plain Python numbers and are converted to the filter bank's element
type when a stage is built.
"""

from enum import IntEnum

from collections import namedtuple

__all__ = [
    "FilterRoles",
    "FilterTaps",
    "HAAR_FILTERS",
    "DEFAULT_SCALE",
]


class FilterRoles(IntEnum):
    """
    The four filters owned by every stage of a filter bank.
    
    See also: :py:data:`HAAR_FILTERS`.
    """
    
    analysis_low = 0
    analysis_high = 1
    synthesis_low = 2
    synthesis_high = 3


FilterTaps = namedtuple("FilterTaps", "tap0,tap1")
"""
Coefficients of a two-tap filter.

Parameters
----------
tap0
    Weight applied to the current input sample.
tap1
    Weight applied to the previous input sample.
"""

HAAR_FILTERS = {
    FilterRoles.analysis_low: FilterTaps(tap0=0.5, tap1=0.5),
    FilterRoles.analysis_high: FilterTaps(tap0=-0.5, tap1=0.5),
    FilterRoles.synthesis_low: FilterTaps(tap0=1, tap1=1),
    FilterRoles.synthesis_high: FilterTaps(tap0=1, tap1=-1),
}
"""
Lookup from :py:class:`FilterRoles` to the :py:class:`FilterTaps` of the Haar
quadrature mirror filter pair.
"""

DEFAULT_SCALE = 2
"""
Decimation (and interpolation) factor applied to each sub-band by a stage.
"""
