"""
:py:mod:`qmf_bands.arrays`: Sample buffer functions
====================================================

Filter banks accept either plain Python lists or 1D :py:class:`numpy.ndarray`
buffers. The helpers in this module create sub-band buffers of the same kind
as a given buffer so that callbacks may use whichever idiom suits the caller
(e.g. ``band *= 0.5`` on arrays).
"""

import numpy as np

__all__ = [
    "new_band",
]


def new_band(like, values):
    """
    Make a new buffer holding 'values' which is of the same kind as 'like'.

    For :py:class:`numpy.ndarray` buffers the result is an array with the same
    dtype. Otherwise a :py:class:`list` is returned.
    """
    if isinstance(like, np.ndarray):
        return np.fromiter(values, dtype=like.dtype)
    else:
        return list(values)
