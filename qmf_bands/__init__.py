"""
The :py:mod:`qmf_bands` module implements a recursive octave filter bank based
on the Haar wavelet quadrature mirror filter (QMF) pair.

..
    You are currently reading the documentation in its source form (e.g.
    directly from the Python source docstrings or via ``help()``).


Main components
---------------

Leaves first:

* :py:class:`~qmf_bands.haar.NumericFilter`: a two-tap filter with one sample
  of memory.
* :py:class:`~qmf_bands.sampling.DownSampler` and
  :py:class:`~qmf_bands.sampling.UpSampler`: decimation and zero-stuffing
  interpolation whose phase persists between calls.
* :py:class:`~qmf_bands.bands.Stage`: one level of analysis (split into a low
  and high band, each decimated by two) and synthesis (interpolate and
  recombine).
* :py:class:`~qmf_bands.bands.FilterBank`: a cascade of stages which exposes
  every sub-band to a callback between decomposition and recomposition.

A typical use is per-band gain::

    >>> import numpy as np
    >>> from qmf_bands import FilterBank
    >>> bank = FilterBank(4)
    >>> gains = [1.0, 0.5, 0.5, 1.0, 1.0]
    >>> def apply_gain(band, band_index):
    ...     band *= gains[band_index]
    >>> samples = np.zeros(256)
    >>> bank.process(samples, apply_gain)

The ``qmf-band-gain`` command applies the same processing to raw sample
files.


Streaming
---------

A :py:class:`~qmf_bands.bands.FilterBank` is intended to be fed consecutive
chunks of a longer signal. Filter memory and sampler phase are never reset
between calls, which is what allows a steady input to be reproduced exactly
after the initial :py:meth:`~qmf_bands.bands.FilterBank.delay` samples. Chunk
lengths which are multiples of ``delay()`` keep every stage aligned to the
start of each chunk but other lengths are supported too.

A filter bank holds mutable state and must not be shared between threads.
"""

from qmf_bands.version import __version__

from qmf_bands.bands import FilterBank, Stage

from qmf_bands.haar import NumericFilter

from qmf_bands.sampling import DownSampler, UpSampler

from qmf_bands.exceptions import BandCountError, ScaleError, LengthMismatchError
