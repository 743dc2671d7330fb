"""
:py:mod:`qmf_bands.bands`: Recursive Haar filter bank
======================================================

A :py:class:`FilterBank` splits a buffer of samples into octave sub-bands using
a cascade of :py:class:`Stage` objects. Each stage splits its input into a
low-pass and a high-pass band (each decimated by two). The high band is kept
as a *detail band* while the low band is passed on to the next stage. The low
band of the final stage is the *residual band*.

Every band is handed to a callback which may modify it in place before the
bands are recombined, overwriting the original buffer. For a bank of three
bands::

    >>> bank = FilterBank(3)
    >>> buffer = [1.0] * 128
    >>> bank.process(buffer, lambda band, index: None)
    >>> buffer[bank.delay():] == [1.0] * 120
    True

The callback is called with the residual band first (index ``num_bands``)
followed by the detail bands from the coarsest (index ``num_bands - 1``) to the
finest (index 0)::

    >>> indices = []
    >>> FilterBank(2).process([0.0] * 16, lambda band, index: indices.append(index))
    >>> indices
    [2, 1, 0]

Filter memory and sampler phase persist between calls to
:py:meth:`FilterBank.process` so a long signal may be processed as a series of
consecutive chunks. The cascade introduces a latency of
:py:meth:`FilterBank.delay` samples: for a steady (constant) input, every
sample after the first ``delay()`` of the first chunk, and every sample of
later chunks, is reproduced exactly.
"""

import logging

from numbers import Integral

from qmf_bands.arrays import new_band

from qmf_bands.exceptions import BandCountError, LengthMismatchError

from qmf_bands.haar import NumericFilter

from qmf_bands.sampling import DownSampler, UpSampler

from qmf_bands.tables import HAAR_FILTERS, DEFAULT_SCALE, FilterRoles

__all__ = [
    "Stage",
    "FilterBank",
]


class Stage:
    """
    One level of a :py:class:`FilterBank`: a Haar analysis filter pair and the
    matching synthesis filter pair.

    Parameters
    ==========
    element_type : callable
        Converts a Python number into the sample type used by this stage (e.g.
        :py:class:`float`, :py:class:`numpy.float32` or
        :py:class:`fractions.Fraction`). Used to build the filter taps and
        zero values.
    """

    def __init__(self, element_type=float):
        zero = element_type(0)

        filters = {
            role: NumericFilter(element_type(taps.tap0), element_type(taps.tap1), zero)
            for role, taps in HAAR_FILTERS.items()
        }
        self.analysis_low_filter = filters[FilterRoles.analysis_low]
        self.analysis_high_filter = filters[FilterRoles.analysis_high]
        self.synthesis_low_filter = filters[FilterRoles.synthesis_low]
        self.synthesis_high_filter = filters[FilterRoles.synthesis_high]

        self.low_downsampler = DownSampler(DEFAULT_SCALE)
        self.high_downsampler = DownSampler(DEFAULT_SCALE)
        self.low_upsampler = UpSampler(DEFAULT_SCALE, zero)
        self.high_upsampler = UpSampler(DEFAULT_SCALE, zero)

    def analysis(self, samples):
        """
        Split 'samples' into a low and high band, each decimated by two.

        Returns a tuple (low, high) of new buffers of the same kind as
        'samples'.
        """
        low = (self.analysis_low_filter.consume(x) for x in samples)
        high = (self.analysis_high_filter.consume(x) for x in samples)
        return (
            new_band(samples, self.low_downsampler.iter(low)),
            new_band(samples, self.high_downsampler.iter(high)),
        )

    def synthesis(self, low, high, output):
        """
        Recombine a low and high band (as produced by :py:meth:`analysis`)
        into 'output', in place.

        Raises :py:exc:`~qmf_bands.exceptions.LengthMismatchError` if the two
        bands differ in length or their upsampled form does not exactly fill
        'output'. Only trailing fill values of the final upsampled group may
        be left over; the sampler phase carries these into the next call.
        """
        available = self.low_upsampler.output_length(len(low))
        surplus = available - len(output)
        if len(low) != len(high) or not (0 <= surplus < self.low_upsampler.scale):
            raise LengthMismatchError(len(low), len(high), len(output), available)

        samples = zip(self.low_upsampler.iter(low), self.high_upsampler.iter(high))
        # NB: range first so that no sample is pulled beyond the output
        for n, (low_sample, high_sample) in zip(range(len(output)), samples):
            low_sample = self.synthesis_low_filter.consume(low_sample)
            high_sample = self.synthesis_high_filter.consume(high_sample)
            output[n] = low_sample + high_sample


class FilterBank:
    """
    A cascade of ``num_bands`` Haar :py:class:`Stage` objects.

    Parameters
    ==========
    num_bands : int
        The number of detail bands (and stages). Must be at least one.
    element_type : callable
        The sample type, see :py:class:`Stage`.

    Attributes
    ==========
    element_type : callable
        The sample type the stages were built with. Callers may use this to
        build buffers and gains of a matching type.
    stages : [:py:class:`Stage`, ...]
        One stage per band, finest first.
    """

    def __init__(self, num_bands, element_type=float):
        if (
            isinstance(num_bands, bool)
            or not isinstance(num_bands, Integral)
            or num_bands < 1
        ):
            raise BandCountError(num_bands)

        self._num_bands = int(num_bands)
        self.element_type = element_type
        self.stages = [Stage(element_type) for _ in range(self._num_bands)]

        logging.debug(
            "FilterBank: %d bands, element type %s",
            self._num_bands,
            getattr(element_type, "__name__", element_type),
        )

    @property
    def num_bands(self):
        return self._num_bands

    def process(self, buffer, callback):
        """
        Decompose 'buffer' into sub-bands, pass each to 'callback' and
        resynthesize the result back into 'buffer', in place.

        Parameters
        ==========
        buffer : list or :py:class:`numpy.ndarray`
            The samples to process. Overwritten with the processed samples.
        callback : fn(band, band_index)
            Called exactly ``num_bands + 1`` times. First with the residual
            band (``band_index == num_bands``) and then with each detail band
            from ``band_index == num_bands - 1`` down to 0. The band is a
            buffer of the same kind as 'buffer' which may be modified in place
            (but must not change length). Return values are ignored.
        """
        logging.debug("process: %d samples", len(buffer))

        # levels[k] is the input to stage k; levels[num_bands] is the residual
        levels = [buffer]
        highs = []
        for stage in self.stages:
            low, high = stage.analysis(levels[-1])
            levels.append(low)
            highs.append(high)

        callback(levels[-1], self._num_bands)
        for level in reversed(range(self._num_bands)):
            callback(highs[level], level)
            self.stages[level].synthesis(levels[level + 1], highs[level], levels[level])

    def delay(self):
        """The latency, in samples, introduced by the filter cascade."""
        return 2 ** self._num_bands

    def band_lengths(self, length):
        """
        Return the band lengths a call to :py:meth:`process` with a buffer of
        'length' samples would produce, given the current sampler phases.

        Returns a list ``[detail_0, ..., detail_{num_bands-1}, residual]``
        indexed by band index.
        """
        lengths = []
        for stage in self.stages:
            length = stage.low_downsampler.output_length(length)
            lengths.append(length)
        lengths.append(length)
        return lengths
