"""
Exception types used in this library.
"""


class BandCountError(ValueError):
    """
    Thrown when a :py:class:`~qmf_bands.bands.FilterBank` is constructed with
    a band count which is not a positive integer.
    """
    
    def __init__(self, num_bands):
        self.num_bands = num_bands
        super().__init__(
            "Filter banks need at least one band (got {!r}).".format(num_bands)
        )


class ScaleError(ValueError):
    """
    Thrown when a sampler in :py:mod:`qmf_bands.sampling` is given a scale
    factor which is not a positive integer.
    """
    
    def __init__(self, scale):
        self.scale = scale
        super().__init__(
            "Sampling scale must be a positive integer (got {!r}).".format(scale)
        )


class LengthMismatchError(ValueError):
    """
    Thrown by :py:meth:`qmf_bands.bands.Stage.synthesis` when the low and high
    bands differ in length, or when the upsampled bands would not exactly fill
    the output buffer.
    
    Attributes
    ==========
    low_length, high_length : int
        Lengths of the low and high band passed in.
    output_length : int
        Length of the output buffer.
    available : int
        Number of samples the upsampled low band would produce.
    """
    
    def __init__(self, low_length, high_length, output_length, available):
        self.low_length = low_length
        self.high_length = high_length
        self.output_length = output_length
        self.available = available
        super().__init__(
            "Cannot synthesize {} low and {} high band samples "
            "({} upsampled) into an output of {} samples.".format(
                low_length,
                high_length,
                available,
                output_length,
            )
        )
