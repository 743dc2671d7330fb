"""
:py:mod:`qmf_bands.sampling`: Stateful rate conversion
=======================================================

Decimation (:py:class:`DownSampler`) and zero-stuffing interpolation
(:py:class:`UpSampler`) by an integer factor.

Both samplers remember their phase between calls to ``iter()`` so that a long
signal may be processed as a series of consecutive chunks without losing
alignment::

    >>> down = DownSampler(2)
    >>> list(down.iter([1, 2, 3]))
    [1, 3]
    >>> list(down.iter([4, 5, 6]))
    [5]

The generators returned by ``iter()`` update the phase *before* handing out
each element, so abandoning a generator part way through leaves the sampler
aligned with the elements actually consumed::

    >>> up = UpSampler(2)
    >>> samples = up.iter([1, 2, 3])
    >>> [next(samples) for _ in range(5)]
    [1, 0, 2, 0, 3]
    >>> list(up.iter([4, 5, 6]))
    [0, 4, 0, 5, 0, 6, 0]
"""

from qmf_bands.exceptions import ScaleError

__all__ = [
    "DownSampler",
    "UpSampler",
]


def check_scale(scale):
    """Raise :py:exc:`ScaleError` unless 'scale' is a positive integer."""
    if isinstance(scale, bool) or not isinstance(scale, int) or scale < 1:
        raise ScaleError(scale)


class DownSampler:
    """
    Keep every 'scale'-th element of a sequence.

    Parameters
    ==========
    scale : int
        Decimation factor.

    Attributes
    ==========
    phase : int
        Position, in ``range(scale)``, of the next source element within its
        group. Only elements arriving at phase 0 are kept.
    """

    def __init__(self, scale):
        check_scale(scale)
        self.scale = scale
        self.phase = 0

    def iter(self, iterable):
        """
        Generate the phase-0 elements of 'iterable'.

        A partial group left at the end of the source produces nothing
        further; the phase carries over to the next call.
        """
        for item in iterable:
            phase = self.phase
            self.phase = (phase + 1) % self.scale
            if phase == 0:
                yield item

    def output_length(self, num_items):
        """
        Return the number of elements :py:meth:`iter` would produce from
        'num_items' source elements, starting at the current phase.
        """
        first = (self.scale - self.phase) % self.scale
        if num_items <= first:
            return 0
        return ((num_items - first - 1) // self.scale) + 1

    def __repr__(self):
        return "{}({}, phase={})".format(type(self).__name__, self.scale, self.phase)


class UpSampler:
    """
    Insert 'scale - 1' fill values after every element of a sequence.

    Parameters
    ==========
    scale : int
        Interpolation factor.
    fill : number
        The value emitted between source elements.

    Attributes
    ==========
    phase : int
        Position, in ``range(scale)``, of the next output element within its
        group. A source element is pulled at phase 0, fill is emitted
        otherwise.
    """

    def __init__(self, scale, fill=0):
        check_scale(scale)
        self.scale = scale
        self.fill = fill
        self.phase = 0

    def iter(self, iterable):
        """
        Generate the interpolated form of 'iterable'.

        Generation stops when a phase-0 pull finds the source exhausted. The
        phase only advances when an element is produced so an exhausted pull
        leaves it unchanged.
        """
        iterator = iter(iterable)
        while True:
            if self.phase == 0:
                try:
                    item = next(iterator)
                except StopIteration:
                    return
            else:
                item = self.fill
            self.phase = (self.phase + 1) % self.scale
            yield item

    def output_length(self, num_items):
        """
        Return the number of elements a complete run of :py:meth:`iter` over
        'num_items' source elements would produce, starting at the current
        phase.
        """
        return ((self.scale - self.phase) % self.scale) + (self.scale * num_items)

    def __repr__(self):
        return "{}({}, fill={!r}, phase={})".format(
            type(self).__name__,
            self.scale,
            self.fill,
            self.phase,
        )
