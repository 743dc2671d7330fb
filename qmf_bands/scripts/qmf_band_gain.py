r"""
``qmf-band-gain``
=================

A command-line utility which applies a gain to individual octave bands of a
raw (headerless, mono, native-endian) floating point sample file.

Usage
-----

Given a file of 32-bit floating point samples, the following attenuates the
finest detail band (the top octave) by half and mutes the residual band of a
five band decomposition::

    $ qmf-band-gain input.f32 output.f32 --bands 5 --gain 0=0.5 --gain 5=0

Band 0 is the finest detail band (the upper half of the spectrum), band
``N - 1`` the coarsest and band ``N`` the residual (low-pass) band. Bands
without a ``--gain`` are passed through unchanged.

The input is processed in blocks of ``--block-size`` samples using a single
filter bank so the output is continuous across block boundaries. The output
lags the input by the filter bank's latency of ``2**N`` samples and has the
same length as the input.


Arguments
---------

The complete set of arguments can be listed using ``--help``::

    $ qmf-band-gain --help

"""

import os
import sys

import logging

from argparse import ArgumentParser, ArgumentTypeError

import numpy as np

from qmf_bands import __version__

from qmf_bands.bands import FilterBank

__all__ = [
    "parse_gain",
    "make_gain_callback",
    "process_samples",
    "main",
]


DTYPES = {
    "float32": np.float32,
    "float64": np.float64,
}
"""Sample formats supported on the command line."""


def parse_gain(spec):
    """
    Parse a gain specification of the form ``BAND=GAIN`` into a (band_index,
    gain) tuple. For use as an :py:mod:`argparse` type.
    """
    band, sep, gain = spec.partition("=")
    if not sep:
        raise ArgumentTypeError("expected BAND=GAIN, got {!r}".format(spec))
    try:
        return (int(band), float(gain))
    except ValueError:
        raise ArgumentTypeError("expected BAND=GAIN, got {!r}".format(spec))


def make_gain_callback(gains):
    """
    Return a :py:meth:`FilterBank.process` callback which multiplies each
    band by the gain given for its index in the dictionary 'gains'. Bands
    absent from 'gains' are left untouched.
    """

    def apply_gain(band, band_index):
        gain = gains.get(band_index)
        if gain is not None:
            band *= gain

    return apply_gain


def process_samples(samples, num_bands, gains, block_size):
    """
    Process a 1D array of samples through a new :py:class:`FilterBank`, one
    block at a time, applying per-band gains. Returns a new array of the same
    length and dtype.
    """
    bank = FilterBank(num_bands, samples.dtype.type)
    callback = make_gain_callback(gains)

    output = samples.copy()
    for start in range(0, len(output), block_size):
        block = output[start : start + block_size]
        bank.process(block, callback)
        logging.debug("Processed samples %d to %d", start, start + len(block))

    return output


def parse_args(*args, **kwargs):
    parser = ArgumentParser(
        description="""
        Apply per-octave-band gains to a raw floating point sample file using
        a Haar quadrature mirror filter bank.
    """
    )

    parser.add_argument(
        "--version", action="version", version="%(prog)s {}".format(__version__),
    )

    parser.add_argument(
        "input",
        help="""
            The filename of the raw sample file to read.
        """,
    )

    parser.add_argument(
        "output",
        help="""
            The filename to write the processed samples to.
        """,
    )

    parser.add_argument(
        "--bands",
        "-b",
        type=int,
        required=True,
        help="""
            The number of detail bands to split the signal into.
        """,
    )

    parser.add_argument(
        "--gain",
        "-g",
        type=parse_gain,
        action="append",
        default=[],
        metavar="BAND=GAIN",
        help="""
            A linear gain to apply to a band. Band 0 is the finest detail
            band and band N is the residual. May be given several times.
        """,
    )

    parser.add_argument(
        "--block-size",
        "-s",
        type=int,
        help="""
            The number of samples to process at once. Must be a multiple of
            2**BANDS. Defaults to 16 * 2**BANDS.
        """,
    )

    parser.add_argument(
        "--dtype",
        "-t",
        choices=sorted(DTYPES),
        default="float32",
        help="""
            The sample format of the input and output files. Default:
            %(default)s.
        """,
    )

    parser.add_argument(
        "--verbose",
        "-v",
        default=0,
        action="count",
        help="""
            Show more detailed status information during execution.
        """,
    )

    args = parser.parse_args(*args, **kwargs)

    if args.bands < 1:
        parser.error("--bands must be at least 1")

    period = 2 ** args.bands
    if args.block_size is None:
        args.block_size = 16 * period
    elif args.block_size < 1 or args.block_size % period != 0:
        parser.error("--block-size must be a positive multiple of {}".format(period))

    for band_index, _gain in args.gain:
        if not 0 <= band_index <= args.bands:
            parser.error(
                "band {} out of range (expected 0 to {})".format(band_index, args.bands)
            )

    return args


def main(*args, **kwargs):
    args = parse_args(*args, **kwargs)

    log_level = logging.WARNING
    if args.verbose >= 2:
        log_level = logging.DEBUG
    elif args.verbose >= 1:
        log_level = logging.INFO
    logging.basicConfig(level=log_level)

    dtype = np.dtype(DTYPES[args.dtype])
    try:
        file_size = os.path.getsize(args.input)
        samples = np.fromfile(args.input, dtype=dtype)
    except OSError:
        sys.stderr.write("Error: Could not read {}.\n".format(args.input))
        return 101

    if file_size % dtype.itemsize != 0:
        sys.stderr.write(
            "Error: {} is not a whole number of {} samples "
            "({} trailing bytes).\n".format(
                args.input,
                args.dtype,
                file_size % dtype.itemsize,
            )
        )
        return 103

    gains = dict(args.gain)
    logging.info(
        "Processing %d samples with %d bands, gains %r", len(samples), args.bands, gains
    )

    output = process_samples(samples, args.bands, gains, args.block_size)

    try:
        output.tofile(args.output)
    except OSError:
        sys.stderr.write("Error: Could not write {}.\n".format(args.output))
        return 102

    return 0


if __name__ == "__main__":
    sys.exit(main())
