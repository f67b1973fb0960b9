"""Transforms between time-domain and frequency-domain buffers."""

import numpy as np

from sampledsignals.buffers.samplebuf import SampleBuf, SpectrumBuf
from sampledsignals.formats import get_converter


def fft(buf: SampleBuf) -> SpectrumBuf:
    """Return the spectrum of every channel of ``buf``.

    Fixed-point samples are converted to their float values first. The
    spectrum rate is ``nframes / rate``, the duration of the input in seconds,
    so one bin spans ``rate / nframes`` Hz.

    Raises:
        ValueError: If the buffer is empty
    """
    if buf.nframes == 0:
        raise ValueError("Cannot transform an empty buffer")
    samples = get_converter(buf.format).to_float(buf.data)
    return SpectrumBuf(np.fft.fft(samples, axis=0), buf.nframes / buf.rate)


def ifft(spectrum: SpectrumBuf, real: bool = False) -> SampleBuf:
    """Invert ``fft``; with ``real=True`` the imaginary residue is dropped."""
    if spectrum.nframes == 0:
        raise ValueError("Cannot transform an empty buffer")
    samples = np.fft.ifft(spectrum.data, axis=0)
    if real:
        samples = np.ascontiguousarray(samples.real)
    return SampleBuf(samples, spectrum.nframes / spectrum.rate)
