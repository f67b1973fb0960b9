"""Sample buffers for sampledsignals."""
from sampledsignals.buffers.samplebuf import SampleBuf, SpectrumBuf
from sampledsignals.buffers.transforms import fft, ifft

__all__ = ["SampleBuf", "SpectrumBuf", "fft", "ifft"]
