"""Factory functions for resamplers."""

from fractions import Fraction

from sampledsignals.resamplers.enums import ResampleMethod
from sampledsignals.resamplers.protocols import Resampler
from sampledsignals.resamplers.linear import LinearResampler
from sampledsignals.resamplers.polyphase import PolyphaseResampler


def get_resampler(
    method: ResampleMethod,
    ratio: Fraction,
    channels: int,
    *,
    half_length: int = 16,
    kaiser_beta: float = 5.0,
) -> Resampler:
    """Factory function to build the resampler for the given method.

    Args:
        method: Interpolation strategy
        ratio: Output rate divided by input rate
        channels: Number of channels processed in parallel
        half_length: Polyphase filter zero crossings on each side of the centre tap
        kaiser_beta: Polyphase Kaiser window shape parameter

    Returns:
        Resampler: A fresh resampler with empty history
    """
    method = ResampleMethod(method)
    if method is ResampleMethod.POLYPHASE:
        return PolyphaseResampler(ratio, channels, half_length=half_length, kaiser_beta=kaiser_beta)
    return LinearResampler(ratio, channels)


def reduce_ratio(rate_out: float, rate_in: float, max_denominator: int) -> Fraction:
    """Return ``rate_out / rate_in`` in lowest terms with a bounded denominator.

    Raises:
        ValueError: If either rate is not positive
    """
    if rate_out <= 0 or rate_in <= 0:
        raise ValueError(f"Sample rates must be positive, got {rate_out} and {rate_in}")
    ratio = (Fraction(float(rate_out)) / Fraction(float(rate_in))).limit_denominator(max_denominator)
    if ratio == 0:
        raise ValueError(f"Rate ratio {rate_out}/{rate_in} is too small to represent")
    return ratio
