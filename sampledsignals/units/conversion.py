"""Conversions between time, frequency and frame quantities.

A bare number is always taken to be in the unit the function returns, so
``seconds_from(1.0) == 1.0`` and ``frames_from(10) == 10``. A tagged
``Quantity`` is converted using its unit; converting between frames and
time (or frequency) needs the rate of the signal. For time-domain signals
the rate is in hertz, for spectra it is the inverse bin spacing in seconds.
"""

import math

from sampledsignals.constants import RATE_REL_TOLERANCE
from sampledsignals.exceptions import UnknownRateError, UnitKindError
from sampledsignals.units.enums import UnitKind
from sampledsignals.units.models import Quantity

type QuantityLike = Quantity | int | float


def frames_exact(quantity: QuantityLike, rate: float | None = None) -> float:
    """Translate ``quantity`` into a (possibly fractional) number of frames.

    Args:
        quantity: Bare frame count, frames, time or frequency quantity
        rate: Sample rate in Hz, or seconds per bin for a spectrum

    Returns:
        Number of frames, not quantized

    Raises:
        UnknownRateError: If a time or frequency quantity is given without a rate
    """
    if not isinstance(quantity, Quantity):
        return quantity
    if quantity.kind is UnitKind.FRAMES:
        return quantity.value
    if rate is None:
        raise UnknownRateError(quantity)
    # time * Hz and Hz * seconds-per-bin are both dimensionless
    return quantity.base_value() * rate


def frames_from(quantity: QuantityLike, rate: float | None = None) -> int:
    """Translate ``quantity`` into a whole number of frames.

    Rounds to the nearest frame, ties to even (Python ``round``), so
    ``frames_from(seconds(0.5), 44100) == 22050``.
    """
    return int(round(frames_exact(quantity, rate)))


def hz_from(quantity: QuantityLike, rate: float | None = None) -> float:
    """Translate ``quantity`` into a value in hertz.

    A frame quantity is read as a bin index of a spectrum whose rate is in
    seconds per bin.

    Raises:
        UnknownRateError: If a frame quantity is given without a rate
        UnitKindError: If a time quantity is given
    """
    if not isinstance(quantity, Quantity):
        return quantity
    if quantity.kind is UnitKind.FREQUENCY:
        return quantity.base_value()
    if quantity.kind is UnitKind.FRAMES:
        if rate is None:
            raise UnknownRateError(quantity)
        return quantity.value / rate
    raise UnitKindError(quantity, "hertz")


def seconds_from(quantity: QuantityLike, rate: float | None = None) -> float:
    """Translate ``quantity`` into a value in seconds.

    ``seconds_from(frames(441), 44100) == 0.01``.

    Raises:
        UnknownRateError: If a frame quantity is given without a rate
        UnitKindError: If a frequency quantity is given
    """
    if not isinstance(quantity, Quantity):
        return quantity
    if quantity.kind is UnitKind.TIME:
        return quantity.base_value()
    if quantity.kind is UnitKind.FRAMES:
        if rate is None:
            raise UnknownRateError(quantity)
        return quantity.value / rate
    raise UnitKindError(quantity, "seconds")


def rates_equal(a: float, b: float) -> bool:
    """Return True when two sample rates are equal within floating tolerance."""
    return math.isclose(a, b, rel_tol=RATE_REL_TOLERANCE)
