"""Units and quantity conversion for sampledsignals."""
from sampledsignals.units.enums import Unit, UnitKind
from sampledsignals.units.models import Quantity, seconds, ms, hz, khz, frames
from sampledsignals.units.conversion import (
    QuantityLike,
    frames_exact,
    frames_from,
    hz_from,
    seconds_from,
    rates_equal,
)

__all__ = [
    "Unit",
    "UnitKind",
    "Quantity",
    "QuantityLike",
    "seconds",
    "ms",
    "hz",
    "khz",
    "frames",
    "frames_exact",
    "frames_from",
    "hz_from",
    "seconds_from",
    "rates_equal",
]
