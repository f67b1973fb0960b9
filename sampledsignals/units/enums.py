"""Unit enums for sampledsignals."""

from enum import Enum, auto


class UnitKind(Enum):
    """Physical dimension of a unit."""

    TIME = auto()
    FREQUENCY = auto()
    FRAMES = auto()


class Unit(Enum):
    """Units a ``Quantity`` can be tagged with.

    Each member carries its display symbol, its kind and the factor that
    converts a value in this unit to the base unit of its kind (seconds,
    hertz or frames).
    """

    NS = ("ns", UnitKind.TIME, 1e-9)
    US = ("us", UnitKind.TIME, 1e-6)
    MS = ("ms", UnitKind.TIME, 1e-3)
    S = ("s", UnitKind.TIME, 1.0)
    HZ = ("Hz", UnitKind.FREQUENCY, 1.0)
    KHZ = ("kHz", UnitKind.FREQUENCY, 1e3)
    MHZ = ("MHz", UnitKind.FREQUENCY, 1e6)
    GHZ = ("GHz", UnitKind.FREQUENCY, 1e9)
    FRAMES = ("frames", UnitKind.FRAMES, 1.0)

    def __init__(self, symbol: str, kind: UnitKind, scale: float) -> None:
        self.symbol = symbol
        self.kind = kind
        self.scale = scale

    def __str__(self) -> str:
        return self.symbol
