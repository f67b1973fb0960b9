"""Tagged quantities for sampledsignals."""

from typing import NamedTuple

from sampledsignals.exceptions import UnitKindError
from sampledsignals.units.enums import Unit, UnitKind


class Quantity(NamedTuple):
    """A number tagged with a unit, e.g. ``Quantity(0.5, Unit.S)``."""

    value: float
    unit: Unit

    @property
    def kind(self) -> UnitKind:
        """Return the ``UnitKind`` of this quantity."""
        return self.unit.kind

    def base_value(self) -> float:
        """Return the value expressed in the base unit of its kind."""
        return self.value * self.unit.scale

    def to(self, unit: Unit) -> "Quantity":
        """Convert to another unit of the same kind.

        Raises:
            UnitKindError: If ``unit`` measures a different dimension
        """
        if unit.kind is not self.unit.kind:
            raise UnitKindError(self, unit.kind.name.lower())
        if unit is self.unit:
            return self
        return Quantity(self.base_value() / unit.scale, unit)

    def __str__(self) -> str:
        return f"{self.value:g} {self.unit}"


def seconds(value: float) -> Quantity:
    return Quantity(value, Unit.S)


def ms(value: float) -> Quantity:
    return Quantity(value, Unit.MS)


def hz(value: float) -> Quantity:
    return Quantity(value, Unit.HZ)


def khz(value: float) -> Quantity:
    return Quantity(value, Unit.KHZ)


def frames(value: float) -> Quantity:
    return Quantity(value, Unit.FRAMES)
