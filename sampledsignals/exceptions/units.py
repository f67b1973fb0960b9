"""Unit and rate related exceptions for sampledsignals."""

from sampledsignals.exceptions.base import SampledSignalsError


class UnknownRateError(SampledSignalsError):
    """Raised when a time or frequency quantity is given without a rate.

    A quantity such as ``seconds(0.5)`` can only be turned into a number of
    frames when the sample rate of the signal is known.
    """

    def __init__(self, quantity: object) -> None:
        super().__init__(f"Unknown sample rate: cannot interpret {quantity} without a rate.")
        self.quantity = quantity


class UnitKindError(SampledSignalsError, ValueError):
    """Raised when a quantity has the wrong kind of unit for a conversion.

    For example asking for a time-domain quantity in hertz.
    """

    def __init__(self, quantity: object, expected: str) -> None:
        super().__init__(f"Expected a quantity in {expected}, got {quantity}.")
        self.quantity = quantity
        self.expected = expected


class RateMismatchError(SampledSignalsError):
    """Raised when arithmetic combines buffers with incompatible rates.

    Buffers sampled at different rates (or a time-domain buffer and a
    spectrum) cannot be combined sample by sample.
    """

    def __init__(self, left: float, right: float) -> None:
        super().__init__(f"Sample rates do not match: {left} vs {right}.")
        self.left = left
        self.right = right
