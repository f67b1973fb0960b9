"""Endpoint format helpers shared by every stream endpoint."""

from typing import NamedTuple

import numpy as np

from sampledsignals.exceptions import FormatMismatchError
from sampledsignals.formats import SampleFormat
from sampledsignals.units import rates_equal


class EndpointFormat(NamedTuple):
    """The three axes that must agree before frames move without conversion."""

    rate: float
    channels: int
    format: SampleFormat

    def matches(self, other: "EndpointFormat") -> bool:
        """Return True when a raw block transfer between the two is legal."""
        return (
            rates_equal(self.rate, other.rate)
            and self.channels == other.channels
            and self.format is other.format
        )

    def __str__(self) -> str:
        return f"{self.rate:g} Hz, {self.channels} ch, {self.format.value}"


def format_of(endpoint) -> EndpointFormat:
    """Return the ``EndpointFormat`` of a source or sink."""
    return EndpointFormat(float(endpoint.rate), int(endpoint.channels), SampleFormat(endpoint.format))


def check_block(endpoint, buf: np.ndarray, offset: int, count: int) -> None:
    """Validate a block handed to ``read_into`` or ``write_from``.

    Raises:
        FormatMismatchError: If the array dtype or channel count does not match the endpoint
        ValueError: If ``offset``/``count`` fall outside the array
    """
    if buf.ndim != 2 or buf.shape[1] != endpoint.channels:
        raise FormatMismatchError(
            f"Block with shape {buf.shape} does not match endpoint channel count ({endpoint.channels})"
        )
    if buf.dtype != endpoint.format.numpy_dtype:
        raise FormatMismatchError(
            f"Block dtype {buf.dtype} does not match endpoint format {endpoint.format.value}"
        )
    if offset < 0 or count < 0 or offset + count > buf.shape[0]:
        raise ValueError(f"Frames {offset}..{offset + count} out of range for a block of {buf.shape[0]} frames")
