"""Default stream settings for sampledsignals."""

from typing import Any

STREAM: dict[str, Any] = {
    "block_size": None,
    "output_format": None,
}

RESAMPLE: dict[str, Any] = {
    "method": "linear",
    "half_length": 16,
    "kaiser_beta": 5.0,
    "max_denominator": 1_000_000,
}
