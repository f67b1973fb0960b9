"""Constants for sampledsignals."""

VERSION = "0.3.0"

# Frames per block when neither the caller nor the source expresses a preference
DEFAULT_BLOCK_SIZE = 4096

# Relative tolerance used when comparing two sample rates
RATE_REL_TOLERANCE = 1e-9
