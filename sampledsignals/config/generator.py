"""Configuration file generator for sampledsignals."""

from pathlib import Path

import yaml

from sampledsignals.config.defaults import STREAM, RESAMPLE
from sampledsignals.config.protocols import CURRENT_SCHEMA_VERSION


# Template header with documentation
CONFIG_HEADER = """\
# sampledsignals Configuration File
# =================================
#
# STREAM SECTION
# --------------
#   block_size:    Frames moved per block when copying streams (null follows
#                  the source's preference, falling back to 4096)
#   output_format: Sample format of written files - one of float32, float64,
#                  pcm16, pcm24, pcm32 (null keeps the input format)
#
# RESAMPLE SECTION
# ----------------
#   method:          linear (default) or polyphase
#   half_length:     Polyphase filter zero crossings on each side
#   kaiser_beta:     Polyphase Kaiser window shape
#   max_denominator: Largest denominator kept when reducing the rate ratio

"""


class ConfigGenerator:
    """Generate example YAML configuration files."""

    def __init__(self, stream: dict | None = None, resample: dict | None = None) -> None:
        self.stream = stream if stream is not None else dict(STREAM)
        self.resample = resample if resample is not None else dict(RESAMPLE)

    def generate(self, output_path: Path, *, include_header: bool = True) -> None:
        """Generate a YAML configuration file.

        Raises:
            OSError: If the file cannot be written
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)

        config = {
            'schema_version': CURRENT_SCHEMA_VERSION,
            'stream': self.stream,
            'resample': self.resample,
        }

        yaml_content = yaml.safe_dump(
            config,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
            indent=2,
            width=80,
        )

        with open(output_path, 'w', encoding='utf-8') as f:
            if include_header:
                f.write(CONFIG_HEADER)
            f.write(yaml_content)
