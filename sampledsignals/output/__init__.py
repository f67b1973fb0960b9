"""User-facing output for sampledsignals."""
from sampledsignals.output.protocols import OutputHandler
from sampledsignals.output.console import ConsoleOutputHandler

__all__ = ["OutputHandler", "ConsoleOutputHandler"]
