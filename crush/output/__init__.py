"""Output handling package for CRUSH."""
from crush.output.protocols import OutputHandler
from crush.output.console import ConsoleOutputHandler

__all__ = [
    "OutputHandler",
    "ConsoleOutputHandler",
]
