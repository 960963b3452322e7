"""Entry point for the CRUSH command-line interface.

This module exposes a Typer-powered command-line interface that decodes an
audio file, reduces its sample rate and bit depth, and writes or plays the
crushed result.
"""

from crush.cli.app import app


if __name__ == "__main__":
    app()
