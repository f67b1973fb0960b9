"""Entry point for the sampledsignals command line interface."""

from sampledsignals.cli.app import app


if __name__ == "__main__":
    app()
