"""Integration test configuration and fixtures."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
import soundfile as sf


def pytest_collection_modifyitems(items):
    """Automatically mark all tests in integration/ with @pytest.mark.integration."""
    for item in items:
        if "/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def wav_factory(tmp_path: Path):
    """Factory fixture writing sine tones to WAV files.

    Returns:
        Callable that writes a file and returns its path.
    """
    def _create(
        name: str = "tone.wav",
        rate: int = 48000,
        channels: int = 2,
        seconds: float = 0.25,
        subtype: str = "FLOAT",
        frequency: float = 440.0,
    ) -> Path:
        frames = int(rate * seconds)
        t = np.arange(frames) / rate
        tone = 0.5 * np.sin(2 * np.pi * frequency * t)
        data = np.repeat(tone[:, np.newaxis], channels, axis=1)
        path = tmp_path / name
        sf.write(str(path), data, rate, subtype=subtype)
        return path

    return _create
