"""Test configuration and fixtures for volume-fader tests."""

from unittest.mock import MagicMock

import pytest

from volume_fader import FaderConfig, ManualClock, ManualScheduler, set_global_fader_config

from .mock_class import MockMedia, create_fader


@pytest.fixture(autouse=True)
def reset_global_config():
    """Restore the default global config after each test."""
    yield
    set_global_fader_config(FaderConfig())


@pytest.fixture
def media():
    return MockMedia(volume=0.0)


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def fader(media, clock, scheduler):
    """Linear 1000 ms fader on a silent media object."""
    fader, _, _, _ = create_fader(media, clock, scheduler)
    return fader


@pytest.fixture
def callback():
    return MagicMock()
