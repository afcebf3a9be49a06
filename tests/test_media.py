"""Tests for media capability checks and VolumeAdapter."""

from unittest.mock import MagicMock

import pytest

from volume_fader import InvalidArgument, LinearScale, ManualClock, ManualScheduler, VolumeAdapter, VolumeFader
from volume_fader.core.media import MediaVolume, check_media

from .mock_class import MockMedia, MockPlayer, ReadOnlyMedia


class TestCheckMedia:
    """Tests for check_media."""

    def test_accepts_volume_attribute(self):
        media = MockMedia(0.4)
        assert check_media(media) is media
        assert media.volume == 0.4

    def test_protocol(self):
        assert isinstance(MockMedia(), MediaVolume)

    @pytest.mark.parametrize("media", [None, object(), MockMedia(-1), MockMedia(None), ReadOnlyMedia()])
    def test_rejects(self, media):
        with pytest.raises(InvalidArgument):
            check_media(media)


class TestVolumeAdapter:
    """Tests for VolumeAdapter."""

    def test_getter_setter(self):
        getter = MagicMock(return_value=30)
        setter = MagicMock()
        adapter = VolumeAdapter(getter, setter, scale_factor=100)
        assert adapter.volume == pytest.approx(0.3)
        adapter.volume = 0.5
        setter.assert_called_once_with(50.0)

    def test_clamps_reads(self):
        """Test that reads slightly out of range are clamped."""
        adapter = VolumeAdapter(lambda: 101, lambda value: None, scale_factor=100)
        assert adapter.volume == 1.0

    def test_rejects_out_of_range_writes(self):
        adapter = VolumeAdapter(lambda: 0.5, MagicMock())
        with pytest.raises(InvalidArgument):
            adapter.volume = 1.5

    def test_invalid_construction(self):
        with pytest.raises(InvalidArgument):
            VolumeAdapter(None, print)
        with pytest.raises(InvalidArgument):
            VolumeAdapter(lambda: 0.5, print, scale_factor=0)

    def test_for_player(self):
        """Test adapting an object with set_volume() and a volume property."""
        player = MockPlayer(0.6)
        adapter = VolumeAdapter.for_player(player)
        assert adapter.volume == 0.6
        adapter.volume = 0.2
        assert player.volume == 0.2

    def test_for_player_prefers_get_volume(self):
        player = MagicMock()
        player.get_volume.return_value = 0.7
        adapter = VolumeAdapter.for_player(player)
        assert adapter.volume == 0.7

    def test_for_player_without_setter(self):
        """Test that a player without set_volume() is rejected."""
        with pytest.raises(InvalidArgument):
            VolumeAdapter.for_player(ReadOnlyMedia())
        with pytest.raises(InvalidArgument):
            VolumeAdapter.for_player(object())

    def test_fader_drives_adapter(self):
        """Test a complete fade through an adapted player."""
        player = MockPlayer(1.0)
        clock = ManualClock()
        scheduler = ManualScheduler()
        fader = VolumeFader(
            VolumeAdapter.for_player(player),
            fade_duration=1000,
            scale=LinearScale(),
            scheduler=scheduler,
            clock=clock,
        )
        fader.fade_out()
        clock.set(500)
        scheduler.fire()
        assert player.volume == pytest.approx(0.5)
        scheduler.run_until_idle(clock, step=100)
        assert player.volume == 0.0
