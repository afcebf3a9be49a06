"""Tests for offline fade rendering."""

import math

import numpy as np
import pytest

from volume_fader import DecibelScale, FadeRecord, InvalidArgument, LinearScale, apply_fade, fade_envelope


class TestFadeEnvelope:
    """Tests for fade_envelope."""

    def test_linear_envelope(self):
        """Test a 1 s linear fade in at 1 kHz."""
        record = FadeRecord.create(0.0, 1.0, now=0, duration=1000)
        envelope = fade_envelope(record, LinearScale(), sample_rate=1000, num_samples=1500)
        assert envelope.shape == (1500,)
        assert envelope.dtype == np.float32
        assert envelope[0] == 0.0
        assert envelope[500] == pytest.approx(0.5)
        assert np.all(envelope[1000:] == 1.0)

    def test_before_start_holds_start_level(self):
        record = FadeRecord.create(1.0, 0.0, now=0, duration=100)
        envelope = fade_envelope(record, LinearScale(), sample_rate=1000, num_samples=300, offset=-100)
        assert np.all(envelope[:101] == 1.0)
        assert np.all(envelope[200:] == 0.0)

    def test_decibel_endpoint(self):
        """Test that the envelope ends exactly on scale(end_volume)."""
        scale = DecibelScale()
        record = FadeRecord.create(1.0, 0.5, now=0, duration=100)
        envelope = fade_envelope(record, scale, sample_rate=44100, num_samples=44100)
        assert envelope[-1] == np.float32(scale(0.5))
        assert np.all(np.diff(envelope) <= 0)

    def test_plain_scalar_function(self):
        """Test scales that only accept scalars."""
        record = FadeRecord.create(0.0, 1.0, now=0, duration=10)
        envelope = fade_envelope(record, math.sqrt, sample_rate=1000, num_samples=20)
        assert envelope[5] == pytest.approx(math.sqrt(0.5))
        assert envelope[-1] == 1.0

    def test_branching_scalar_function(self):
        """Test scales that branch on their input and reject arrays."""

        def silence_aware(level):
            return 0.0 if level == 0 else level**2

        record = FadeRecord.create(0.0, 1.0, now=0, duration=10)
        envelope = fade_envelope(record, silence_aware, sample_rate=1000, num_samples=20)
        assert envelope[0] == 0.0
        assert envelope[5] == pytest.approx(0.25)
        assert envelope[-1] == 1.0

    def test_scale_returning_one_value(self):
        """Test scales that collapse an array to a single number."""
        record = FadeRecord.create(0.0, 1.0, now=0, duration=10)
        envelope = fade_envelope(record, lambda level: float(np.mean(level)), sample_rate=1000, num_samples=20)
        assert envelope.shape == (20,)
        assert envelope[5] == pytest.approx(0.5)

    def test_invalid_arguments(self):
        record = FadeRecord.create(0.0, 1.0, now=0, duration=10)
        with pytest.raises(InvalidArgument):
            fade_envelope(record, LinearScale(), sample_rate=0, num_samples=10)
        with pytest.raises(InvalidArgument):
            fade_envelope(record, LinearScale(), sample_rate=1000, num_samples=-1)


class TestApplyFade:
    """Tests for apply_fade."""

    def test_stereo(self):
        audio = np.ones((1000, 2), dtype=np.float32)
        record = FadeRecord.create(1.0, 0.0, now=0, duration=1000)
        result = apply_fade(audio, record, LinearScale(), sample_rate=1000)
        assert result.shape == (1000, 2)
        assert result.dtype == np.float32
        np.testing.assert_array_almost_equal(result[250], [0.75, 0.75])

    def test_mono(self):
        audio = np.full(100, 0.5, dtype=np.float32)
        record = FadeRecord.create(0.0, 1.0, now=0, duration=50)
        result = apply_fade(audio, record, LinearScale(), sample_rate=1000)
        assert result.shape == (100,)
        assert result[0] == 0.0
        assert result[-1] == 0.5
