"""Tests for FaderConfig and the global default config."""

import pytest

from volume_fader import FaderConfig, InterpolationMode, InvalidArgument, get_global_fader_config, set_global_fader_config
from volume_fader.core.mixins import FaderConfigMixin


class TestFaderConfig:
    """Test suite for FaderConfig."""

    def test_default_initialization(self):
        """Test default values."""
        config = FaderConfig()
        assert config.fade_duration == 500
        assert config.update_interval == 50
        assert config.dynamic_range == 60
        assert config.interpolation == InterpolationMode.TIME
        assert config.strict is True

    def test_derived_properties(self):
        config = FaderConfig(fade_duration=1000, update_interval=40)
        assert config.fade_duration_seconds == 1.0
        assert config.update_interval_seconds == pytest.approx(0.04)
        assert config.steps_per_fade == 25

    def test_steps_per_fade_at_least_one(self):
        assert FaderConfig(fade_duration=10, update_interval=50).steps_per_fade == 1

    @pytest.mark.parametrize("field", ["fade_duration", "update_interval", "dynamic_range"])
    @pytest.mark.parametrize("value", [0, -1, float("nan"), float("inf"), "500"])
    def test_positive_validation(self, field, value):
        """Test that durations and range must be finite and positive."""
        with pytest.raises(InvalidArgument):
            FaderConfig(**{field: value})

    def test_interpolation_normalization(self):
        """Test that the mode is accepted by name or value."""
        assert FaderConfig(interpolation="increment").interpolation == InterpolationMode.INCREMENT
        assert FaderConfig(interpolation=1).interpolation == InterpolationMode.INCREMENT
        with pytest.raises(InvalidArgument):
            FaderConfig(interpolation="bogus")
        with pytest.raises(InvalidArgument):
            FaderConfig(interpolation=7)

    def test_strict_must_be_bool(self):
        with pytest.raises(InvalidArgument):
            FaderConfig(strict="yes")


class TestGlobalConfig:
    """Tests for the global default config."""

    def test_set_and_get(self):
        config = FaderConfig(fade_duration=1234)
        set_global_fader_config(config)
        assert get_global_fader_config() is config

    def test_set_rejects_other_types(self):
        with pytest.raises(InvalidArgument):
            set_global_fader_config({"fade_duration": 100})

    def test_mixin_follows_global(self):
        """Test that a mixin without config tracks the global default."""
        obj = FaderConfigMixin()
        config = FaderConfig(update_interval=10)
        set_global_fader_config(config)
        assert obj.config is config

    def test_mixin_explicit_config(self):
        config = FaderConfig(update_interval=10)
        obj = FaderConfigMixin(config=config)
        set_global_fader_config(FaderConfig())
        assert obj.config is config

    def test_mixin_rejects_other_types(self):
        with pytest.raises(InvalidArgument):
            FaderConfigMixin(config="fast")
