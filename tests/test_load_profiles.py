"""
Unit tests for business categories and load shapes.
"""

import logging

import pytest

from bess_sizing.load_profiles import (
    LOAD_SHAPES,
    BusinessLoadShape,
    BusinessType,
    SeasonalProfile,
    get_load_shape,
)


class TestBusinessType:
    """Test category parsing."""

    def test_every_category_has_a_shape(self):
        assert set(LOAD_SHAPES) == set(BusinessType)

    def test_parse_by_value_and_name(self):
        assert BusinessType.parse("Hähnchenstall") is BusinessType.HAEHNCHENSTALL
        assert BusinessType.parse("HOTEL") is BusinessType.HOTEL
        assert BusinessType.parse(BusinessType.SCHULE) is BusinessType.SCHULE

    def test_unknown_falls_back_to_default(self, caplog):
        """Unknown categories use Allgemein and log a warning."""
        with caplog.at_level(logging.WARNING):
            assert BusinessType.parse("Brauerei") is BusinessType.ALLGEMEIN
        assert "Brauerei" in caplog.text

    def test_none_falls_back_to_default(self):
        assert BusinessType.parse(None) is BusinessType.default()


class TestLoadShapes:
    """Test the load shape table."""

    def test_shapes_are_well_formed(self):
        for shape in LOAD_SHAPES.values():
            assert len(shape.hourly_multipliers) == 24
            assert min(shape.hourly_multipliers) >= 0
            assert shape.weekend_factor >= 0
            assert shape.description

    def test_seasonal_modes(self):
        assert get_load_shape("Ferkelzucht").seasonal_profile == SeasonalProfile.WINTER_PEAK
        assert get_load_shape("Hotel").seasonal_profile == SeasonalProfile.SUMMER_PEAK
        assert get_load_shape("Schule").seasonal_profile == SeasonalProfile.SUMMER_LOW
        assert get_load_shape("Allgemein").seasonal_profile == SeasonalProfile.NONE

    def test_unknown_category_uses_default_shape(self):
        assert get_load_shape("unknown") is LOAD_SHAPES[BusinessType.ALLGEMEIN]

    def test_rejects_wrong_length(self):
        with pytest.raises(ValueError, match="24 hourly multipliers"):
            BusinessLoadShape((1.0,) * 23, 1.0, SeasonalProfile.NONE)

    def test_rejects_negative_values(self):
        with pytest.raises(ValueError, match="non-negative"):
            BusinessLoadShape((1.0,) * 23 + (-0.1,), 1.0, SeasonalProfile.NONE)
        with pytest.raises(ValueError, match="Weekend factor"):
            BusinessLoadShape((1.0,) * 24, -1.0, SeasonalProfile.NONE)
