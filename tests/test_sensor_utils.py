"""
Unit tests for sensor units, labels and status thresholds.
"""
import random

import pytest

from app.utils.sensor_utils import (
    MONITORED_TYPES,
    SYNTHETIC_RANGES,
    classify_reading,
    label_for,
    synthetic_value,
    unit_for,
)


class TestClassifyReading:

    @pytest.mark.parametrize(
        "value,expected",
        [(6.49, "warning"), (6.5, "normal"), (7.2, "normal"), (8.5, "normal"), (8.51, "warning")],
    )
    def test_ph_thresholds(self, value, expected):
        assert classify_reading("ph", value) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [(4.99, "critical"), (5.0, "warning"), (6.99, "warning"), (7.0, "normal"), (11.0, "normal")],
    )
    def test_dissolved_oxygen_thresholds(self, value, expected):
        assert classify_reading("dissolved_oxygen", value) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [(49.9, "critical"), (50.0, "warning"), (69.9, "warning"), (70.0, "normal")],
    )
    def test_water_quality_thresholds(self, value, expected):
        assert classify_reading("water_quality", value) == expected

    @pytest.mark.parametrize("sensor_type", ["temperature", "vegetation", "pollution"])
    def test_other_types_always_normal(self, sensor_type):
        assert classify_reading(sensor_type, -1000) == "normal"
        assert classify_reading(sensor_type, 1000) == "normal"

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            classify_reading("salinity", 1.0)


class TestUnitsAndLabels:

    def test_units(self):
        assert unit_for("temperature") == "°C"
        assert unit_for("ph") == "pH"
        assert unit_for("dissolved_oxygen") == "mg/L"
        assert unit_for("water_quality") == "WQI"

    def test_unknown_unit(self):
        with pytest.raises(ValueError):
            unit_for("salinity")

    def test_labels(self):
        assert label_for("ph") == "pH Level"
        assert label_for("dissolved_oxygen") == "Dissolved Oxygen"


@pytest.mark.parametrize("sensor_type", MONITORED_TYPES)
def test_synthetic_values_stay_in_range(sensor_type):
    rng = random.Random(42)
    low, span = SYNTHETIC_RANGES[sensor_type]
    for _ in range(200):
        value = synthetic_value(sensor_type, rng)
        assert low <= value <= low + span
