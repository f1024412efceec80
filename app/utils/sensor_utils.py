"""
Sensor helpers: units, labels and the fixed status thresholds applied when a
reading is created.
"""
import random
from typing import Optional

SENSOR_TYPES = (
    "water_quality",
    "vegetation",
    "pollution",
    "temperature",
    "ph",
    "dissolved_oxygen",
)

# Types the dashboard charts and the generator produces
MONITORED_TYPES = ("temperature", "ph", "dissolved_oxygen", "water_quality")

SENSOR_UNITS = {
    "temperature": "°C",
    "ph": "pH",
    "dissolved_oxygen": "mg/L",
    "water_quality": "WQI",
    "vegetation": "NDVI",
    "pollution": "µg/L",
}

SENSOR_LABELS = {
    "temperature": "Temperature",
    "ph": "pH Level",
    "dissolved_oxygen": "Dissolved Oxygen",
    "water_quality": "Water Quality Index",
    "vegetation": "Vegetation",
    "pollution": "Pollution",
}

# (low, span) for uniform synthetic values: low + random() * span
SYNTHETIC_RANGES = {
    "temperature": (20.0, 15.0),
    "ph": (6.0, 3.0),
    "dissolved_oxygen": (4.0, 8.0),
    "water_quality": (40.0, 50.0),
}


def unit_for(sensor_type: str) -> str:
    try:
        return SENSOR_UNITS[sensor_type]
    except KeyError:
        raise ValueError(f"Unknown sensor type: {sensor_type}")


def label_for(sensor_type: str) -> str:
    return SENSOR_LABELS.get(sensor_type, sensor_type)


def classify_reading(sensor_type: str, value: float) -> str:
    """Derive normal/warning/critical from the fixed thresholds."""
    if sensor_type == "ph":
        return "warning" if value < 6.5 or value > 8.5 else "normal"
    if sensor_type == "dissolved_oxygen":
        if value < 5:
            return "critical"
        return "warning" if value < 7 else "normal"
    if sensor_type == "water_quality":
        if value < 50:
            return "critical"
        return "warning" if value < 70 else "normal"
    if sensor_type not in SENSOR_TYPES:
        raise ValueError(f"Unknown sensor type: {sensor_type}")
    return "normal"


def synthetic_value(sensor_type: str, rng: Optional[random.Random] = None) -> float:
    rng = rng or random
    low, span = SYNTHETIC_RANGES[sensor_type]
    return low + rng.random() * span
