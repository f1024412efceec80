from app.models.wetland import Wetland
from app.models.sensor_reading import SensorReading
from app.models.user import User

__all__ = [
    "Wetland",
    "SensorReading",
    "User",
]
