from app.db.base_class import Base

# Import all models here for Alembic
from app.models.wetland import Wetland
from app.models.sensor_reading import SensorReading
from app.models.user import User
