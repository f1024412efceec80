from sqlalchemy import Column, Float, String, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from app.db.base_class import Base
from app.models.wetland import IdType
from app.utils.time_utils import utcnow


class SensorReading(Base):
    __tablename__ = "sensor_readings"

    id = Column(IdType, primary_key=True, index=True, autoincrement=True)
    wetland_id = Column(IdType, ForeignKey("wetlands.id", ondelete="CASCADE"), nullable=False, index=True)
    sensor_type = Column(String(30), nullable=False)   # E.g.: "temperature", "ph", "dissolved_oxygen"
    value = Column(Float, nullable=False)
    unit = Column(String(10), nullable=False)          # E.g.: "°C", "pH", "mg/L"
    timestamp = Column(DateTime, default=utcnow, index=True, nullable=False)
    status = Column(String(10), nullable=False)        # normal | warning | critical

    wetland = relationship("Wetland", back_populates="readings")


Index("idx_sensor_readings_wetland_time", SensorReading.wetland_id, SensorReading.timestamp)
