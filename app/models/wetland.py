from sqlalchemy import Column, BigInteger, Integer, String, Float, Text, DateTime, JSON
from sqlalchemy.orm import relationship
from app.db.base_class import Base
from app.utils.time_utils import utcnow

# SQLite only autoincrements INTEGER primary keys
IdType = BigInteger().with_variant(Integer, "sqlite")


class Wetland(Base):
    __tablename__ = "wetlands"

    id = Column(IdType, primary_key=True, index=True, autoincrement=True)
    name = Column(String(150), index=True, nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    area = Column(Float, nullable=False)                  # hectares
    type = Column(String(20), nullable=False)             # permanent | seasonal | artificial
    status = Column(String(20), nullable=False)           # healthy | degraded | critical
    description = Column(Text, nullable=False)
    sensors = Column(JSON, nullable=False, default=list)  # E.g.: ["temp_001", "ph_001"]
    last_updated = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    readings = relationship(
        "SensorReading",
        back_populates="wetland",
        cascade="all, delete-orphan",
    )
