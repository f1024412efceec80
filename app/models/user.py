from sqlalchemy import Column, String, DateTime
from app.db.base_class import Base
from app.models.wetland import IdType
from app.utils.time_utils import utcnow


class User(Base):
    __tablename__ = "users"

    id = Column(IdType, primary_key=True, index=True, autoincrement=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    name = Column(String(150), nullable=False)
    role = Column(String(20), nullable=False, default="public")    # admin | researcher | public
    organization = Column(String(255), nullable=True)
    password_hash = Column(String(255), nullable=False)
    status = Column(String(10), nullable=False, default="active")  # active | inactive
    created_at = Column(DateTime, default=utcnow, nullable=False)
    last_login = Column(DateTime, nullable=True)
