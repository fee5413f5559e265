"""SQLAlchemy models for database persistence."""
from sqlalchemy import Column, String, Float, DateTime, JSON
from airguard.persistence.db import Base
from datetime import datetime
import uuid


class SavedMissionModel(Base):
    """Saved mission database model."""
    __tablename__ = "saved_missions"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=datetime.now, nullable=False)
    path = Column(JSON, nullable=False, default=list)  # [{"lat", "lng"}, ...]
    settings = Column(JSON, nullable=False, default=dict)  # {"altitude", "model"}
    risk_score = Column(Float, nullable=False, default=0.0)
