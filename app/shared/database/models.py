# app/shared/database/models.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    Column, Integer, String, Boolean, DateTime, Text,
    Numeric, ForeignKey, CheckConstraint, Index, Uuid,
    func
)
from sqlalchemy.orm import relationship

from app.config.database import Base


def utcnow() -> datetime:
    """Naive UTC timestamp, the shape stored in DateTime columns"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


# =====================================================
# STATUS (soft delete)
# =====================================================
class RecordStatus:
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    DELETED = "DELETED"


# =====================================================
# TIMESTAMP MIXIN
# =====================================================
class TimestampMixin:
    """Adds created_at and updated_at columns"""
    created_at = Column(DateTime, nullable=False, default=utcnow, server_default=func.current_timestamp())
    updated_at = Column(DateTime, nullable=False, default=utcnow, server_default=func.current_timestamp(), onupdate=utcnow)


# =====================================================
# GLOBAL CATALOG
# =====================================================

class SessionType(Base, TimestampMixin):
    """Catalog of consultation types, global across branches"""
    __tablename__ = "session_types"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(100), nullable=False, unique=True, index=True)
    description = Column(Text)
    default_duration_minutes = Column(Integer, nullable=False)
    is_telemedicine_available = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True)
    status = Column(String(20), nullable=False, default=RecordStatus.ACTIVE)

    # Relationships
    offerings = relationship("SessionOffering", back_populates="session_type", cascade="all, delete-orphan")

    __table_args__ = (
        CheckConstraint("default_duration_minutes > 0", name="chk_session_types_duration_positive"),
    )


# =====================================================
# BRANCH OFFERINGS
# =====================================================

class SessionOffering(Base, TimestampMixin):
    """A doctor's priced session type, bound to exactly one branch"""
    __tablename__ = "session_offerings"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    doctor_id = Column(Uuid, nullable=False, index=True)
    branch_id = Column(Uuid, index=True)
    session_type_id = Column(Uuid, ForeignKey("session_types.id", ondelete="CASCADE"), nullable=False, index=True)
    price = Column(Numeric(10, 2), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    status = Column(String(20), nullable=False, default=RecordStatus.ACTIVE)

    # Relationships
    session_type = relationship("SessionType", back_populates="offerings", lazy="joined")

    __table_args__ = (
        CheckConstraint("price >= 0", name="chk_session_offerings_price_non_negative"),
        Index("idx_session_offerings_doctor_branch", "doctor_id", "branch_id"),
        Index("idx_session_offerings_session_type_branch", "session_type_id", "branch_id"),
    )

    @property
    def session_type_name(self) -> str:
        return self.session_type.name if self.session_type else ""
