# app/modules/session_types/repository.py
from sqlalchemy.orm import Session
from sqlalchemy import func
from typing import Any, Dict, Optional
from uuid import UUID

from app.shared.database.models import SessionType, SessionOffering, RecordStatus

class SessionTypeRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, session_type_id: UUID) -> Optional[SessionType]:
        return self.db.query(SessionType).filter(SessionType.id == session_type_id).first()

    def get_by_name(self, name: str) -> Optional[SessionType]:
        """Case-insensitive lookup"""
        return self.db.query(SessionType).filter(
            func.lower(SessionType.name) == name.lower()
        ).first()

    def exists_by_name(self, name: str) -> bool:
        return self.get_by_name(name) is not None

    def create(self, data: Dict[str, Any]) -> SessionType:
        session_type = SessionType(**data)
        self.db.add(session_type)
        self.db.commit()
        self.db.refresh(session_type)
        return session_type

    def update(self, session_type: SessionType, updates: Dict[str, Any]) -> SessionType:
        for key, value in updates.items():
            if value is not None and hasattr(session_type, key):
                setattr(session_type, key, value)
        self.db.commit()
        self.db.refresh(session_type)
        return session_type

    def delete(self, session_type: SessionType) -> None:
        self.db.delete(session_type)
        self.db.commit()

    def deactivate_with_offerings(self, session_type: SessionType) -> SessionType:
        """Deactivate the type and every offering that uses it, in one commit"""
        session_type.is_active = False
        self.db.query(SessionOffering).filter(
            SessionOffering.session_type_id == session_type.id
        ).update(
            {SessionOffering.is_active: False, SessionOffering.status: RecordStatus.INACTIVE},
            synchronize_session=False
        )
        self.db.commit()
        self.db.refresh(session_type)
        return session_type
