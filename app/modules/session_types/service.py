# app/modules/session_types/service.py
from fastapi import HTTPException
from sqlalchemy.orm import Session
from uuid import UUID
import logging

from .repository import SessionTypeRepository
from .schemas import SessionTypeCreate, SessionTypeUpdate
from app.shared.database.models import SessionType, RecordStatus

logger = logging.getLogger(__name__)

class SessionTypesService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = SessionTypeRepository(db)

    def get_session_type(self, session_type_id: UUID) -> SessionType:
        session_type = self.repository.get_by_id(session_type_id)
        if not session_type:
            raise HTTPException(status_code=404, detail=f"Session type {session_type_id} not found")
        return session_type

    def create_session_type(self, data: SessionTypeCreate) -> SessionType:
        if self.repository.exists_by_name(data.name):
            raise HTTPException(status_code=409, detail=f"Session type '{data.name}' already exists")

        session_type = self.repository.create(data.model_dump())
        logger.info(f"✅ Session type created: {session_type.name} ({session_type.id})")
        return session_type

    def update_session_type(self, session_type_id: UUID, data: SessionTypeUpdate) -> SessionType:
        session_type = self.get_session_type(session_type_id)

        if data.name and data.name.lower() != session_type.name.lower():
            if self.repository.exists_by_name(data.name):
                raise HTTPException(status_code=409, detail=f"Session type '{data.name}' already exists")

        return self.repository.update(session_type, data.model_dump(exclude_unset=True))

    def delete_session_type(self, session_type_id: UUID) -> None:
        session_type = self.get_session_type(session_type_id)
        self.repository.delete(session_type)
        logger.info(f"🗑️ Session type deleted: {session_type_id}")

    def activate(self, session_type_id: UUID) -> SessionType:
        session_type = self.get_session_type(session_type_id)
        return self.repository.update(session_type, {"is_active": True})

    def deactivate(self, session_type_id: UUID) -> SessionType:
        """Deactivating a type also deactivates every offering built on it"""
        session_type = self.get_session_type(session_type_id)
        return self.repository.deactivate_with_offerings(session_type)

    def soft_delete(self, session_type_id: UUID) -> SessionType:
        session_type = self.get_session_type(session_type_id)
        return self.repository.update(session_type, {"status": RecordStatus.DELETED})

    def reactivate(self, session_type_id: UUID) -> SessionType:
        session_type = self.get_session_type(session_type_id)
        return self.repository.update(session_type, {"status": RecordStatus.ACTIVE})

    def exists_by_name(self, name: str) -> bool:
        return self.repository.exists_by_name(name)
