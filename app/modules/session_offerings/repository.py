# app/modules/session_offerings/repository.py
from sqlalchemy.orm import Session
from sqlalchemy import and_
from typing import Any, Dict, Iterable, List, Optional
from datetime import datetime
from uuid import UUID

from app.shared.database.models import SessionOffering

class SessionOfferingRepository:
    """
    Persistence for session offerings.

    Every multi-row lookup is ordered by (created_at, id) so callers that
    iterate the result (transfers in particular) see a stable order.
    """

    def __init__(self, db: Session):
        self.db = db

    def _ordered(self, query):
        return query.order_by(SessionOffering.created_at, SessionOffering.id)

    def get_by_id(self, offering_id: UUID) -> Optional[SessionOffering]:
        return self.db.query(SessionOffering).filter(SessionOffering.id == offering_id).first()

    def find_by_branch_id(self, branch_id: UUID) -> List[SessionOffering]:
        return self._ordered(
            self.db.query(SessionOffering).filter(SessionOffering.branch_id == branch_id)
        ).all()

    def find_by_ids(self, offering_ids: Iterable[UUID]) -> List[SessionOffering]:
        ids = list(offering_ids)
        if not ids:
            return []
        return self._ordered(
            self.db.query(SessionOffering).filter(SessionOffering.id.in_(ids))
        ).all()

    def find_by_branch_and_created_between(
        self,
        branch_id: UUID,
        start: datetime,
        end: datetime
    ) -> List[SessionOffering]:
        """Offerings of a branch created inside [start, end], both ends inclusive"""
        return self._ordered(
            self.db.query(SessionOffering).filter(
                and_(
                    SessionOffering.branch_id == branch_id,
                    SessionOffering.created_at >= start,
                    SessionOffering.created_at <= end
                )
            )
        ).all()

    def create(self, data: Dict[str, Any]) -> SessionOffering:
        offering = SessionOffering(**data)
        self.db.add(offering)
        self.db.commit()
        self.db.refresh(offering)
        return offering

    def save(self, offering: SessionOffering) -> SessionOffering:
        self.db.add(offering)
        self.db.commit()
        self.db.refresh(offering)
        return offering

    def update(self, offering: SessionOffering, updates: Dict[str, Any]) -> SessionOffering:
        for key, value in updates.items():
            if value is not None and hasattr(offering, key):
                setattr(offering, key, value)
        return self.save(offering)

    def delete(self, offering: SessionOffering) -> None:
        self.db.delete(offering)
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
