# app/modules/session_offerings/service.py
from fastapi import HTTPException
from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID
import logging

from .repository import SessionOfferingRepository
from .schemas import SessionOfferingCreate, SessionOfferingUpdate
from app.modules.session_types.repository import SessionTypeRepository
from app.shared.database.models import SessionOffering, RecordStatus
from app.shared.services.doctor_client import DoctorServiceClient
from app.core.auth.dependencies import verify_branch_access
from app.core.auth.schemas import CurrentPrincipal

logger = logging.getLogger(__name__)

class SessionOfferingsService:
    def __init__(self, db: Session, doctor_client: Optional[DoctorServiceClient] = None):
        self.db = db
        self.repository = SessionOfferingRepository(db)
        self.session_types = SessionTypeRepository(db)
        self.doctor_client = doctor_client or DoctorServiceClient()

    def get_offering(self, offering_id: UUID) -> SessionOffering:
        offering = self.repository.get_by_id(offering_id)
        if not offering:
            raise HTTPException(status_code=404, detail=f"Session offering {offering_id} not found")
        return offering

    def create_offering(self, data: SessionOfferingCreate) -> SessionOffering:
        """
        Create an offering for a doctor.

        The session type must exist. The doctor is checked against the
        doctor service when that validation is enabled.
        """
        if not self.session_types.get_by_id(data.session_type_id):
            raise HTTPException(
                status_code=400,
                detail=f"Session type {data.session_type_id} does not exist"
            )

        if not self.doctor_client.validate_doctor_exists(data.doctor_id):
            raise HTTPException(status_code=400, detail=f"Doctor {data.doctor_id} does not exist")

        offering = self.repository.create(data.model_dump())
        logger.info(
            f"✅ Offering created: {offering.id} "
            f"(doctor {offering.doctor_id}, branch {offering.branch_id})"
        )
        return offering

    def update_offering(self, offering_id: UUID, data: SessionOfferingUpdate) -> SessionOffering:
        offering = self.get_offering(offering_id)
        return self.repository.update(offering, data.model_dump(exclude_unset=True))

    def delete_offering(self, offering_id: UUID) -> None:
        offering = self.get_offering(offering_id)
        self.repository.delete(offering)
        logger.info(f"🗑️ Offering deleted: {offering_id}")

    def activate(self, offering_id: UUID) -> SessionOffering:
        offering = self.get_offering(offering_id)
        return self.repository.update(offering, {"is_active": True})

    def deactivate(self, offering_id: UUID) -> SessionOffering:
        offering = self.get_offering(offering_id)
        offering.is_active = False
        return self.repository.save(offering)

    def soft_delete(self, offering_id: UUID) -> SessionOffering:
        offering = self.get_offering(offering_id)
        return self.repository.update(offering, {"status": RecordStatus.DELETED})

    def reactivate(self, offering_id: UUID) -> SessionOffering:
        offering = self.get_offering(offering_id)
        return self.repository.update(offering, {"status": RecordStatus.ACTIVE})

    def get_offerings_by_branch(self, branch_id: UUID, principal: CurrentPrincipal) -> List[SessionOffering]:
        verify_branch_access(principal, branch_id)
        return self.repository.find_by_branch_id(branch_id)
