# app/modules/session_offerings/router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID

from app.config.database import get_db
from app.core.auth.dependencies import require_roles
from app.core.auth.schemas import Roles
from app.shared.services.doctor_client import DoctorServiceClient, get_doctor_client
from .service import SessionOfferingsService
from .schemas import SessionOfferingCreate, SessionOfferingUpdate, SessionOfferingResponse

router = APIRouter()

MANAGERS = [Roles.ADMIN, Roles.BRANCH_MANAGER]
READERS = [Roles.ADMIN, Roles.BRANCH_MANAGER, Roles.DOCTOR, Roles.RECEPTIONIST, Roles.PATIENT]

@router.post("", response_model=SessionOfferingResponse, status_code=status.HTTP_201_CREATED)
def create_offering(
    data: SessionOfferingCreate,
    principal = Depends(require_roles([Roles.ADMIN, Roles.BRANCH_MANAGER, Roles.DOCTOR])),
    db: Session = Depends(get_db),
    doctor_client: DoctorServiceClient = Depends(get_doctor_client)
):
    """Publish a doctor's priced session type at a branch"""
    return SessionOfferingsService(db, doctor_client).create_offering(data)

@router.get("/health")
def session_offerings_health():
    """Health check of the session offerings module"""
    return {
        "service": "session-offerings",
        "status": "healthy",
        "version": "1.0.0",
        "features": [
            "Per-branch session offerings",
            "Optional doctor validation",
            "Soft delete and reactivation"
        ]
    }

@router.get("/branch/{branch_id}", response_model=List[SessionOfferingResponse])
def get_offerings_by_branch(
    branch_id: UUID,
    principal = Depends(require_roles(READERS)),
    db: Session = Depends(get_db)
):
    """Offerings of one branch, oldest first"""
    return SessionOfferingsService(db).get_offerings_by_branch(branch_id, principal)

@router.get("/{offering_id}", response_model=SessionOfferingResponse)
def get_offering(
    offering_id: UUID,
    principal = Depends(require_roles(READERS)),
    db: Session = Depends(get_db)
):
    return SessionOfferingsService(db).get_offering(offering_id)

@router.put("/{offering_id}", response_model=SessionOfferingResponse)
def update_offering(
    offering_id: UUID,
    data: SessionOfferingUpdate,
    principal = Depends(require_roles(MANAGERS)),
    db: Session = Depends(get_db)
):
    return SessionOfferingsService(db).update_offering(offering_id, data)

@router.delete("/{offering_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_offering(
    offering_id: UUID,
    principal = Depends(require_roles(MANAGERS)),
    db: Session = Depends(get_db)
):
    SessionOfferingsService(db).delete_offering(offering_id)

@router.post("/{offering_id}/activate", response_model=SessionOfferingResponse)
def activate_offering(
    offering_id: UUID,
    principal = Depends(require_roles(MANAGERS)),
    db: Session = Depends(get_db)
):
    return SessionOfferingsService(db).activate(offering_id)

@router.post("/{offering_id}/deactivate", response_model=SessionOfferingResponse)
def deactivate_offering(
    offering_id: UUID,
    principal = Depends(require_roles(MANAGERS)),
    db: Session = Depends(get_db)
):
    return SessionOfferingsService(db).deactivate(offering_id)

@router.post("/{offering_id}/soft-delete", response_model=SessionOfferingResponse)
def soft_delete_offering(
    offering_id: UUID,
    principal = Depends(require_roles(MANAGERS)),
    db: Session = Depends(get_db)
):
    return SessionOfferingsService(db).soft_delete(offering_id)

@router.post("/{offering_id}/reactivate", response_model=SessionOfferingResponse)
def reactivate_offering(
    offering_id: UUID,
    principal = Depends(require_roles(MANAGERS)),
    db: Session = Depends(get_db)
):
    return SessionOfferingsService(db).reactivate(offering_id)
