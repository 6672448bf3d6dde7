# app/modules/session_types/router.py
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from uuid import UUID

from app.config.database import get_db
from app.core.auth.dependencies import require_roles
from app.core.auth.schemas import Roles
from .service import SessionTypesService
from .schemas import SessionTypeCreate, SessionTypeUpdate, SessionTypeResponse

router = APIRouter()

ADMIN_ONLY = [Roles.ADMIN]
READERS = [Roles.ADMIN, Roles.DOCTOR, Roles.PATIENT]

@router.post("", response_model=SessionTypeResponse, status_code=status.HTTP_201_CREATED)
def create_session_type(
    data: SessionTypeCreate,
    principal = Depends(require_roles(ADMIN_ONLY)),
    db: Session = Depends(get_db)
):
    """Add a consultation type to the global catalog (name is unique, case-insensitive)"""
    return SessionTypesService(db).create_session_type(data)

@router.get("/exists-by-name", response_model=bool)
def exists_by_name(
    name: str = Query(..., min_length=1),
    principal = Depends(require_roles(ADMIN_ONLY)),
    db: Session = Depends(get_db)
):
    return SessionTypesService(db).exists_by_name(name)

@router.get("/health")
def session_types_health():
    """Health check of the session types module"""
    return {
        "service": "session-types",
        "status": "healthy",
        "version": "1.0.0",
        "features": [
            "Global consultation type catalog",
            "Activation and deactivation cascading to offerings",
            "Soft delete and reactivation"
        ]
    }

@router.get("/{session_type_id}", response_model=SessionTypeResponse)
def get_session_type(
    session_type_id: UUID,
    principal = Depends(require_roles(READERS)),
    db: Session = Depends(get_db)
):
    return SessionTypesService(db).get_session_type(session_type_id)

@router.put("/{session_type_id}", response_model=SessionTypeResponse)
def update_session_type(
    session_type_id: UUID,
    data: SessionTypeUpdate,
    principal = Depends(require_roles(ADMIN_ONLY)),
    db: Session = Depends(get_db)
):
    return SessionTypesService(db).update_session_type(session_type_id, data)

@router.delete("/{session_type_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_session_type(
    session_type_id: UUID,
    principal = Depends(require_roles(ADMIN_ONLY)),
    db: Session = Depends(get_db)
):
    """Hard delete; offerings of this type are removed with it"""
    SessionTypesService(db).delete_session_type(session_type_id)

@router.post("/{session_type_id}/activate", response_model=SessionTypeResponse)
def activate_session_type(
    session_type_id: UUID,
    principal = Depends(require_roles(ADMIN_ONLY)),
    db: Session = Depends(get_db)
):
    return SessionTypesService(db).activate(session_type_id)

@router.post("/{session_type_id}/deactivate", response_model=SessionTypeResponse)
def deactivate_session_type(
    session_type_id: UUID,
    principal = Depends(require_roles(ADMIN_ONLY)),
    db: Session = Depends(get_db)
):
    """Deactivate the type and all offerings that use it"""
    return SessionTypesService(db).deactivate(session_type_id)

@router.post("/{session_type_id}/soft-delete", response_model=SessionTypeResponse)
def soft_delete_session_type(
    session_type_id: UUID,
    principal = Depends(require_roles(ADMIN_ONLY)),
    db: Session = Depends(get_db)
):
    return SessionTypesService(db).soft_delete(session_type_id)

@router.post("/{session_type_id}/reactivate", response_model=SessionTypeResponse)
def reactivate_session_type(
    session_type_id: UUID,
    principal = Depends(require_roles(ADMIN_ONLY)),
    db: Session = Depends(get_db)
):
    return SessionTypesService(db).reactivate(session_type_id)
