# app/modules/session_transfers/router.py
from fastapi import APIRouter, Body, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import datetime
from uuid import UUID, uuid4
import logging

from app.config.database import get_db
from app.core.auth.dependencies import require_roles
from app.core.auth.schemas import Roles
from .ledger import InMemoryTransferLedger, get_transfer_ledger
from .service import SessionTransferService, build_failed_outcome
from .schemas import TransferRequest, TransferOutcome, TransferStatus

logger = logging.getLogger(__name__)

router = APIRouter()

TRANSFER_ROLES = [Roles.ADMIN, Roles.BRANCH_MANAGER]

HTTP_STATUS_BY_TRANSFER_STATUS = {
    TransferStatus.COMPLETED: status.HTTP_200_OK,
    TransferStatus.COMPLETED_WITH_ERRORS: status.HTTP_206_PARTIAL_CONTENT,
    TransferStatus.FAILED: status.HTTP_400_BAD_REQUEST,
}

def http_status_for(transfer_status: TransferStatus) -> int:
    """Anything without an explicit mapping (IN_PROGRESS) is 202"""
    return HTTP_STATUS_BY_TRANSFER_STATUS.get(transfer_status, status.HTTP_202_ACCEPTED)

def _server_error(response: Response, source: UUID, target: UUID, message: str) -> TransferOutcome:
    response.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return build_failed_outcome(uuid4(), source, target, message=message, errors=[message])

@router.post("", response_model=TransferOutcome)
def transfer_sessions(
    request: TransferRequest,
    response: Response,
    principal = Depends(require_roles(TRANSFER_ROLES)),
    db: Session = Depends(get_db),
    ledger: InMemoryTransferLedger = Depends(get_transfer_ledger)
):
    """
    Transfer session offerings between branches

    **Transfer types:**
    - BULK: every offering of the source branch
    - SELECTIVE: the given `sessionIds` that belong to the source branch
    - DATE_RANGE: offerings created between `startDate` and `endDate`
    - EMERGENCY: every active offering; originals are deactivated

    **Response codes:**
    - 200: completed
    - 206: completed with item failures
    - 400: invalid request, nothing transferred
    """
    logger.info(
        f"Transfer request from {principal.user_id}: {request.transfer_type} "
        f"{request.source_branch_id} -> {request.target_branch_id}"
    )
    try:
        outcome = SessionTransferService(db, ledger).transfer_sessions(request)
    except Exception as e:
        logger.exception(f"Session transfer failed: {e}")
        return _server_error(
            response, request.source_branch_id, request.target_branch_id,
            f"Internal server error: {e}"
        )

    response.status_code = http_status_for(outcome.status)
    return outcome

@router.post("/by-date-range", response_model=TransferOutcome)
def transfer_sessions_by_date_range(
    response: Response,
    source_branch_id: UUID = Query(..., alias="sourceBranchId"),
    target_branch_id: UUID = Query(..., alias="targetBranchId"),
    start_date: datetime = Query(..., alias="startDate"),
    end_date: datetime = Query(..., alias="endDate"),
    reason: Optional[str] = Query(None),
    principal = Depends(require_roles(TRANSFER_ROLES)),
    db: Session = Depends(get_db),
    ledger: InMemoryTransferLedger = Depends(get_transfer_ledger)
):
    """Transfer offerings created on the days between startDate and endDate, inclusive"""
    try:
        return SessionTransferService(db, ledger).transfer_sessions_by_date_range(
            source_branch_id, target_branch_id, start_date.date(), end_date.date(), reason
        )
    except Exception as e:
        logger.exception(f"Date range session transfer failed: {e}")
        return _server_error(response, source_branch_id, target_branch_id, f"Transfer failed: {e}")

@router.post("/by-ids", response_model=TransferOutcome)
def transfer_sessions_by_ids(
    response: Response,
    session_ids: List[UUID] = Body(...),
    source_branch_id: UUID = Query(..., alias="sourceBranchId"),
    target_branch_id: UUID = Query(..., alias="targetBranchId"),
    reason: Optional[str] = Query(None),
    principal = Depends(require_roles(TRANSFER_ROLES)),
    db: Session = Depends(get_db),
    ledger: InMemoryTransferLedger = Depends(get_transfer_ledger)
):
    """Transfer specific offerings; ids not at the source branch are ignored"""
    logger.info(f"Transferring {len(session_ids)} specific sessions from {source_branch_id} to {target_branch_id}")
    try:
        return SessionTransferService(db, ledger).transfer_sessions_by_ids(
            source_branch_id, target_branch_id, session_ids, reason
        )
    except Exception as e:
        logger.exception(f"Selective session transfer failed: {e}")
        return _server_error(response, source_branch_id, target_branch_id, f"Transfer failed: {e}")

@router.post("/emergency", response_model=TransferOutcome)
def emergency_transfer(
    response: Response,
    source_branch_id: UUID = Query(..., alias="sourceBranchId"),
    target_branch_id: UUID = Query(..., alias="targetBranchId"),
    reason: str = Query(..., min_length=1),
    principal = Depends(require_roles([Roles.ADMIN])),
    db: Session = Depends(get_db),
    ledger: InMemoryTransferLedger = Depends(get_transfer_ledger)
):
    """
    Emergency transfer of every active offering

    Originals stay at the source branch, deactivated. ADMIN only.
    """
    try:
        return SessionTransferService(db, ledger).emergency_transfer(
            source_branch_id, target_branch_id, reason
        )
    except Exception as e:
        logger.exception(f"Emergency session transfer failed: {e}")
        return _server_error(response, source_branch_id, target_branch_id, f"Emergency transfer failed: {e}")

@router.get("/health")
def session_transfers_health():
    """Health check of the session transfers module"""
    return {
        "service": "session-transfers",
        "status": "healthy",
        "version": "1.0.0",
        "features": [
            "Bulk, selective, date range and emergency transfers",
            "Per-session failure isolation",
            "Transfer status lookup"
        ]
    }

@router.get("/status/{transfer_id}", response_model=TransferOutcome)
def get_transfer_status(
    transfer_id: str,
    principal = Depends(require_roles(TRANSFER_ROLES)),
    db: Session = Depends(get_db),
    ledger: InMemoryTransferLedger = Depends(get_transfer_ledger)
):
    outcome = SessionTransferService(db, ledger).get_transfer_status(transfer_id)
    if outcome is None:
        raise HTTPException(status_code=404, detail=f"Transfer {transfer_id} not found")
    return outcome

@router.get("/eligibility", response_model=bool)
def can_transfer_sessions(
    source_branch_id: UUID = Query(..., alias="sourceBranchId"),
    target_branch_id: UUID = Query(..., alias="targetBranchId"),
    principal = Depends(require_roles(TRANSFER_ROLES)),
    db: Session = Depends(get_db),
    ledger: InMemoryTransferLedger = Depends(get_transfer_ledger)
):
    """Whether a transfer between the two branches would pass validation"""
    return SessionTransferService(db, ledger).can_transfer_sessions(source_branch_id, target_branch_id)
