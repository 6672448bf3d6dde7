# app/modules/session_transfers/service.py
from typing import List, Optional
from datetime import date, datetime, time
from uuid import UUID, uuid4
from sqlalchemy.orm import Session
import logging

from app.modules.session_offerings.repository import SessionOfferingRepository
from app.shared.database.models import utcnow
from .errors import TransferError, TransferErrorKind
from .executor import TransferExecutor
from .ledger import InMemoryTransferLedger, get_transfer_ledger
from .selector import TransferSelector
from .schemas import (
    TransferRequest, TransferOutcome, TransferSummary, TransferStatus,
    TransferType, SessionTransferResult, ItemStatus
)

logger = logging.getLogger(__name__)


def build_failed_outcome(
    transfer_id: UUID,
    source_branch_id: Optional[UUID],
    target_branch_id: Optional[UUID],
    message: str,
    errors: Optional[List[str]] = None,
    results: Optional[List[SessionTransferResult]] = None,
    transferred_at: Optional[datetime] = None,
    reason: Optional[str] = None,
    notes: Optional[str] = None
) -> TransferOutcome:
    now = utcnow()
    return TransferOutcome(
        success=False,
        message=message,
        transfer_id=transfer_id,
        status=TransferStatus.FAILED,
        source_branch_id=source_branch_id,
        target_branch_id=target_branch_id,
        transferred_at=transferred_at or now,
        completed_at=now,
        summary=None,
        results=results or [],
        errors=errors or [],
        reason=reason,
        notes=notes
    )


class SessionTransferService:
    """
    Moves session offerings between branches.

    validate branch pair -> select -> transfer each item -> summarize ->
    record in the ledger. Every call returns a TransferOutcome; invalid
    requests and unexpected failures come back as FAILED outcomes, and a
    failing item only marks that item FAILED.
    """

    def __init__(
        self,
        db: Session,
        ledger: Optional[InMemoryTransferLedger] = None,
        selector: Optional[TransferSelector] = None,
        executor: Optional[TransferExecutor] = None
    ):
        self.db = db
        self.repository = SessionOfferingRepository(db)
        self.selector = selector or TransferSelector(self.repository)
        self.executor = executor or TransferExecutor(self.repository)
        self.ledger = ledger if ledger is not None else get_transfer_ledger()

    # ==================== VALIDATION ====================

    def validate_branches(self, source_branch_id: Optional[UUID], target_branch_id: Optional[UUID]) -> None:
        if source_branch_id is None:
            raise TransferError.invalid_request("Source branch ID cannot be null")
        if target_branch_id is None:
            raise TransferError.invalid_request("Target branch ID cannot be null")
        if source_branch_id == target_branch_id:
            raise TransferError.invalid_request("Source and target branches cannot be the same")

    def can_transfer_sessions(self, source_branch_id: Optional[UUID], target_branch_id: Optional[UUID]) -> bool:
        try:
            self.validate_branches(source_branch_id, target_branch_id)
            return True
        except TransferError as e:
            logger.warning(f"Cannot transfer sessions from {source_branch_id} to {target_branch_id}: {e.message}")
            return False

    # ==================== TRANSFER ====================

    def transfer_sessions(self, request: TransferRequest) -> TransferOutcome:
        transfer_id = uuid4()
        transferred_at = utcnow()
        results: List[SessionTransferResult] = []

        logger.info(
            f"🔄 Transfer {transfer_id} started: {request.transfer_type} "
            f"from branch {request.source_branch_id} to {request.target_branch_id}"
        )

        try:
            self.validate_branches(request.source_branch_id, request.target_branch_id)
            sessions = self.selector.select(request)

            success_count = 0
            failure_count = 0
            for session in sessions:
                result = self.executor.transfer_one(session, request)
                results.append(result)
                if result.status == ItemStatus.SUCCESS:
                    success_count += 1
                else:
                    failure_count += 1

            if sessions:
                message = f"Transfer completed. {success_count} successful, {failure_count} failed"
            else:
                message = "No sessions found to transfer"

            outcome = self._completed_outcome(
                transfer_id, request, transferred_at, results,
                message=message,
                successful=success_count,
                failed=failure_count
            )

        except TransferError as e:
            logger.error(f"❌ Transfer {transfer_id} rejected ({e.kind.value}): {e.message}")
            outcome = self._failed_outcome(transfer_id, request, transferred_at, results, e)

        except Exception as e:
            error = TransferError(TransferErrorKind.UNEXPECTED_FAILURE, str(e))
            logger.exception(f"❌ Transfer {transfer_id} failed unexpectedly: {error.message}")
            outcome = self._failed_outcome(transfer_id, request, transferred_at, results, error)

        self.ledger.put(transfer_id, outcome)
        logger.info(f"📋 Transfer {transfer_id} finished: {outcome.status.value} - {outcome.message}")
        return outcome

    def transfer_sessions_by_date_range(
        self,
        source_branch_id: UUID,
        target_branch_id: UUID,
        start_date: date,
        end_date: date,
        reason: Optional[str] = None
    ) -> TransferOutcome:
        """DATE_RANGE transfer covering whole days, start 00:00:00 through end 23:59:59"""
        request = TransferRequest(
            source_branch_id=source_branch_id,
            target_branch_id=target_branch_id,
            transfer_type=TransferType.DATE_RANGE,
            start_date=datetime.combine(start_date, time.min),
            end_date=datetime.combine(end_date, time(23, 59, 59)),
            reason=reason,
            emergency_flag=False
        )
        return self.transfer_sessions(request)

    def transfer_sessions_by_ids(
        self,
        source_branch_id: UUID,
        target_branch_id: UUID,
        session_ids: List[UUID],
        reason: Optional[str] = None
    ) -> TransferOutcome:
        request = TransferRequest(
            source_branch_id=source_branch_id,
            target_branch_id=target_branch_id,
            transfer_type=TransferType.SELECTIVE,
            session_ids=session_ids,
            reason=reason,
            emergency_flag=False
        )
        return self.transfer_sessions(request)

    def emergency_transfer(
        self,
        source_branch_id: UUID,
        target_branch_id: UUID,
        reason: str
    ) -> TransferOutcome:
        """Move every active offering and deactivate the originals"""
        logger.warning(
            f"🚨 Emergency transfer from {source_branch_id} to {target_branch_id} - Reason: {reason}"
        )
        request = TransferRequest(
            source_branch_id=source_branch_id,
            target_branch_id=target_branch_id,
            transfer_type=TransferType.EMERGENCY,
            reason=reason,
            emergency_flag=True,
            preserve_original_schedule=False
        )
        return self.transfer_sessions(request)

    def get_transfer_status(self, transfer_id) -> Optional[TransferOutcome]:
        return self.ledger.get(transfer_id)

    # ==================== OUTCOMES ====================

    def _completed_outcome(
        self,
        transfer_id: UUID,
        request: TransferRequest,
        transferred_at: datetime,
        results: List[SessionTransferResult],
        message: str,
        successful: int = 0,
        failed: int = 0
    ) -> TransferOutcome:
        status = TransferStatus.COMPLETED if failed == 0 else TransferStatus.COMPLETED_WITH_ERRORS
        return TransferOutcome(
            success=True,
            message=message,
            transfer_id=transfer_id,
            status=status,
            source_branch_id=request.source_branch_id,
            target_branch_id=request.target_branch_id,
            transferred_at=transferred_at,
            completed_at=utcnow(),
            summary=TransferSummary(
                total_sessions=len(results),
                successful_transfers=successful,
                failed_transfers=failed,
                skipped_sessions=0,
                transfer_type=request.transfer_type
            ),
            results=list(results),
            reason=request.reason,
            notes=request.notes,
            rollback_info=None
        )

    def _failed_outcome(
        self,
        transfer_id: UUID,
        request: TransferRequest,
        transferred_at: datetime,
        results: List[SessionTransferResult],
        error: TransferError
    ) -> TransferOutcome:
        return build_failed_outcome(
            transfer_id,
            request.source_branch_id,
            request.target_branch_id,
            message=f"Transfer failed: {error.message}",
            errors=[error.message],
            results=list(results),
            transferred_at=transferred_at,
            reason=request.reason,
            notes=request.notes
        )
