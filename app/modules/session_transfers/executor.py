# app/modules/session_transfers/executor.py
import logging

from app.modules.session_offerings.repository import SessionOfferingRepository
from app.shared.database.models import SessionOffering
from .errors import TransferError, TransferErrorKind
from .schemas import TransferRequest, SessionTransferResult, ItemStatus

logger = logging.getLogger(__name__)

SUCCESS_REASON = "Session transferred successfully"

class TransferExecutor:
    """Moves one offering to the target branch"""

    def __init__(self, repository: SessionOfferingRepository):
        self.repository = repository

    def transfer_one(self, offering: SessionOffering, request: TransferRequest) -> SessionTransferResult:
        """
        Copy the offering to the target branch, then dispose of the source.

        The copy always gets a new id. The source is kept when
        preserve_original_schedule is set, deactivated when emergency_flag
        is set, and deleted otherwise.

        Never raises: a failure rolls back the unit of work and is returned
        as a FAILED result. A copy committed before a failed disposal stays.
        """
        # Read before any commit or rollback can expire the instance
        session_id = offering.id
        session_title = offering.session_type_name

        try:
            copy = self.repository.create({
                "doctor_id": offering.doctor_id,
                "branch_id": request.target_branch_id,
                "session_type_id": offering.session_type_id,
                "price": offering.price,
                "is_active": offering.is_active,
            })
            new_session_id = copy.id

            if not request.preserve_original_schedule:
                if request.emergency_flag:
                    offering.is_active = False
                    self.repository.save(offering)
                else:
                    self.repository.delete(offering)

        except Exception as e:
            self.repository.rollback()
            error = TransferError(TransferErrorKind.ITEM_TRANSFER_FAILURE, str(e))
            logger.error(f"❌ Failed to transfer session {session_id}: {error.message}")
            return SessionTransferResult(
                session_id=session_id,
                session_title=session_title,
                status=ItemStatus.FAILED,
                reason=f"Transfer failed: {error.message}",
                original_branch_id=request.source_branch_id,
                new_branch_id=request.target_branch_id
            )

        return SessionTransferResult(
            session_id=session_id,
            session_title=session_title,
            status=ItemStatus.SUCCESS,
            reason=SUCCESS_REASON,
            new_session_id=new_session_id,
            original_branch_id=request.source_branch_id,
            new_branch_id=request.target_branch_id
        )
