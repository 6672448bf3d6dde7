# app/modules/session_transfers/selector.py
from typing import List
import logging

from app.modules.session_offerings.repository import SessionOfferingRepository
from app.shared.database.models import SessionOffering
from .errors import TransferError
from .schemas import TransferRequest, TransferType

logger = logging.getLogger(__name__)

class TransferSelector:
    """Resolves a transfer request into the offerings it applies to"""

    def __init__(self, repository: SessionOfferingRepository):
        self.repository = repository

    def select(self, request: TransferRequest) -> List[SessionOffering]:
        """
        Query the store for the offerings a request covers.

        Always re-queries. Order is (created_at, id), which is also the
        order items are processed and reported in.

        Raises:
            TransferError(INVALID_REQUEST): missing session ids for
                SELECTIVE, missing dates for DATE_RANGE, unknown type
        """
        transfer_type = request.transfer_type
        source = request.source_branch_id

        if transfer_type == TransferType.BULK:
            return self.repository.find_by_branch_id(source)

        if transfer_type == TransferType.SELECTIVE:
            if not request.session_ids:
                raise TransferError.invalid_request("Session IDs are required for selective transfer")
            found = self.repository.find_by_ids(request.session_ids)
            selected = [o for o in found if o.branch_id == source]
            if len(selected) < len(found):
                logger.info(
                    f"Selective transfer: {len(found) - len(selected)} offering(s) "
                    f"not at branch {source} excluded"
                )
            return selected

        if transfer_type == TransferType.DATE_RANGE:
            if request.start_date is None or request.end_date is None:
                raise TransferError.invalid_request("Start and end dates are required for date range transfer")
            return self.repository.find_by_branch_and_created_between(
                source, request.start_date, request.end_date
            )

        if transfer_type == TransferType.EMERGENCY:
            return [o for o in self.repository.find_by_branch_id(source) if o.is_active]

        raise TransferError.invalid_request(f"Unsupported transfer type: {transfer_type}")
