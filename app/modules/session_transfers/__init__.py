# app/modules/session_transfers/__init__.py
"""
Session Transfers Module - moving offerings between branches

Flow:
1. Validate the branch pair
2. Select offerings (BULK, SELECTIVE, DATE_RANGE, EMERGENCY)
3. Copy each offering to the target, then keep, deactivate or delete the source
4. Summarize and record the outcome for later status lookups

Architecture:
- router.py: transfer endpoints and HTTP status mapping
- service.py: orchestration and outcome assembly
- selector.py: which offerings a request covers
- executor.py: one offering at a time, failures isolated
- ledger.py: transfer id -> outcome store
- errors.py: TransferError and its kinds
- schemas.py: request/outcome models
"""

from .router import router
from .service import SessionTransferService
from .ledger import InMemoryTransferLedger, get_transfer_ledger
from .errors import TransferError, TransferErrorKind

__all__ = [
    "router",
    "SessionTransferService",
    "InMemoryTransferLedger",
    "get_transfer_ledger",
    "TransferError",
    "TransferErrorKind"
]
