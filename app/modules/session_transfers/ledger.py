# app/modules/session_transfers/ledger.py
import threading
from typing import Dict, Optional, Union
from uuid import UUID

from .schemas import TransferOutcome


class InMemoryTransferLedger:
    """
    Process-lifetime store of transfer outcomes keyed by transfer id.

    Outcomes are immutable, so `get` hands back the stored object itself.
    Nothing is evicted and nothing survives a restart.
    """

    def __init__(self):
        self._outcomes: Dict[UUID, TransferOutcome] = {}
        self._lock = threading.Lock()

    def put(self, transfer_id: UUID, outcome: TransferOutcome) -> None:
        with self._lock:
            self._outcomes[transfer_id] = outcome

    def get(self, transfer_id: Union[str, UUID]) -> Optional[TransferOutcome]:
        """None for unknown ids and for strings that are not UUIDs"""
        if not isinstance(transfer_id, UUID):
            try:
                transfer_id = UUID(str(transfer_id))
            except ValueError:
                return None
        with self._lock:
            return self._outcomes.get(transfer_id)

    def clear(self) -> None:
        with self._lock:
            self._outcomes.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._outcomes)


_ledger = InMemoryTransferLedger()

def get_transfer_ledger() -> InMemoryTransferLedger:
    """FastAPI dependency; one ledger per process"""
    return _ledger
