# app/modules/session_transfers/schemas.py
from pydantic import ConfigDict, Field, field_validator, model_validator
from typing import List, Optional
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID

from app.shared.schemas.common import BaseResponse, CamelModel


class TransferType(str, Enum):
    BULK = "BULK"
    SELECTIVE = "SELECTIVE"
    EMERGENCY = "EMERGENCY"
    DATE_RANGE = "DATE_RANGE"


class TransferStatus(str, Enum):
    COMPLETED = "COMPLETED"
    COMPLETED_WITH_ERRORS = "COMPLETED_WITH_ERRORS"
    FAILED = "FAILED"
    # Reserved; the synchronous workflow never produces it
    IN_PROGRESS = "IN_PROGRESS"


class ItemStatus(str, Enum):
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"
    SKIPPED = "SKIPPED"


class TransferRequest(CamelModel):
    """
    What to move and how.

    Branch ids are optional at this level so that a missing id reaches the
    transfer service and comes back as a FAILED outcome instead of a
    validation error.
    """
    model_config = ConfigDict(json_schema_extra={
        "example": {
            "sourceBranchId": "0b6f3f0e-7f55-4d2a-9a51-3f9d1c2b8a10",
            "targetBranchId": "9c1e2d3f-4a5b-4c6d-8e7f-102132435465",
            "transferType": "SELECTIVE",
            "sessionIds": ["3fa85f64-5717-4562-b3fc-2c963f66afa6"],
            "reason": "Doctor relocated",
            "preserveOriginalSchedule": False
        }
    })

    source_branch_id: Optional[UUID] = Field(None, description="Branch the offerings leave")
    target_branch_id: Optional[UUID] = Field(None, description="Branch the offerings go to")
    transfer_type: Optional[TransferType] = Field(None, description="BULK, SELECTIVE, EMERGENCY or DATE_RANGE")
    reason: Optional[str] = Field(None, max_length=500)
    notes: Optional[str] = Field(None, max_length=1000)

    # SELECTIVE
    session_ids: Optional[List[UUID]] = Field(None, description="Offering ids for a selective transfer")

    # DATE_RANGE, inclusive creation-time window
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None

    preserve_original_schedule: bool = Field(True, description="Keep the source offering after copying it")
    notify_participants: bool = True
    maintain_session_types: bool = True
    emergency_flag: bool = Field(False, description="Deactivate instead of deleting the source")

    @field_validator('start_date', 'end_date')
    @classmethod
    def as_naive_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Stored timestamps are naive UTC"""
        if v is not None and v.tzinfo is not None:
            return v.astimezone(timezone.utc).replace(tzinfo=None)
        return v

    @model_validator(mode='after')
    def force_emergency_disposal(self):
        # Emergency moves always deactivate the source
        if self.transfer_type == TransferType.EMERGENCY:
            self.emergency_flag = True
            self.preserve_original_schedule = False
        return self


class TransferSummary(CamelModel):
    model_config = ConfigDict(frozen=True)

    total_sessions: int = 0
    successful_transfers: int = 0
    failed_transfers: int = 0
    skipped_sessions: int = 0
    transfer_type: Optional[TransferType] = None


class SessionTransferResult(CamelModel):
    """Outcome for one offering in a batch"""
    model_config = ConfigDict(frozen=True)

    session_id: UUID
    session_title: str = ""
    status: ItemStatus
    reason: str = ""
    new_session_id: Optional[UUID] = None
    original_start_time: Optional[datetime] = None
    new_start_time: Optional[datetime] = None
    original_branch_id: Optional[UUID] = None
    new_branch_id: Optional[UUID] = None


class RollbackInfo(CamelModel):
    model_config = ConfigDict(frozen=True)

    rollback_available: bool = False
    rollback_reason: Optional[str] = None
    rollback_deadline: Optional[datetime] = None
    rollback_session_ids: List[UUID] = Field(default_factory=list)


class TransferOutcome(BaseResponse):
    """Result of one transfer invocation, stored in the ledger as-is"""
    model_config = ConfigDict(frozen=True)

    transfer_id: UUID
    status: TransferStatus
    source_branch_id: Optional[UUID] = None
    target_branch_id: Optional[UUID] = None
    transferred_at: datetime
    completed_at: datetime
    summary: Optional[TransferSummary] = None
    results: List[SessionTransferResult] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)
    reason: Optional[str] = None
    notes: Optional[str] = None
    rollback_info: Optional[RollbackInfo] = None
