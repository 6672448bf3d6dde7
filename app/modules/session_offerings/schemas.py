# app/modules/session_offerings/schemas.py
from pydantic import ConfigDict, Field
from typing import Optional
from decimal import Decimal
from datetime import datetime
from uuid import UUID

from app.shared.schemas.common import CamelModel


class SessionOfferingCreate(CamelModel):
    doctor_id: UUID = Field(..., description="Owning doctor")
    branch_id: Optional[UUID] = Field(None, description="Branch the offering belongs to")
    session_type_id: UUID = Field(..., description="Catalog entry")
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2, description="Price of the session")
    is_active: bool = Field(True)


class SessionOfferingUpdate(CamelModel):
    """Only price and the active flag can change after creation"""
    price: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
    is_active: Optional[bool] = None


class SessionOfferingResponse(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    doctor_id: UUID
    branch_id: Optional[UUID] = None
    session_type_id: UUID
    session_type_name: str
    price: Decimal
    is_active: bool
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
