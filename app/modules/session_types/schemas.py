# app/modules/session_types/schemas.py
from pydantic import ConfigDict, Field, field_validator
from typing import Optional
from datetime import datetime
from uuid import UUID

from app.shared.schemas.common import CamelModel


class SessionTypeCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100, description="Unique name of the consultation type")
    description: Optional[str] = Field(None, description="Free text description")
    default_duration_minutes: int = Field(..., gt=0, description="Default duration in minutes")
    is_telemedicine_available: bool = Field(False, description="Can be delivered remotely")
    is_active: bool = Field(True)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError("Name cannot be blank")
        return v.strip()


class SessionTypeUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    default_duration_minutes: Optional[int] = Field(None, gt=0)
    is_telemedicine_available: Optional[bool] = None
    is_active: Optional[bool] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if v is not None and not v.strip():
            raise ValueError("Name cannot be blank")
        return v.strip() if v else v


class SessionTypeResponse(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: Optional[str] = None
    default_duration_minutes: int
    is_telemedicine_available: bool
    is_active: bool
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
