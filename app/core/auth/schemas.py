from pydantic import BaseModel, Field
from typing import List, Optional
from uuid import UUID


class Roles:
    ADMIN = "ADMIN"
    BRANCH_MANAGER = "BRANCH_MANAGER"
    DOCTOR = "DOCTOR"
    RECEPTIONIST = "RECEPTIONIST"
    PATIENT = "PATIENT"


class CurrentPrincipal(BaseModel):
    """Authenticated caller as read from the bearer token"""
    user_id: str = Field(..., description="Subject of the token")
    roles: List[str] = Field(default_factory=list)
    branch_ids: List[UUID] = Field(default_factory=list)
    primary_branch_id: Optional[UUID] = None

    def has_role(self, role: str) -> bool:
        return role in self.roles

    def has_any_role(self, roles: List[str]) -> bool:
        return any(role in self.roles for role in roles)

    class Config:
        json_schema_extra = {
            "example": {
                "user_id": "5d1f0a6e-93c2-4a1b-8f0e-2b4c7a9d1e33",
                "roles": ["BRANCH_MANAGER"],
                "branch_ids": ["0b7e3c55-8d9f-4a21-9c3e-6f2a1b8d4e10"],
                "primary_branch_id": "0b7e3c55-8d9f-4a21-9c3e-6f2a1b8d4e10"
            }
        }
