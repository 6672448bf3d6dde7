# app/modules/session_types/__init__.py
"""
Session Types Module - global catalog of consultation types

- Create, read, update and delete catalog entries
- Activation / deactivation (deactivation cascades to offerings)
- Soft delete and reactivation through the status column

Architecture:
- router.py: session type endpoints
- service.py: business rules (unique names, cascades)
- repository.py: data access
- schemas.py: request/response models
"""

from .router import router
from .service import SessionTypesService
from .repository import SessionTypeRepository

__all__ = [
    "router",
    "SessionTypesService",
    "SessionTypeRepository"
]
