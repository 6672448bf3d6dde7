# app/modules/session_offerings/__init__.py
"""
Session Offerings Module - what each doctor offers at each branch

- Create offerings (session type must exist, doctor optionally validated)
- Price and activation changes
- Soft delete and reactivation
- Branch listing restricted to the caller's branches

The repository here is also the store used by session transfers.
"""

from .router import router
from .service import SessionOfferingsService
from .repository import SessionOfferingRepository

__all__ = [
    "router",
    "SessionOfferingsService",
    "SessionOfferingRepository"
]
