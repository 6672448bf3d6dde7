# app/api/v1/router.py
from fastapi import APIRouter
from app.modules.session_types.router import router as session_types_router
from app.modules.session_transfers.router import router as session_transfers_router
from app.modules.session_offerings.router import router as session_offerings_router


# Main router of API v1
api_router = APIRouter()

api_router.include_router(
    session_types_router,
    prefix="/session-types",
    tags=["Session Types"]
)

# Registered before /sessions so /sessions/transfer is never read as an offering id
api_router.include_router(
    session_transfers_router,
    prefix="/sessions/transfer",
    tags=["Session Transfers"]
)

api_router.include_router(
    session_offerings_router,
    prefix="/sessions",
    tags=["Session Offerings"]
)

@api_router.get("/")
async def api_root():
    """Root endpoint of the API"""
    return {
        "message": "Session Offering Service API v1",
        "version": "1.0.0",
        "status": "active",
        "docs": "/docs",
        "available_endpoints": {
            "session_types": "/api/v1/session-types",
            "sessions": "/api/v1/sessions",
            "transfers": "/api/v1/sessions/transfer"
        }
    }

@api_router.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "service": "Session Offering Service",
        "version": "1.0.0",
        "modules": {
            "session_types": {
                "status": "active",
                "features": ["Global catalog", "Cascading deactivation", "Soft delete"]
            },
            "sessions": {
                "status": "active",
                "features": ["Branch offerings", "Doctor validation", "Soft delete"]
            },
            "transfers": {
                "status": "active",
                "features": ["BULK", "SELECTIVE", "DATE_RANGE", "EMERGENCY", "Status lookup"]
            }
        }
    }
