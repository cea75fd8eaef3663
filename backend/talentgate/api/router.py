"""Main API router — combines all endpoint routers."""

from fastapi import APIRouter

from talentgate.api.contracts import router as contracts_router
from talentgate.api.health import router as health_router
from talentgate.api.mobile import router as mobile_router

api_router = APIRouter()

# Health check
api_router.include_router(health_router, tags=["Health"])

# Contract introspection and validation
api_router.include_router(contracts_router, tags=["Contracts"])

# Mobile app configuration
api_router.include_router(mobile_router, tags=["Mobile"])
