"""Mobile API — static configuration for the recruiter app."""

from fastapi import APIRouter

from talentgate.mobile import MobileConfig, build_mobile_config

router = APIRouter()


@router.get("/mobile/config", response_model=MobileConfig)
async def mobile_config():
    """API base URL, notification channels, cache keys and sync/retry settings."""
    return build_mobile_config()
