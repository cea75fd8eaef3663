"""Mobile app contract constants — served to the recruiter app at startup.

The app's networking, cache and sync logic consume these values; only the
constants live here.
"""

from functools import lru_cache
from typing import Optional

from pydantic import BaseModel
from pydantic_settings import BaseSettings

NOTIFICATION_CHANNELS: dict[str, str] = {
    "DEFAULT": "default",
    "INTERVIEWS": "interviews",
    "APPLICATIONS": "applications",
    "URGENT": "urgent",
}

CACHE_KEYS: dict[str, str] = {
    "APPLICATIONS": "@talentgate/applications",
    "INTERVIEWS": "@talentgate/interviews",
    "USER": "@talentgate/user",
    "PENDING_ACTIONS": "@talentgate/pending_actions",
}

SYNC_INTERVAL_MS = 5 * 60 * 1000  # 5 minutes
MAX_RETRY_ATTEMPTS = 3


class MobileSettings(BaseSettings):
    """Mobile settings overridable via MOBILE_* environment variables."""

    API_BASE_URL: str = "http://localhost:3000/api/v1"

    model_config = {"env_prefix": "MOBILE_", "env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


class MobileConfig(BaseModel):
    """Mobile configuration as delivered to the app."""

    apiBaseUrl: str
    notificationChannels: dict[str, str]
    cacheKeys: dict[str, str]
    syncIntervalMs: int
    maxRetryAttempts: int


@lru_cache
def get_mobile_settings() -> MobileSettings:
    return MobileSettings()


def build_mobile_config(settings: Optional[MobileSettings] = None) -> MobileConfig:
    settings = settings or get_mobile_settings()
    return MobileConfig(
        apiBaseUrl=settings.API_BASE_URL,
        notificationChannels=dict(NOTIFICATION_CHANNELS),
        cacheKeys=dict(CACHE_KEYS),
        syncIntervalMs=SYNC_INTERVAL_MS,
        maxRetryAttempts=MAX_RETRY_ATTEMPTS,
    )
