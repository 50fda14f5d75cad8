"""Pydantic v2 schemas for outbound push messages."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from streetlight_alerts.common.constants import (
    ANDROID_CHANNEL_ID,
    APNS_CATEGORY,
    DEFAULT_SOUND,
    AndroidPriority,
)


class PlatformHints(BaseModel):
    """Delivery metadata interpreted by the client OS."""

    model_config = ConfigDict(frozen=True)

    android_priority: AndroidPriority = AndroidPriority.HIGH
    android_channel_id: str = ANDROID_CHANNEL_ID
    sound: str = DEFAULT_SOUND
    content_available: bool = True
    apns_category: str = APNS_CATEGORY


class PushMessage(BaseModel):
    """A push message ready for topic delivery.

    FCM only accepts string values in the data payload, so ``attributes``
    is a flat ``str -> str`` mapping.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(min_length=1)
    body: str = ""
    attributes: dict[str, str] = Field(default_factory=dict)
    hints: PlatformHints = Field(default_factory=PlatformHints)


__all__ = ["PlatformHints", "PushMessage"]
