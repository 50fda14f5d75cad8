"""Constants and enums for StreetLight alerts."""

from enum import StrEnum
from typing import Final


class TargetKind(StrEnum):
    """Kinds of FCM delivery target."""

    PER_USER = "per_user"
    BROADCAST = "broadcast"


class AndroidPriority(StrEnum):
    """Android message priority used for alerts."""

    HIGH = "high"


DEFAULT_APP_NAME: Final[str] = "StreetLight Monitor"

# Topics
BROADCAST_TOPIC: Final[str] = "street_lights_alerts"
USER_TOPIC_PREFIX: Final[str] = "user_"

# Platform hints
ANDROID_CHANNEL_ID: Final[str] = "street_lights_channel"
DEFAULT_SOUND: Final[str] = "default"
APNS_CATEGORY: Final[str] = "STREET_LIGHTS"

# Firestore
NOTIFICATIONS_COLLECTION: Final[str] = "notifications"
NOTIFICATION_DOCUMENT_PATH: Final[str] = f"{NOTIFICATIONS_COLLECTION}/{{docId}}"

# Attribute keys injected into every data payload
ID_ATTRIBUTE_KEYS: Final[tuple[str, ...]] = ("notificationId", "notification_id", "docId")

__all__ = [
    "TargetKind",
    "AndroidPriority",
    "DEFAULT_APP_NAME",
    "BROADCAST_TOPIC",
    "USER_TOPIC_PREFIX",
    "ANDROID_CHANNEL_ID",
    "DEFAULT_SOUND",
    "APNS_CATEGORY",
    "NOTIFICATIONS_COLLECTION",
    "NOTIFICATION_DOCUMENT_PATH",
    "ID_ATTRIBUTE_KEYS",
]
