"""Common configuration, constants and schemas for StreetLight alerts."""

from streetlight_alerts.common.config import StreetLightAlertsConfig, configure_logging
from streetlight_alerts.common.constants import (
    BROADCAST_TOPIC,
    DEFAULT_APP_NAME,
    USER_TOPIC_PREFIX,
    AndroidPriority,
    TargetKind,
)
from streetlight_alerts.common.schemas import PlatformHints, PushMessage

__all__ = [
    "StreetLightAlertsConfig",
    "configure_logging",
    "TargetKind",
    "AndroidPriority",
    "DEFAULT_APP_NAME",
    "BROADCAST_TOPIC",
    "USER_TOPIC_PREFIX",
    "PlatformHints",
    "PushMessage",
]
