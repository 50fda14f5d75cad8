"""Notification payload derivation and dispatch."""

from __future__ import annotations

from streetlight_alerts.notifications.dispatch import (
    DeliveryTarget,
    DispatchResult,
    NotificationDispatcher,
    select_target,
)
from streetlight_alerts.notifications.payload import build_push_message

__all__ = [
    "DeliveryTarget",
    "DispatchResult",
    "NotificationDispatcher",
    "select_target",
    "build_push_message",
]
