"""Firestore document-created trigger adapter.

Wires ``notifications/{docId}`` creation events to the dispatcher. The
handler always returns normally so the event is acknowledged; a failed
send is not retried by re-running the trigger.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from streetlight_alerts.common.config import StreetLightAlertsConfig, configure_logging
from streetlight_alerts.notifications.dispatch import DispatchResult, NotificationDispatcher

logger = logging.getLogger(__name__)

_dispatcher: NotificationDispatcher | None = None


def get_dispatcher() -> NotificationDispatcher:
    """Process-wide dispatcher backed by FCM, built on first use."""
    global _dispatcher
    if _dispatcher is None:
        from streetlight_alerts.transport.fcm import FCMTopicTransport, initialize_firebase_app

        config = StreetLightAlertsConfig()
        configure_logging(config)
        app = initialize_firebase_app(config)
        _dispatcher = NotificationDispatcher(FCMTopicTransport(config, app=app), config)
    return _dispatcher


def reset_dispatcher() -> None:
    """Drop the cached dispatcher so the next call rebuilds it from config."""
    global _dispatcher
    _dispatcher = None


def handle_document_created(
    data: Mapping[str, Any] | None,
    doc_id: str,
    dispatcher: NotificationDispatcher | None = None,
) -> DispatchResult:
    """Dispatch the push notification for one created document."""
    dispatcher = dispatcher or get_dispatcher()
    return dispatcher.dispatch(data or {}, doc_id)


def _snapshot_data(snapshot: Any) -> Mapping[str, Any]:
    if snapshot is None:
        return {}
    to_dict = getattr(snapshot, "to_dict", None)
    if to_dict is not None:
        return to_dict() or {}
    return snapshot


def on_notification_create(
    event: Any, dispatcher: NotificationDispatcher | None = None,
) -> None:
    """Entry point for a Firestore ``on_document_created`` event.

    Expects ``event.params["docId"]`` and ``event.data`` holding the new
    document snapshot (or ``None``).
    """
    doc_id = str(event.params["docId"])
    result = handle_document_created(_snapshot_data(event.data), doc_id, dispatcher)
    if not result.sent:
        logger.warning(
            "Notification doc=%s not delivered to topic=%s: %s",
            doc_id, result.target.channel_name, result.error,
        )
    return None


__all__ = [
    "get_dispatcher",
    "reset_dispatcher",
    "handle_document_created",
    "on_notification_create",
]
