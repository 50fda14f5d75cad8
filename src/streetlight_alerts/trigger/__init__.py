"""Datastore trigger adapters."""

from streetlight_alerts.trigger.firestore import (
    handle_document_created,
    on_notification_create,
)

__all__ = ["handle_document_created", "on_notification_create"]
