"""Firebase Cloud Messaging topic transport.

Publishes push messages to FCM topics through the Firebase Admin SDK.
The default Firebase app is created lazily and shared by the process.
"""

from __future__ import annotations

import logging
from typing import Any

import firebase_admin
from firebase_admin import credentials, messaging

from streetlight_alerts.common.config import StreetLightAlertsConfig
from streetlight_alerts.common.schemas import PushMessage
from streetlight_alerts.transport.base import TransportResult

logger = logging.getLogger(__name__)

_firebase_app: firebase_admin.App | None = None


def _build_credential(config: StreetLightAlertsConfig) -> credentials.Base:
    if config.google_application_credentials:
        return credentials.Certificate(config.google_application_credentials)
    return credentials.ApplicationDefault()


def initialize_firebase_app(config: StreetLightAlertsConfig) -> firebase_admin.App:
    """Return the default Firebase app, initializing it on first use.

    The emulator and warm function instances may have initialized the
    default app already; that app is reused.
    """
    global _firebase_app
    if _firebase_app is not None:
        return _firebase_app
    try:
        _firebase_app = firebase_admin.get_app()
        return _firebase_app
    except ValueError:
        pass

    options: dict[str, Any] = {}
    if config.firebase_project_id:
        options["projectId"] = config.firebase_project_id
    # Credential errors propagate unchanged.
    cred = _build_credential(config)
    try:
        _firebase_app = firebase_admin.initialize_app(cred, options or None)
    except ValueError as e:
        logger.info("firebase_admin.initialize_app() error (probably already initialized): %s", e)
        _firebase_app = firebase_admin.get_app()
    return _firebase_app


def reset_firebase_app() -> None:
    """Forget the cached app handle (the SDK registry is left untouched)."""
    global _firebase_app
    _firebase_app = None


class FCMTopicTransport:
    """Sends push messages to FCM topics."""

    def __init__(
        self,
        config: StreetLightAlertsConfig | None = None,
        app: firebase_admin.App | None = None,
    ) -> None:
        self._config = config or StreetLightAlertsConfig()
        self._app = app

    @property
    def config(self) -> StreetLightAlertsConfig:
        return self._config

    @property
    def app(self) -> firebase_admin.App:
        if self._app is None:
            self._app = initialize_firebase_app(self._config)
        return self._app

    @staticmethod
    def build_message(topic: str, push: PushMessage) -> messaging.Message:
        """Translate a push message into an FCM topic message."""
        hints = push.hints
        return messaging.Message(
            topic=topic,
            notification=messaging.Notification(title=push.title, body=push.body),
            data=dict(push.attributes),
            android=messaging.AndroidConfig(
                priority=str(hints.android_priority),
                notification=messaging.AndroidNotification(
                    channel_id=hints.android_channel_id,
                    sound=hints.sound,
                    default_sound=True,
                ),
            ),
            apns=messaging.APNSConfig(
                payload=messaging.APNSPayload(
                    aps=messaging.Aps(
                        sound=hints.sound,
                        content_available=hints.content_available,
                        category=hints.apns_category,
                    ),
                ),
            ),
        )

    def send_to_topic(self, topic: str, message: PushMessage) -> TransportResult:
        """Send one message; FirebaseError and network errors propagate."""
        fcm_message = self.build_message(topic, message)
        dry_run = self._config.dry_run
        message_id = messaging.send(fcm_message, dry_run=dry_run, app=self.app)
        logger.debug("FCM accepted message %s for topic %s", message_id, topic)
        return TransportResult(topic=topic, message_id=message_id, dry_run=dry_run)


__all__ = ["FCMTopicTransport", "initialize_firebase_app", "reset_firebase_app"]
