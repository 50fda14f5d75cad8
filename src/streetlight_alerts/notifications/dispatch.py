"""Notification dispatch service.

Relays a newly created notification document to exactly one FCM topic:
the user's own topic when the document names a user, otherwise the shared
street-lights alerts topic. Transport failures are logged and reported in
the result, never raised, so the trigger layer always sees the event as
handled.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from streetlight_alerts.common.config import StreetLightAlertsConfig
from streetlight_alerts.common.constants import (
    BROADCAST_TOPIC,
    USER_TOPIC_PREFIX,
    TargetKind,
)
from streetlight_alerts.common.schemas import PushMessage
from streetlight_alerts.notifications.payload import build_push_message
from streetlight_alerts.transport.base import PushTransport, TransportResult

logger = logging.getLogger(__name__)


# --- Data Models ---


@dataclass(frozen=True)
class DeliveryTarget:
    """The single topic a record is delivered to."""

    kind: TargetKind
    user_id: str | None = None

    @classmethod
    def per_user(cls, user_id: str) -> DeliveryTarget:
        return cls(kind=TargetKind.PER_USER, user_id=user_id)

    @classmethod
    def broadcast(cls) -> DeliveryTarget:
        return cls(kind=TargetKind.BROADCAST)

    @property
    def channel_name(self) -> str:
        if self.kind == TargetKind.PER_USER:
            return f"{USER_TOPIC_PREFIX}{self.user_id}"
        return BROADCAST_TOPIC

    @property
    def is_broadcast(self) -> bool:
        return self.kind == TargetKind.BROADCAST


@dataclass(frozen=True)
class DispatchResult:
    """Result of dispatching one notification record."""

    record_id: str
    target: DeliveryTarget
    sent: bool
    message: PushMessage
    response: TransportResult | None = None
    error: str | None = None
    timestamp: float = field(default_factory=time.time)


def select_target(record: Mapping[str, Any]) -> DeliveryTarget:
    """Per-user topic when ``userId`` is set, broadcast otherwise."""
    user_id = record.get("userId")
    if user_id:
        return DeliveryTarget.per_user(str(user_id))
    return DeliveryTarget.broadcast()


# --- Notification Dispatcher ---


class NotificationDispatcher:
    """Builds the push message for a record and sends it to one topic."""

    def __init__(
        self,
        transport: PushTransport,
        config: StreetLightAlertsConfig | None = None,
    ) -> None:
        self._transport = transport
        self._config = config or StreetLightAlertsConfig()

    @property
    def config(self) -> StreetLightAlertsConfig:
        return self._config

    @property
    def transport(self) -> PushTransport:
        return self._transport

    def dispatch(
        self, record: Mapping[str, Any] | None, record_id: str,
    ) -> DispatchResult:
        """Dispatch a push notification for a newly created record.

        Never raises on transport failure: the error is logged and carried
        in the returned ``DispatchResult`` with ``sent=False``.
        """
        record = record or {}
        message = build_push_message(record, record_id, self._config.default_app_name)
        target = select_target(record)
        topic = target.channel_name

        if target.is_broadcast:
            logger.info(
                "No userId - sending notification for doc=%s to topic=%s",
                record_id, topic,
            )
        else:
            logger.info("Sending notification for doc=%s to topic=%s", record_id, topic)

        try:
            response = self._transport.send_to_topic(topic, message)
        except Exception as e:
            logger.exception(
                "Error sending FCM for notification create doc=%s: %s", record_id, e,
            )
            return DispatchResult(
                record_id=record_id,
                target=target,
                sent=False,
                message=message,
                error=str(e) or type(e).__name__,
            )

        logger.info("FCM send result for doc=%s: %s", record_id, response)
        return DispatchResult(
            record_id=record_id,
            target=target,
            sent=True,
            message=message,
            response=response,
        )


__all__ = [
    "DeliveryTarget",
    "DispatchResult",
    "NotificationDispatcher",
    "select_target",
]
