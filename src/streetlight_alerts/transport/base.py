"""Push transport interface."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from streetlight_alerts.common.schemas import PushMessage


@dataclass(frozen=True)
class TransportResult:
    """Outcome of a successful topic send."""

    topic: str
    message_id: str
    dry_run: bool = False


class PushTransport(Protocol):
    """Anything that can publish a push message to a named topic.

    Implementations raise on failure; callers decide how to contain it.
    """

    def send_to_topic(self, topic: str, message: PushMessage) -> TransportResult:
        ...


__all__ = ["TransportResult", "PushTransport"]
