"""In-process transport that records sends instead of delivering them."""

from __future__ import annotations

from dataclasses import dataclass, field

from streetlight_alerts.common.schemas import PushMessage
from streetlight_alerts.transport.base import TransportResult


@dataclass
class RecordingTransport:
    """Collects every ``(topic, message)`` it is asked to send.

    Set ``fail_with`` to make each send raise that exception instead.
    """

    fail_with: Exception | None = None
    sent: list[tuple[str, PushMessage]] = field(default_factory=list)
    attempts: int = 0

    def send_to_topic(self, topic: str, message: PushMessage) -> TransportResult:
        self.attempts += 1
        if self.fail_with is not None:
            raise self.fail_with
        self.sent.append((topic, message))
        return TransportResult(
            topic=topic,
            message_id=f"projects/local/messages/{len(self.sent)}",
        )

    def topics(self) -> list[str]:
        return [topic for topic, _ in self.sent]


__all__ = ["RecordingTransport"]
