"""Push transports: FCM topics and an in-process recorder."""

from streetlight_alerts.transport.base import PushTransport, TransportResult
from streetlight_alerts.transport.memory import RecordingTransport

__all__ = ["PushTransport", "TransportResult", "RecordingTransport"]
