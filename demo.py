#!/usr/bin/env python3
"""
StreetLight Alerts Demo Script.

Runs a few sample notification documents through the dispatcher using the
in-process recording transport, so no Firebase project is needed. It shows:
1. Per-user versus broadcast topic selection.
2. The derived title, body and string-only data payload.
3. A transport failure being contained in the result.

Usage:
    pip install -e .
    python demo.py
"""

import json

from streetlight_alerts.common.config import StreetLightAlertsConfig, configure_logging
from streetlight_alerts.notifications.dispatch import NotificationDispatcher
from streetlight_alerts.transport.memory import RecordingTransport

SAMPLE_DOCUMENTS = [
    ("d1", {"title": "Light Out", "userId": "u1", "lightId": "L-7"}),
    ("d2", {"message": "Bulb flicker", "lightName": "L-42"}),
    ("d3", {"title": "Voltage drop", "extra": {"a": 1}, "readings": [221.5, 198.0]}),
]


def print_result(result):
    print(f"--- doc={result.record_id} ---")
    print(f"  topic:  {result.target.channel_name} ({result.target.kind})")
    print(f"  title:  {result.message.title}")
    print(f"  body:   {result.message.body!r}")
    print(f"  sent:   {result.sent}")
    if result.error:
        print(f"  error:  {result.error}")
    print("  data:")
    print(json.dumps(result.message.attributes, indent=4, ensure_ascii=False))


def main():
    config = StreetLightAlertsConfig(log_level="WARNING")
    configure_logging(config)

    dispatcher = NotificationDispatcher(RecordingTransport(), config)
    for doc_id, data in SAMPLE_DOCUMENTS:
        print_result(dispatcher.dispatch(data, doc_id))

    print("\nSimulating a transport outage...")
    failing = NotificationDispatcher(
        RecordingTransport(fail_with=ConnectionError("FCM unreachable")), config,
    )
    print_result(failing.dispatch({"title": "Light Out", "userId": "u2"}, "d4"))


if __name__ == "__main__":
    main()
