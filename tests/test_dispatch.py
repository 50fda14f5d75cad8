"""Tests for notification dispatch."""

from __future__ import annotations

import logging

import pytest

from streetlight_alerts.common.config import StreetLightAlertsConfig
from streetlight_alerts.common.constants import BROADCAST_TOPIC, DEFAULT_APP_NAME, TargetKind
from streetlight_alerts.notifications.dispatch import (
    DeliveryTarget,
    DispatchResult,
    NotificationDispatcher,
    select_target,
)
from streetlight_alerts.transport.memory import RecordingTransport


# --- Helpers ---


def _dispatcher(transport: RecordingTransport | None = None) -> NotificationDispatcher:
    return NotificationDispatcher(transport or RecordingTransport(), StreetLightAlertsConfig())


class _FlakyTransport:
    def __init__(self, exc: BaseException) -> None:
        self.exc = exc

    def send_to_topic(self, topic, message):
        raise self.exc


# --- Target Tests ---


def test_target_enum():
    assert TargetKind.PER_USER == "per_user"
    assert TargetKind.BROADCAST == "broadcast"


def test_per_user_channel_name():
    target = DeliveryTarget.per_user("u1")
    assert target.kind == TargetKind.PER_USER
    assert target.channel_name == "user_u1"
    assert target.is_broadcast is False


def test_broadcast_channel_name():
    target = DeliveryTarget.broadcast()
    assert target.channel_name == BROADCAST_TOPIC == "street_lights_alerts"
    assert target.user_id is None
    assert target.is_broadcast is True


@pytest.mark.parametrize("user_id", ["u1", "abc-123", 77])
def test_select_per_user(user_id):
    target = select_target({"userId": user_id})
    assert target == DeliveryTarget.per_user(str(user_id))
    assert target.channel_name == f"user_{user_id}"


@pytest.mark.parametrize("record", [{}, {"userId": ""}, {"userId": None}])
def test_select_broadcast(record):
    assert select_target(record) == DeliveryTarget.broadcast()


# --- Dispatcher Tests ---


def test_scenario_per_user():
    transport = RecordingTransport()
    result = _dispatcher(transport).dispatch({"title": "Light Out", "userId": "u1"}, "d1")

    assert result.sent is True
    assert result.target == DeliveryTarget.per_user("u1")
    assert result.message.title == "Light Out"
    assert result.message.body == ""
    assert result.message.attributes["notificationId"] == "d1"
    assert transport.topics() == ["user_u1"]


def test_scenario_broadcast():
    transport = RecordingTransport()
    result = _dispatcher(transport).dispatch(
        {"message": "Bulb flicker", "lightName": "L-42"}, "d2",
    )

    assert result.target == DeliveryTarget.broadcast()
    assert result.message.title == DEFAULT_APP_NAME
    assert result.message.body == "Bulb flicker"
    assert result.message.attributes["lightName"] == "L-42"
    assert transport.topics() == ["street_lights_alerts"]


def test_scenario_nested_extra():
    result = _dispatcher().dispatch({"title": "X", "extra": {"a": 1}}, "d3")
    assert result.message.attributes["extra"] == '{"a":1}'


def test_scenario_transport_failure():
    transport = RecordingTransport(fail_with=RuntimeError("quota exceeded"))
    result = _dispatcher(transport).dispatch({"title": "X"}, "d4")

    assert isinstance(result, DispatchResult)
    assert result.sent is False
    assert result.response is None
    assert result.error == "quota exceeded"
    assert transport.attempts == 1
    assert transport.sent == []


def test_failure_without_message_uses_type_name():
    dispatcher = NotificationDispatcher(_FlakyTransport(ConnectionError()))
    result = dispatcher.dispatch({}, "d5")
    assert result.sent is False
    assert result.error == "ConnectionError"


def test_failure_is_logged(caplog):
    transport = RecordingTransport(fail_with=RuntimeError("boom"))
    with caplog.at_level(logging.ERROR, logger="streetlight_alerts.notifications.dispatch"):
        _dispatcher(transport).dispatch({}, "d6")
    assert "d6" in caplog.text
    assert "boom" in caplog.text


def test_target_is_logged(caplog):
    with caplog.at_level(logging.INFO, logger="streetlight_alerts.notifications.dispatch"):
        _dispatcher().dispatch({"userId": "u9"}, "d7")
    assert "topic=user_u9" in caplog.text


def test_exactly_one_send_per_record():
    transport = RecordingTransport()
    dispatcher = _dispatcher(transport)
    dispatcher.dispatch({"userId": "u1"}, "a")
    dispatcher.dispatch({}, "b")
    assert transport.topics() == ["user_u1", "street_lights_alerts"]


def test_success_result_carries_response():
    result = _dispatcher().dispatch({}, "d8")
    assert result.sent is True
    assert result.error is None
    assert result.response is not None
    assert result.response.topic == "street_lights_alerts"
    assert result.response.message_id == "projects/local/messages/1"
    assert result.record_id == "d8"


def test_none_record_treated_as_empty():
    result = _dispatcher().dispatch(None, "d9")
    assert result.sent is True
    assert result.target.is_broadcast
    assert result.message.title == DEFAULT_APP_NAME


def test_record_not_mutated():
    record = {"title": "T", "userId": "u1", "extra": {"a": 1}}
    _dispatcher().dispatch(record, "d10")
    assert record == {"title": "T", "userId": "u1", "extra": {"a": 1}}


def test_ids_match_record_id():
    attrs = _dispatcher().dispatch({"docId": "other"}, "d11").message.attributes
    assert attrs["notificationId"] == attrs["notification_id"] == attrs["docId"] == "d11"


def test_custom_default_app_name():
    config = StreetLightAlertsConfig(default_app_name="Depot Lights")
    dispatcher = NotificationDispatcher(RecordingTransport(), config)
    result = dispatcher.dispatch({}, "d12")
    assert result.message.title == "Depot Lights"
    assert result.message.attributes["appName"] == "Depot Lights"
    assert dispatcher.config is config
