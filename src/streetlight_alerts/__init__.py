"""StreetLight alerts: relay new notification documents to FCM topics."""

__version__ = "0.1.0"
