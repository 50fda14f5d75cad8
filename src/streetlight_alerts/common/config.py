"""Application configuration using Pydantic Settings."""

import logging
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

from streetlight_alerts.common.constants import DEFAULT_APP_NAME


class StreetLightAlertsConfig(BaseSettings):
    """Application configuration loaded from environment variables."""

    environment: Literal["dev", "staging", "prod"] = "dev"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    firebase_project_id: str = ""
    google_application_credentials: str = ""

    default_app_name: str = Field(default=DEFAULT_APP_NAME, min_length=1)
    dry_run: bool = False

    model_config = {"env_prefix": "STREETLIGHT_", "case_sensitive": False}


def configure_logging(config: StreetLightAlertsConfig) -> None:
    """Apply the configured log level to the root logger."""
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(config.log_level)


__all__ = ["StreetLightAlertsConfig", "configure_logging"]
