"""Config settings – Settings base class and the library settings."""
from __future__ import annotations

import dataclasses
import logging

from callwire.config.validation.errors import InvalidSettingValueError
from callwire.observability.correlation.provider import DEFAULT_REQUEST_ID_ENV_KEY


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class CallwireSettings(Settings):
    """Settings read from ``CALLWIRE_*`` environment variables.

    ``request_id_env_key`` names the environment variable the default
    request id provider reads the inbound correlation id from.
    """

    _prefix: dataclasses.ClassVar[str] = "CALLWIRE"

    request_id_env_key: str = DEFAULT_REQUEST_ID_ENV_KEY
    log_level: str = "INFO"
    log_json: bool = True

    def _validate(self) -> None:
        if not self.request_id_env_key:
            raise InvalidSettingValueError(
                "request_id_env_key", self.request_id_env_key, "must not be empty"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError(
                "log_level", self.log_level, "unknown logging level"
            )
        self.log_level = self.log_level.upper()


__all__ = ["CallwireSettings", "Settings"]
