from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

_CONFIRMATION_TEMPLATE_ENV = "RECORD_VALIDATIONS_CONFIRMATION_TEMPLATE"
_LOG_FAILURES_ENV = "RECORD_VALIDATIONS_LOG_FAILURES"


def _env_flag(name: str, default: str = "1") -> bool:
    value = os.getenv(name, default)
    return value.lower() not in {"0", "false", "no"}


@dataclass(frozen=True)
class ValidationSettings:
    """Settings for attribute validation."""

    confirmation_template: str = field(
        default_factory=lambda: os.getenv(_CONFIRMATION_TEMPLATE_ENV, "{name}_confirmation")
    )
    log_failures: bool = field(default_factory=lambda: _env_flag(_LOG_FAILURES_ENV, "1"))

    def confirmation_name(self, name: str) -> str:
        """Name of the attribute holding the confirmation of ``name``."""
        return self.confirmation_template.format(name=name)


@lru_cache(maxsize=1)
def get_settings() -> ValidationSettings:
    """Get the default settings instance (read from the environment once)."""
    return ValidationSettings()
