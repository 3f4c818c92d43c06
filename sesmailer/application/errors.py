from __future__ import annotations

from typing import Any, Mapping


class AppError(Exception):
    code = "app_error"

    def __init__(self, message: str, *, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(AppError):
    code = "validation_error"


class MessageValidationError(ValidationError):
    code = "message_validation_failed"


class InfrastructureError(AppError):
    code = "infrastructure_error"


class ProviderConfigurationError(InfrastructureError):
    code = "provider_configuration_error"
