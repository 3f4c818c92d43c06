from __future__ import annotations

from sesmailer.application.errors import ProviderConfigurationError
from sesmailer.config.settings import Settings, get_settings
from sesmailer.application.interfaces.transport import Transport
from sesmailer.infrastructure.email.client_factory import create_ses_client
from sesmailer.infrastructure.email.providers.logging_provider import LoggingEmailTransport
from sesmailer.infrastructure.email.providers.ses_provider import SESEmailTransport


def create_default_transport(settings: Settings | None = None) -> Transport:
    settings = settings or get_settings()
    if settings.email_provider == "ses":
        return SESEmailTransport(create_ses_client(settings))
    if settings.email_provider == "logging":
        return LoggingEmailTransport()
    raise ProviderConfigurationError(
        f"unknown email provider: {settings.email_provider}",
        details={"email_provider": settings.email_provider},
    )
