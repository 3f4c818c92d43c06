from __future__ import annotations

import logging
from typing import Any, Protocol

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError

from sesmailer.application.errors import ProviderConfigurationError
from sesmailer.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class SESClient(Protocol):
    """The part of the boto3 SES client this package calls."""

    def send_email(self, **kwargs: Any) -> dict[str, Any]: ...


def create_ses_client(settings: Settings | None = None) -> SESClient:
    """Build an SES client using the standard AWS provider chain.

    Region, endpoint and retry attempts are taken from settings when set,
    otherwise boto3 resolves them (env vars, shared config, IAM role, etc.).

    Raises:
        ProviderConfigurationError: if the session or client cannot be created,
            for instance when no region can be resolved.
    """
    settings = settings or get_settings()
    client_kwargs: dict[str, Any] = {}
    if settings.ses_region:
        client_kwargs["region_name"] = settings.ses_region
    if settings.ses_endpoint_url:
        client_kwargs["endpoint_url"] = settings.ses_endpoint_url
    if settings.ses_max_attempts is not None:
        client_kwargs["config"] = Config(retries={"max_attempts": settings.ses_max_attempts})
    try:
        session = boto3.session.Session(profile_name=settings.aws_profile)
        return session.client("ses", **client_kwargs)
    except BotoCoreError as exc:
        logger.error("Could not create SES client: %s", exc)
        raise ProviderConfigurationError(
            f"could not create SES client: {exc}",
            details={"region": settings.ses_region, "profile": settings.aws_profile},
        ) from exc
