"""Public entry points: build a message with options, then call ``send()``.

    from sesmailer import mail

    message = mail.new(
        mail.from_email("from@example.com"),
        mail.to("someone@example.com"),
        mail.subject("Hello"),
        mail.text_body("Hi there"),
    )
    message.send()
"""

from __future__ import annotations

from sesmailer.config.settings import Settings
from sesmailer.application.message import (
    Message,
    Option,
    bcc,
    cc,
    from_email,
    html_body,
    new_with_transport,
    subject,
    text_body,
    to,
)
from sesmailer.infrastructure.email.factory import create_default_transport

__all__ = [
    "Message",
    "Option",
    "bcc",
    "cc",
    "from_email",
    "html_body",
    "new",
    "new_with_transport",
    "subject",
    "text_body",
    "to",
]


def new(*options: Option, settings: Settings | None = None) -> Message:
    """Return a message bound to the configured default transport (SES unless overridden).

    Raises ProviderConfigurationError straight away if the SES client cannot be built.
    """
    return new_with_transport(create_default_transport(settings), *options)
