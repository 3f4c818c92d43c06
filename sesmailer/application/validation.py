from __future__ import annotations

from typing import TYPE_CHECKING

from sesmailer.application.errors import ValidationError
from sesmailer.domain.value_objects.email_address import is_valid_email

if TYPE_CHECKING:
    from sesmailer.application.message import Message


def validate_message(message: Message) -> None:
    """Raise ValidationError with the first failing rule, checked in a fixed order."""
    if message.transport is None:
        raise ValidationError("sender is not defined")
    if not message.from_email:
        raise ValidationError("from email is required")
    if not is_valid_email(message.from_email):
        raise ValidationError("invalid from email")
    if len(message.to) < 1:
        raise ValidationError("at least one to email is required")
    for address in message.to:
        if not is_valid_email(address):
            raise ValidationError("invalid to email")
