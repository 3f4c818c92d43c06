from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from sesmailer.application.errors import MessageValidationError, ValidationError
from sesmailer.application.interfaces.transport import Transport
from sesmailer.application.validation import validate_message

logger = logging.getLogger(__name__)

Option = Callable[["Message"], None]


@dataclass(slots=True)
class Message:
    from_email: str = ""
    to: list[str] = field(default_factory=list)
    cc: list[str] = field(default_factory=list)
    bcc: list[str] = field(default_factory=list)
    subject: str = ""
    text: str = ""
    html: str = ""
    transport: Transport | None = field(default=None, repr=False, compare=False)

    @classmethod
    def create(cls, transport: Transport | None, *options: Option) -> Message:
        message = cls(transport=transport)
        for option in options:
            option(message)
        return message

    def send(self) -> Any:
        try:
            validate_message(self)
        except ValidationError as exc:
            logger.debug("Message not sent: %s", exc.message)
            raise MessageValidationError(
                f"message validation failed: {exc.message}",
                details={"reason": exc.message},
            ) from exc
        return self.transport.send(self)


def new_with_transport(transport: Transport | None, *options: Option) -> Message:
    return Message.create(transport, *options)


def from_email(address: str) -> Option:
    def apply(message: Message) -> None:
        message.from_email = address

    return apply


def to(*addresses: str) -> Option:
    def apply(message: Message) -> None:
        message.to = list(addresses)

    return apply


def cc(*addresses: str) -> Option:
    def apply(message: Message) -> None:
        message.cc = list(addresses)

    return apply


def bcc(*addresses: str) -> Option:
    def apply(message: Message) -> None:
        message.bcc = list(addresses)

    return apply


def subject(value: str) -> Option:
    def apply(message: Message) -> None:
        message.subject = value

    return apply


def text_body(value: str) -> Option:
    def apply(message: Message) -> None:
        message.text = value

    return apply


def html_body(value: str) -> Option:
    def apply(message: Message) -> None:
        message.html = value

    return apply
