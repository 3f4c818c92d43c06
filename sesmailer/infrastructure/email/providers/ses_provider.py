from __future__ import annotations

import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from sesmailer.application.message import Message
from sesmailer.infrastructure.email.client_factory import SESClient

logger = logging.getLogger(__name__)

CHARSET = "UTF-8"


def _content(data: str) -> dict[str, str]:
    return {"Data": data, "Charset": CHARSET}


def message_to_ses_input(message: Message) -> dict[str, Any]:
    """Map a message to the keyword arguments of ``SES.Client.send_email``.

    Optional fields are left out entirely when empty; ``Message.Body`` is
    always present, even as an empty dict.
    """
    destination: dict[str, list[str]] = {"ToAddresses": list(message.to)}
    if message.cc:
        destination["CcAddresses"] = list(message.cc)
    if message.bcc:
        destination["BccAddresses"] = list(message.bcc)

    body: dict[str, Any] = {}
    if message.text:
        body["Text"] = _content(message.text)
    if message.html:
        body["Html"] = _content(message.html)

    ses_message: dict[str, Any] = {"Body": body}
    if message.subject:
        ses_message["Subject"] = _content(message.subject)

    return {
        "Source": message.from_email,
        "Destination": destination,
        "Message": ses_message,
    }


class SESEmailTransport:
    def __init__(self, client: SESClient) -> None:
        self.client = client

    def send(self, message: Message) -> None:
        request = message_to_ses_input(message)
        try:
            response = self.client.send_email(**request)
        except (BotoCoreError, ClientError) as exc:
            logger.error("SES send failed: %s", exc)
            raise
        logger.info(
            "Email sent via SES: to=%s message_id=%s",
            ",".join(message.to),
            (response or {}).get("MessageId", "unknown"),
        )
