from __future__ import annotations

import logging

from sesmailer.application.message import Message

logger = logging.getLogger(__name__)


class LoggingEmailTransport:
    """Writes a one-line summary instead of delivering; bodies are reported by size only."""

    def send(self, message: Message) -> None:
        logger.info(
            "Email not delivered (logging transport): from=%s recipients=%d "
            "subject=%r text_len=%d html_len=%d",
            message.from_email,
            len(message.to) + len(message.cc) + len(message.bcc),
            message.subject,
            len(message.text),
            len(message.html),
        )
